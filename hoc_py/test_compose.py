"""Tests for enhancer composition."""

import pytest

from hoc_py import (
    ContainerComponent,
    MutationViolation,
    TypeConstraintError,
    compose,
    create_container,
    default_props,
    enhancer,
    get_display_name,
    identity,
    mounted,
    override_settings,
    pure,
    rename_prop,
    with_props,
)


def _chain():
    return [with_props({"a": 1}), pure(), rename_prop("b", "c"), default_props({"d": 4})]


def _output(component, props):
    with mounted(component, props) as root:
        return root.output


class TestCompose:
    """Test compose() semantics."""

    def test_empty_returns_identity(self, Base):
        assert compose() is identity
        assert compose()(Base) is Base

    def test_single_enhancer_returned_unchanged(self):
        enhance = with_props({"a": 1})
        assert compose(enhance) is enhance

    def test_list_argument(self, Base):
        a, b = with_props({"a": 1}), pure()
        assert get_display_name(compose([a, b])(Base)) == get_display_name(compose(a, b)(Base))

    def test_applies_right_to_left(self, Base):
        composed = compose(with_props({"x": 1}), pure())(Base)
        assert get_display_name(composed) == "withProps(pure(Base))"

    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4])
    def test_matches_manual_nesting(self, Base, length):
        enhancers = _chain()[:length]
        composed = compose(*enhancers)(Base)

        manual = Base
        for enhance in reversed(enhancers):
            manual = enhance(manual)

        assert get_display_name(composed) == get_display_name(manual)
        props = {"id": 1, "b": 2}
        assert _output(composed, props) == _output(manual, props)

    def test_associative(self, Base):
        a, b, c = with_props({"a": 1}), rename_prop("b", "c"), default_props({"d": 4})
        left = compose(compose(a, b), c)(Base)
        right = compose(a, compose(b, c))(Base)

        assert get_display_name(left) == get_display_name(right)
        props = {"id": 7, "b": "bee"}
        assert _output(left, props) == _output(right, props)
        assert _output(left, props) == {"id": 7, "a": 1, "c": "bee", "d": 4}

    def test_identities_collapse(self, Base):
        assert compose(identity, compose())(Base) is Base

    def test_result_is_new_component(self, Base):
        composed = compose(pure(), with_props({"a": 1}))(Base)
        assert composed is not Base
        assert issubclass(composed, ContainerComponent)
        assert not issubclass(composed, Base)


class TestComposeErrors:
    """compose() rejects anything that is not a unary enhancer."""

    def test_rejects_non_callable(self):
        with pytest.raises(TypeConstraintError):
            compose(pure(), 42)

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            compose("with_props")

    def test_rejects_binary_function(self):
        with pytest.raises(TypeConstraintError, match="exactly one"):
            compose(lambda component, extra: component)

    def test_rejects_nullary_function(self):
        with pytest.raises(TypeConstraintError):
            compose(lambda: None)

    def test_rejects_component_in_place_of_enhancer(self, Base):
        with pytest.raises(TypeConstraintError, match="where an enhancer was expected"):
            compose(pure(), Base)

    def test_accepts_optional_parameters(self, Base):
        def tagged(component, tag="t"):
            return create_container(component, tag)

        assert get_display_name(compose(tagged, pure())(Base)) == "t(pure(Base))"

    def test_plain_function_returning_input(self, Base):
        with pytest.raises(MutationViolation):
            compose(lambda component: component, pure())(Base)

    def test_plain_function_returning_non_component(self, Base):
        with pytest.raises(TypeConstraintError, match="must return a Component"):
            compose(lambda component: "nope", pure())(Base)

    def test_composed_rejects_non_component(self):
        with pytest.raises(TypeConstraintError):
            compose(pure(), pure())("not a component")


class TestEnhancerDecorator:
    """The @enhancer contract checks."""

    def test_rejects_non_component_input(self):
        with pytest.raises(TypeConstraintError, match="expects a Component"):
            pure()(object)

    def test_returning_input_is_a_violation(self, Base):
        @enhancer
        def lazy(component):
            return component

        with pytest.raises(MutationViolation, match="lazy"):
            lazy(Base)

    def test_writing_through_input_is_a_violation(self, Base):
        @enhancer(name="patching")
        def patching(component):
            component.patched = True
            return create_container(component, "patching")

        with pytest.raises(MutationViolation) as info:
            patching(Base)
        assert info.value.changed == ["patched"]

    def test_mutation_check_can_be_disabled(self, Base):
        @enhancer
        def patching(component):
            component.patched = True
            return create_container(component, "patching")

        with override_settings(check_mutation=False):
            assert patching(Base).patched is True

    def test_input_statics_unchanged(self, Base):
        Base.helper = staticmethod(lambda: "help")
        before = dict(vars(Base))
        compose(with_props({"a": 1}), pure(), rename_prop("b", "c"))(Base)
        assert dict(vars(Base)) == before

    def test_hoc_name(self):
        assert pure().hoc_name == "pure"
        assert compose(pure(), with_props({})).hoc_name == "compose(pure, withProps)"
