"""Tests for static metadata preservation."""

from hoc_py import (
    ContainerComponent,
    compose,
    create_container,
    default_props,
    pure,
    with_props,
)
from hoc_py.statics import RESERVED_STATICS, hoist_statics, own_statics


class TestOwnStatics:

    def test_collects_public_class_attributes(self, Base):
        Base.TAG = "tag"
        Base._private = "hidden"
        statics = own_statics(Base)
        assert statics["TAG"] == "tag"
        assert "_private" not in statics

    def test_walks_user_bases(self, Base):
        Base.TAG = "tag"

        class Sub(Base):
            LEVEL = 2

        statics = own_statics(Sub)
        assert statics["TAG"] == "tag"
        assert statics["LEVEL"] == 2

    def test_skips_instance_members(self, Base):
        Base.helper = lambda self: 1
        Base.label = property(lambda self: "x")
        Base.build = classmethod(lambda cls: cls)
        statics = own_statics(Base)
        assert "render" not in statics
        assert "helper" not in statics
        assert "label" not in statics
        assert "build" in statics

    def test_subclass_method_shadows_base_value(self, Base):
        Base.TAG = "tag"

        class Sub(Base):
            def TAG(self):
                return "method"

        assert "TAG" not in own_statics(Sub)

    def test_stops_at_framework_classes(self, Base):
        assert "force_update" not in own_statics(Base)
        assert "child_props" not in own_statics(create_container(Base, "w"))


class TestHoistStatics:

    def test_copies_helpers_and_values(self, Base):
        Base.fetch = staticmethod(lambda: 42)
        Base.TAG = "tag"
        container = create_container(Base, "w")
        assert container.fetch() == 42
        assert container.TAG == "tag"

    def test_skips_reserved_names(self, Base):
        Base.display_name = "Fancy"
        container = create_container(Base, "w")
        assert own_statics(Base)["display_name"] == "Fancy"
        assert vars(container).get("render") is None
        assert container.render is ContainerComponent.render
        assert container.display_name == "w(Fancy)"

    def test_instance_methods_stay_on_the_wrapped_class(self, Base):
        Base.helper = lambda self: dict(self.props)
        Base.build = classmethod(lambda cls: cls.__name__)
        container = create_container(Base, "w")
        assert "helper" not in vars(container)
        assert not hasattr(container, "helper")
        assert container.build() == container.__name__

    def test_skips_private_names(self, Base):
        Base._cache = {}
        assert "_cache" not in vars(create_container(Base, "w"))

    def test_keeps_container_definitions(self, Base):
        Base.TAG = "theirs"
        container = create_container(Base, "w", namespace={"TAG": "mine"})
        assert container.TAG == "mine"

    def test_exclude(self, Base):
        Base.TAG = "tag"
        container = type("Bare", (ContainerComponent,), {})
        hoist_statics(container, Base, exclude=["TAG"])
        assert not hasattr(container, "TAG")

    def test_idempotent(self, Base):
        Base.TAG = "tag"
        Base.fetch = staticmethod(lambda: 1)
        container = type("Bare", (ContainerComponent,), {})
        hoist_statics(container, Base)
        once = dict(vars(container))
        hoist_statics(container, Base)
        assert dict(vars(container)) == once

    def test_wrapped_is_only_read(self, Base):
        Base.TAG = "tag"
        before = dict(vars(Base))
        hoist_statics(type("Bare", (ContainerComponent,), {}), Base)
        assert dict(vars(Base)) == before

    def test_survives_deep_chains(self, Base):
        Base.fetch = staticmethod(lambda: "data")
        enhanced = compose(*[with_props({"n": n}) for n in range(5)], pure(), default_props({}))(Base)
        assert enhanced.fetch() == "data"
        assert enhanced.fetch is Base.fetch

    def test_reserved_set(self):
        for name in ("render", "on_mount", "display_name", "props_contract", "wrapped", "options"):
            assert name in RESERVED_STATICS
