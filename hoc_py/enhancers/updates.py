"""Conditional-update containers.

These containers decide whether an incoming props change reaches the
wrapped component. When they decline, they keep the new props but do not
re-render, so the wrapped component keeps what it last received.
"""

from typing import Any, Callable, ClassVar, List

from pydantic import BaseModel, ConfigDict

from hoc_py.compose import enhancer
from hoc_py.container import ContainerComponent, build_options, create_container
from hoc_py.props import Props, changed_keys, shallow_equal


class UpdateOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    test: Callable[[Props, Props], bool]


class KeysOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    keys: List[str]


class UpdateGate(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[UpdateOptions]

    def should_update(self, next_props: Props) -> bool:
        return bool(self.options.test(self.props, next_props))


def _gate(hoc_name: str, test: Callable[[Props, Props], bool]):
    options = build_options(UpdateOptions, hoc_name, test=test)

    @enhancer(name=hoc_name)
    def enhance(component):
        return create_container(component, hoc_name, base=UpdateGate, options=options)

    return enhance


def should_update(test: Callable[[Props, Props], bool]):
    """Update only when ``test(prev_props, next_props)`` is truthy."""
    return _gate("shouldUpdate", test)


def only_update_for_keys(keys: List[str]):
    """Update only when one of ``keys`` changed.

    Values are compared by identity (``==`` for primitives). A key missing
    from either the old or the new props does not count as a change.
    """
    tracked = tuple(build_options(KeysOptions, "onlyUpdateForKeys", keys=keys).keys)

    def test(prev: Props, next_props: Props) -> bool:
        return bool(changed_keys(prev, next_props, tracked))

    return _gate("onlyUpdateForKeys", test)


def pure():
    """Update only when props are not shallowly equal."""

    def test(prev: Props, next_props: Props) -> bool:
        return not shallow_equal(prev, next_props)

    return _gate("pure", test)


__all__ = [
    "UpdateOptions",
    "KeysOptions",
    "UpdateGate",
    "should_update",
    "only_update_for_keys",
    "pure",
]
