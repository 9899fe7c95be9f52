"""Component model.

A component is a subclass of ``Component``. Hosts create instances with
``component(props)`` and drive them through the lifecycle hooks. A render
either produces output directly or returns an ``Element`` delegating to
another component.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional

from hoc_py.errors import HocError, TypeConstraintError
from hoc_py.props import EMPTY_PROPS, Props, freeze_props
from hoc_py.subscriptions import DataSource, Listener, SubscriptionSet


class Ref:
    """Handle giving a caller the innermost instance of a wrapped stack."""

    __slots__ = ("current",)

    def __init__(self):
        self.current: Optional[Component] = None

    def __repr__(self) -> str:
        return f"Ref(current={self.current!r})"


def create_ref() -> Ref:
    return Ref()


@dataclass(frozen=True)
class Element:
    """A request to mount ``type`` with ``props``, optionally binding ``ref``."""

    type: type
    props: Props = field(default_factory=lambda: EMPTY_PROPS)
    ref: Optional[Ref] = None


def is_component(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, Component)


def get_display_name(component: Any) -> str:
    """Name used in debugging output for ``component``."""
    name = getattr(component, "display_name", None)
    if name:
        return name
    return getattr(component, "__name__", None) or "Component"


def wrap_display_name(component: Any, hoc_name: str) -> str:
    """``hoc_name(InnerName)``, the conventional name of a container."""
    return f"{hoc_name}({get_display_name(component)})"


def create_element(type_: Any, props: Optional[Mapping[str, Any]] = None, ref: Optional[Ref] = None) -> Element:
    """Build an Element, rejecting anything that is not a component class.

    Raises:
        TypeConstraintError: If ``type_`` is not a Component subclass
    """
    if not is_component(type_):
        raise TypeConstraintError(
            f"Invalid element type: {type_!r}. Expected a Component subclass, got {type(type_).__name__}",
            type_,
        )
    if ref is not None and not isinstance(ref, Ref):
        raise TypeConstraintError(f"ref must be a Ref, got {type(ref).__name__}", ref)
    return Element(type_, freeze_props(props), ref)


class Component:
    """Base class for all components.

    Class attributes:
        display_name: Name shown by debugging tools (defaults to the class name)
        props_contract: Mapping of prop name to expected type

    Subclasses implement ``render`` and may override the lifecycle hooks.
    """

    _hoc_framework = True

    display_name: ClassVar[Optional[str]] = None
    props_contract: ClassVar[Mapping[str, Any]] = EMPTY_PROPS

    def __init__(self, props: Optional[Mapping[str, Any]] = None):
        self.props: Props = freeze_props(props)
        self.ref: Optional[Ref] = None
        self.subscriptions = SubscriptionSet(get_display_name(type(self)))
        self._host = None

    def render(self) -> Any:
        raise NotImplementedError(f"{type(self).__name__}.render() is not implemented")

    def on_mount(self) -> None:
        pass

    def on_receive_props(self, next_props: Props) -> None:
        pass

    def should_update(self, next_props: Props) -> bool:
        return True

    def on_update(self, prev_props: Props) -> None:
        pass

    def on_unmount(self) -> None:
        pass

    @property
    def mounted(self) -> bool:
        return self._host is not None

    def force_update(self) -> None:
        """Re-render this instance through its host."""
        if self._host is None:
            raise HocError(f"Cannot update unmounted component '{get_display_name(type(self))}'")
        self._host.rerender(self)

    def subscribe(self, source: DataSource, listener: Listener) -> Any:
        """Subscribe ``listener`` to ``source``; the handle is owned by this instance."""
        handle = self.subscriptions.add(source, listener)
        self._emit("subscribe", handle=handle)
        return handle

    def unsubscribe(self, handle: Any) -> None:
        if self.subscriptions.release(handle):
            self._emit("unsubscribe", handle=handle)

    def _emit(self, event_type: str, **payload: Any) -> None:
        if self._host is not None:
            self._host.emit(event_type, self, **payload)

    def __repr__(self) -> str:
        return f"<{get_display_name(type(self))} props={dict(self.props)!r}>"


def describe(component: type) -> Dict[str, Any]:
    """JSON-friendly summary of a component class."""
    contract = {
        key: getattr(value, "__name__", repr(value))
        for key, value in (component.props_contract or {}).items()
    }
    return {"display_name": get_display_name(component), "props_contract": contract}


__all__ = [
    "Ref",
    "create_ref",
    "Element",
    "create_element",
    "Component",
    "is_component",
    "get_display_name",
    "wrap_display_name",
    "describe",
]
