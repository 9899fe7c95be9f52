"""Container components.

Every enhancer returns a container: a new class that owns a reference to
the wrapped component, manages its own lifecycle and renders the wrapped
component with

    omit(received props, consumed_props) | injected_props()

Injected keys win on collision. The container's ref is forwarded to the
element it renders.
"""

from types import MappingProxyType
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from hoc_py.base import Component, Element, get_display_name, is_component, wrap_display_name
from hoc_py.errors import TypeConstraintError
from hoc_py.props import Props, merge_props
from hoc_py.statics import RESERVED_STATICS, hoist_statics


OptionsT = TypeVar("OptionsT", bound=BaseModel)


class ContainerComponent(Component):
    """Base class for enhancer containers.

    Subclasses usually override ``injected_props``; ``child_props`` may be
    overridden when an enhancer rewrites props wholesale.
    """

    _hoc_framework = True

    wrapped: ClassVar[Optional[Type[Component]]] = None
    hoc_name: ClassVar[str] = "container"
    options: ClassVar[Any] = None
    consumed_props: ClassVar[FrozenSet[str]] = frozenset()
    forwards_ref: ClassVar[bool] = True

    def injected_props(self) -> Mapping[str, Any]:
        return {}

    def child_props(self) -> Props:
        return merge_props(self.props, self.consumed_props, self.injected_props())

    def render(self) -> Element:
        ref = self.ref if self.forwards_ref else None
        return Element(self.wrapped, self.child_props(), ref)


def create_container(
    wrapped: Type[Component],
    hoc_name: str,
    base: Type[ContainerComponent] = ContainerComponent,
    options: Any = None,
    injected: Iterable[str] = (),
    consumed: Optional[Mapping[str, Any]] = None,
    namespace: Optional[Dict[str, Any]] = None,
) -> Type[ContainerComponent]:
    """Build a container class around ``wrapped``.

    Args:
        wrapped: Component to delegate to
        hoc_name: Enhancer name, used for ``display_name``
        base: ContainerComponent subclass carrying the enhancer's behavior
        options: Enhancer configuration, exposed as ``options``
        injected: Prop names the container supplies (dropped from the contract)
        consumed: Prop names (and types) the container takes for itself
        namespace: Extra class attributes, applied before statics are hoisted

    Raises:
        TypeConstraintError: If ``wrapped`` is not a component
    """
    if not is_component(wrapped):
        raise TypeConstraintError(
            f"{hoc_name} expects a Component subclass, got {type(wrapped).__name__}", wrapped
        )
    consumed = dict(consumed or {})
    dropped = set(injected)
    contract = {k: v for k, v in wrapped.props_contract.items() if k not in dropped}
    contract.update(consumed)

    name = wrap_display_name(wrapped, hoc_name)
    attrs: Dict[str, Any] = {
        "__module__": wrapped.__module__,
        "__qualname__": name,
        "__doc__": wrapped.__doc__,
        "wrapped": wrapped,
        "hoc_name": hoc_name,
        "display_name": name,
        "options": options,
        "props_contract": MappingProxyType(contract),
        "consumed_props": frozenset(consumed),
    }
    attrs.update(namespace or {})
    container = type(name, (base,), attrs)
    return hoist_statics(container, wrapped)


def build_options(model: Type[OptionsT], hoc_name: str, **values: Any) -> OptionsT:
    """Validate enhancer configuration, failing at construction time."""
    try:
        return model(**values)
    except ValidationError as exc:
        raise TypeConstraintError(f"Invalid {hoc_name} options: {exc}", values) from exc


def unwrap(component: Type[Component]) -> list:
    """Layers of ``component`` from outermost to innermost."""
    layers = [component]
    while isinstance(component, type) and issubclass(component, ContainerComponent) and component.wrapped:
        component = component.wrapped
        layers.append(component)
    return layers


def check_static_name(name: str, hoc_name: str) -> None:
    if not name.isidentifier():
        raise TypeConstraintError(f"{hoc_name}: '{name}' is not a valid attribute name", name)
    if name in RESERVED_STATICS or name.startswith("__"):
        raise TypeConstraintError(f"{hoc_name}: '{name}' is reserved by {get_display_name(Component)}", name)


__all__ = [
    "ContainerComponent",
    "create_container",
    "build_options",
    "unwrap",
    "check_static_name",
]
