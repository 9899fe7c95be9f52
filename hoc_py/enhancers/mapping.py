"""Props-shaping containers."""

from typing import Any, Callable, ClassVar, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, field_validator

from hoc_py.compose import enhancer
from hoc_py.container import ContainerComponent, build_options, create_container
from hoc_py.errors import TypeConstraintError
from hoc_py.props import Props, freeze_props, merge_props


class MapperOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    mapper: Callable[[Props], Mapping[str, Any]]


class InjectOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    values: Union[Callable[[Props], Mapping[str, Any]], Dict[str, Any]]


class RenameOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    names: Dict[str, str]

    @field_validator("names")
    @classmethod
    def check_names(cls, v):
        for old, new in v.items():
            if not old or not new:
                raise ValueError("prop names must not be empty")
        if len(set(v.values())) != len(v):
            raise ValueError("two props cannot be renamed to the same name")
        return v


def _as_mapping(value: Any, hoc_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeConstraintError(f"{hoc_name} must produce a mapping, got {type(value).__name__}", value)
    return value


class MappedContainer(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[MapperOptions]

    def child_props(self) -> Props:
        return freeze_props(_as_mapping(self.options.mapper(self.props), self.hoc_name))


class InjectContainer(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[InjectOptions]

    def injected_props(self) -> Mapping[str, Any]:
        values = self.options.values
        if callable(values):
            return _as_mapping(values(self.props), self.hoc_name)
        return values


class DefaultsContainer(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[InjectOptions]

    def child_props(self) -> Props:
        return merge_props(self.options.values, (), self.props)


class RenameContainer(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[RenameOptions]

    def injected_props(self) -> Mapping[str, Any]:
        return {new: self.props[old] for old, new in self.options.names.items() if old in self.props}


def map_props(mapper: Callable[[Props], Mapping[str, Any]]):
    """Replace the props entirely with ``mapper(props)``."""
    options = build_options(MapperOptions, "mapProps", mapper=mapper)

    @enhancer(name="mapProps")
    def enhance(component):
        # the mapper may drop or rename anything, so no contract is carried
        return create_container(
            component, "mapProps", base=MappedContainer, options=options,
            injected=tuple(component.props_contract),
        )

    return enhance


def with_props(values: Union[Mapping[str, Any], Callable[[Props], Mapping[str, Any]]]):
    """Inject ``values`` (or ``values(props)``) over the received props."""
    if not callable(values):
        values = dict(_as_mapping(values, "withProps"))
    options = build_options(InjectOptions, "withProps", values=values)

    @enhancer(name="withProps")
    def enhance(component):
        injected = () if callable(options.values) else tuple(options.values)
        return create_container(
            component, "withProps", base=InjectContainer, options=options, injected=injected
        )

    return enhance


def default_props(defaults: Mapping[str, Any]):
    """Fill in ``defaults`` for keys the caller did not pass."""
    options = build_options(InjectOptions, "defaultProps", values=dict(_as_mapping(defaults, "defaultProps")))

    @enhancer(name="defaultProps")
    def enhance(component):
        return create_container(component, "defaultProps", base=DefaultsContainer, options=options)

    return enhance


def rename_props(names: Mapping[str, str]):
    """Pass ``old`` props to the wrapped component as ``new``."""
    options = build_options(RenameOptions, "renameProps", names=dict(_as_mapping(names, "renameProps")))

    @enhancer(name="renameProps")
    def enhance(component):
        contract = component.props_contract
        consumed = {old: contract.get(new, Any) for old, new in options.names.items()}
        return create_container(
            component, "renameProps", base=RenameContainer, options=options,
            injected=tuple(options.names.values()), consumed=consumed,
        )

    return enhance


def rename_prop(old: str, new: str):
    """Pass the ``old`` prop to the wrapped component as ``new``."""
    return rename_props({old: new})


__all__ = [
    "MapperOptions",
    "InjectOptions",
    "RenameOptions",
    "map_props",
    "with_props",
    "default_props",
    "rename_props",
    "rename_prop",
]
