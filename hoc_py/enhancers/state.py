"""Local state container."""

from typing import Any, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from hoc_py.compose import enhancer
from hoc_py.container import ContainerComponent, build_options, create_container


class StateOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    state_name: str
    updater_name: str
    initial: Any = None

    @model_validator(mode="after")
    def check_names(self):
        if not self.state_name or not self.updater_name:
            raise ValueError("state_name and updater_name must not be empty")
        if self.state_name == self.updater_name:
            raise ValueError("state_name and updater_name must differ")
        return self


class StateContainer(ContainerComponent):
    """Holds one state value; the updater re-renders the container.

    The updater is a single bound method per instance so identity-based
    update checks downstream see a stable value.
    """

    _hoc_framework = True

    options: ClassVar[StateOptions]

    def __init__(self, props: Optional[Mapping[str, Any]] = None):
        super().__init__(props)
        initial = self.options.initial
        self.state = initial(self.props) if callable(initial) else initial
        self._updater = self.set_state

    def set_state(self, value: Any) -> None:
        self.state = value(self.state) if callable(value) else value
        if self.mounted:
            self.force_update()

    def injected_props(self) -> Mapping[str, Any]:
        return {self.options.state_name: self.state, self.options.updater_name: self._updater}


def with_state(state_name: str, updater_name: str, initial: Any = None):
    """Inject a state value and its updater.

    ``initial`` may be a value or a function of the props. The updater takes
    a new value or a function of the current one.
    """
    options = build_options(
        StateOptions, "withState", state_name=state_name, updater_name=updater_name, initial=initial
    )

    @enhancer(name="withState")
    def enhance(component):
        return create_container(
            component, "withState", base=StateContainer, options=options,
            injected=(options.state_name, options.updater_name),
        )

    return enhance


__all__ = ["StateOptions", "StateContainer", "with_state"]
