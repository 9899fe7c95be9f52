"""Subscription container.

``with_data(selector, source)`` keeps a selected value from an external data
source in sync with the wrapped component:

    CommentListWithData = with_data(
        lambda source, props: source.get(props["id"]),
        source=comments,
        prop_name="comments",
    )(CommentList)

The selection runs when the container is built, whenever its props change,
and whenever the source notifies. The container subscribes on mount and
unsubscribes on unmount; the wrapped component never sees the source.
"""

import logging
from typing import Any, Callable, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from hoc_py.compose import enhancer
from hoc_py.container import ContainerComponent, build_options, create_container
from hoc_py.props import Props
from hoc_py.subscriptions import DataSource


logger = logging.getLogger(__name__)


class DataOptions(BaseModel):
    """Configuration for ``with_data``."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    selector: Callable[[Any, Props], Any]
    source: Any
    prop_name: str = "data"

    @field_validator("source")
    @classmethod
    def check_source(cls, v):
        if not isinstance(v, DataSource):
            raise ValueError("source must provide subscribe(listener) and unsubscribe(handle)")
        return v

    @field_validator("prop_name")
    @classmethod
    def check_prop_name(cls, v):
        if not v:
            raise ValueError("prop_name must not be empty")
        return v


class DataContainer(ContainerComponent):
    _hoc_framework = True

    options: ClassVar[DataOptions]

    def __init__(self, props: Optional[Mapping[str, Any]] = None):
        super().__init__(props)
        self._handle = None
        self.data = self.select(self.props)

    def select(self, props: Props) -> Any:
        return self.options.selector(self.options.source, props)

    def injected_props(self) -> Mapping[str, Any]:
        return {self.options.prop_name: self.data}

    def on_mount(self) -> None:
        self._handle = self.subscribe(self.options.source, self.handle_change)

    def on_receive_props(self, next_props: Props) -> None:
        self.data = self.select(next_props)

    def handle_change(self) -> None:
        if not self.mounted:
            return
        self.data = self.select(self.props)
        self.force_update()

    def on_unmount(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self.unsubscribe(handle)


def with_data(selector: Callable[[Any, Props], Any], source: DataSource, prop_name: str = "data"):
    """Inject ``selector(source, props)`` as ``prop_name``, refreshed on change.

    Raises:
        TypeConstraintError: If the selector is not callable or the source
            lacks subscribe/unsubscribe
    """
    options = build_options(DataOptions, "withData", selector=selector, source=source, prop_name=prop_name)

    @enhancer(name="withData")
    def enhance(component):
        return create_container(
            component,
            "withData",
            base=DataContainer,
            options=options,
            injected=(options.prop_name,),
        )

    return enhance


__all__ = ["DataOptions", "DataContainer", "with_data"]
