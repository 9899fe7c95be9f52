"""Decorators for user-defined function components."""

from typing import Any, Callable, Mapping, Optional

from hoc_py.base import Component
from hoc_py.props import freeze_props


def component(
    func: Optional[Callable[..., Any]] = None,
    *,
    props: Optional[Mapping[str, Any]] = None,
    name: Optional[str] = None,
):
    """
    Turn a render function into a Component class.

    The function receives the props mapping and returns the render output.
    The resulting class keeps the function's name, module and docstring, and
    static attributes can be attached to it like any other component.

    Usage:
        @component
        def Greeting(props):
            return f"Hello, {props['name']}"

        @component(props={"id": int}, name="CommentList")
        def comment_list(props):
            ...
    """

    def build(fn: Callable[..., Any]) -> type:
        def render(self):
            return fn(self.props)

        attrs = {
            "__module__": fn.__module__,
            "__qualname__": getattr(fn, "__qualname__", fn.__name__),
            "__doc__": fn.__doc__,
            "display_name": name or fn.__name__,
            "props_contract": freeze_props(props),
            "render": render,
            "_render_fn": staticmethod(fn),
        }
        return type(fn.__name__, (Component,), attrs)

    if func is not None:
        return build(func)
    return build


__all__ = ["component"]
