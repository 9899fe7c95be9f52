"""Runtime settings for hoc-py.

Settings are a pydantic model held in a context variable so tests can
override them locally:

    with override_settings(check_mutation=False):
        ...

Defaults come from the environment:
- HOC_PY_CHECK_MUTATION: snapshot class attributes around every enhancer call
- HOC_PY_CHECK_PROP_TYPES: warn when props break a component's contract
- HOC_PY_WARN_ON_LEAK: warn when an instance unmounts holding subscriptions
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class HocSettings(BaseModel):
    """Switches for the development-time checks."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    check_mutation: bool = True
    check_prop_types: bool = True
    warn_on_leak: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HocSettings":
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"HOC_PY_{name.upper()}")
            if raw is None:
                continue
            lowered = raw.strip().lower()
            if lowered in _TRUE:
                values[name] = True
            elif lowered in _FALSE:
                values[name] = False
            else:
                raise ValueError(f"HOC_PY_{name.upper()} must be a boolean, got {raw!r}")
        return cls(**values)


_settings: ContextVar[Optional[HocSettings]] = ContextVar("hoc_settings", default=None)


def get_settings() -> HocSettings:
    """Current settings, loading them from the environment on first use."""
    settings = _settings.get()
    if settings is None:
        settings = HocSettings.from_env()
        _settings.set(settings)
    return settings


def configure(**changes: Any) -> HocSettings:
    """Replace the current settings with a copy carrying ``changes``."""
    settings = HocSettings(**{**get_settings().model_dump(), **changes})
    _settings.set(settings)
    return settings


@contextmanager
def override_settings(**changes: Any) -> Iterator[HocSettings]:
    """Apply ``changes`` for the duration of the block."""
    settings = HocSettings(**{**get_settings().model_dump(), **changes})
    token = _settings.set(settings)
    try:
        yield settings
    finally:
        _settings.reset(token)


__all__ = ["HocSettings", "get_settings", "configure", "override_settings"]
