"""Shared fixtures for hoc-py tests."""

import io

import pytest

from hoc_py import Component, MemoryDataSource
from hoc_py.logs import NDJSONLogger


@pytest.fixture
def calls():
    """Props seen by each render of the ``Base`` fixture."""
    return []


@pytest.fixture
def Base(calls):
    """A fresh innermost component per test; it renders its own props."""

    class Base(Component):
        """Innermost test component."""

        props_contract = {"id": int}

        def render(self):
            calls.append(dict(self.props))
            return dict(self.props)

    return Base


@pytest.fixture
def source():
    return MemoryDataSource({1: "A", 2: "Z"})


@pytest.fixture
def event_log():
    return NDJSONLogger(stream=io.StringIO())
