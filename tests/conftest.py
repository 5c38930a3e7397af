"""Tests configurations and fixtures."""

from typing import TYPE_CHECKING

import pytest

from tck_inspection.schema import Scenario, ValueRecords
from tck_inspection.settings import RenderSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch: pytest.MonkeyPatch) -> 'Iterator[None]':
    """Isolate tests from environment-provided settings.

    Removes any `TCK_INSPECTION_*` variables and clears the cached
    settings before and after each test.
    """
    for name in (
        'TCK_INSPECTION_CATEGORY_SEPARATOR',
        'TCK_INSPECTION_NEW_CONTEXT_TARGET',
        'TCK_INSPECTION_CODE_FONT',
        'TCK_INSPECTION_SPACER_WIDTH',
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> RenderSettings:
    """Provide default rendering settings."""
    return RenderSettings()


@pytest.fixture
def records() -> ValueRecords:
    """Provide well-formed value records with two columns."""
    return ValueRecords(
        header=('name', 'age'),
        rows=(
            {'name': 'Alice', 'age': 42},
            {'age': None, 'name': 'Bob'},
        ),
    )


@pytest.fixture
def make_scenario() -> 'Callable[..., Scenario]':
    """Provide a factory of scenarios with sensible defaults."""
    def make(name: str = 'N', *,
             categories: tuple[str, ...] = ('A', 'B'),
             feature_name: str = 'F',
             example_index: int | None = None,
             steps: tuple = ()) -> Scenario:
        return Scenario(
            categories=categories,
            feature_name=feature_name,
            name=name,
            example_index=example_index,
            steps=steps,
        )

    return make
