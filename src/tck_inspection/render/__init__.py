"""Renderers of scenarios, steps and value records into markup."""

from .locations import LocationRenderer
from .pages import ScenarioListComposer, UrlBuilder
from .records import RecordsRenderer
from .scenarios import ScenarioRenderer, scenario_title
from .steps import StepRenderer

__all__ = (
    'LocationRenderer',
    'RecordsRenderer',
    'ScenarioListComposer',
    'ScenarioRenderer',
    'StepRenderer',
    'UrlBuilder',
    'scenario_title',
)
