"""Immutable data model of TCK scenarios.

Defines Pydantic models describing scenarios, their closed set of step
kinds, and the tabular value records embedded in steps. The models are
constructed once by whatever loads a test corpus and are only read by
the renderers.
"""

from .records import ValueRecords
from .scenarios import Scenario
from .steps import (
    Execute,
    ExpectError,
    ExpectResult,
    Measure,
    Parameters,
    QueryType,
    RegisterProcedure,
    Setup,
    SideEffect,
    SideEffects,
    Step,
)

__all__ = (
    'Execute',
    'ExpectError',
    'ExpectResult',
    'Measure',
    'Parameters',
    'QueryType',
    'RegisterProcedure',
    'Scenario',
    'Setup',
    'SideEffect',
    'SideEffects',
    'Step',
    'ValueRecords',
)
