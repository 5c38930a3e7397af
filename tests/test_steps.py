"""Tests for scenario step rendering."""

from typing import TYPE_CHECKING

import pydantic
import pytest

from tck_inspection.errors import MissingColumnError, UnknownStepError
from tck_inspection.markup import CSS, to_html
from tck_inspection.render import StepRenderer
from tck_inspection.schema import (
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
    ValueRecords,
)
from tck_inspection.values import Node

if TYPE_CHECKING:
    from tck_inspection.markup import Element
    from tck_inspection.schema import Step
    from tck_inspection.settings import RenderSettings


def _label(block: 'Element') -> 'Element':
    """Return the label element of a step block."""
    return block.children[0]  # type: ignore[return-value]


def _content(block: 'Element') -> 'Element':
    """Return the content element of a step block."""
    return block.children[1]  # type: ignore[return-value]


@pytest.mark.parametrize('step, label, empty', (
    pytest.param(Setup(), 'Setup an empty graph', True, id='setup'),
    pytest.param(Parameters(values={'p': 1}), 'Parameters', False, id='parameters'),
    pytest.param(
        RegisterProcedure(signature='test.proc() :: (out :: INTEGER?)'),
        'Registered procedure',
        False,
        id='register procedure',
    ),
    pytest.param(Measure(), 'Measure side effects', True, id='measure'),
    pytest.param(
        Execute(query='CREATE ()', query_type=QueryType.INIT),
        'Initialize with',
        False,
        id='init query',
    ),
    pytest.param(
        Execute(query='MATCH (n) RETURN n', query_type=QueryType.EXEC),
        'Execute query',
        False,
        id='exec query',
    ),
    pytest.param(
        Execute(query='CREATE ()', query_type=QueryType.SIDE_EFFECT),
        'Execute update',
        False,
        id='side effect query',
    ),
    pytest.param(
        ExpectResult(expected=ValueRecords.empty('n'), sorted=True),
        'Expect result, in order',
        False,
        id='sorted result',
    ),
    pytest.param(
        ExpectResult(expected=ValueRecords.empty('n'), sorted=False),
        'Expect result, in any order',
        False,
        id='unsorted result',
    ),
    pytest.param(SideEffects(), 'Check side effects', False, id='side effects'),
    pytest.param(
        ExpectError(error_type='SyntaxError', phase='compile time', detail='UndefinedVariable'),
        'Expect error',
        False,
        id='error',
    ),
))
def test_step_labels(step: 'Step', label: str, empty: bool,
                     settings: 'RenderSettings') -> None:
    """Render step labels with their empty or content-bearing markers."""
    block = StepRenderer(settings).render(step)

    assert block.tag == 'div'
    assert block.css == (CSS.STEP,)
    assert _label(block).text == label

    if empty:
        assert _label(block).css == (CSS.EMPTY_STEP_NAME,)
        assert len(block.children) == 1
    else:
        assert _label(block).css == (CSS.STEP_NAME,)
        assert len(block.children) == 2
        assert _content(block).css == (CSS.STEP_CONTENT,)


@pytest.mark.parametrize('query', (
    'MATCH (n) RETURN n',
    'MATCH (n)\nWHERE n.x < 1 AND n.y <> "&"\nRETURN n',
    '  RETURN 1  ',
))
def test_execute_query_verbatim(query: str) -> None:
    """Keep the query source unmodified in a preformatted block."""
    block = StepRenderer().render(Execute(query=query))

    assert _content(block).text == query

    blocks = block.find_all('pre')
    assert len(blocks) == 1
    assert blocks[0].attrs == {'style': 'font-family: Monospace'}


def test_execute_query_html() -> None:
    """Serialize an execution step with escaped query source."""
    block = StepRenderer().render(Execute(query='RETURN 1 < 2'))

    assert to_html(block) == (
        '<div class="step">'
        '<div class="stepName">Execute query</div>'
        '<div class="stepContent"><div>'
        '<pre style="font-family: Monospace">RETURN 1 &lt; 2</pre>'
        '</div></div>'
        '</div>'
    )


def test_setup_html() -> None:
    """Serialize a data-free step with the empty-step marker."""
    block = StepRenderer().render(Setup())

    assert to_html(block) == (
        '<div class="step">'
        '<div class="emptyStepName">Setup an empty graph</div>'
        '</div>'
    )


def test_parameters_table() -> None:
    """Render one row per parameter in mapping order."""
    step = Parameters(values={
        'name': 'Alice',
        'age': 42,
        'node': Node(labels=('Person',)),
        'tags': ['a', 'b'],
    })

    block = StepRenderer().render(step)

    rows = [
        tuple(cell.text for cell in row.find_all('td'))
        for row in block.find_all('tr')
    ]
    assert rows == [
        ('name', "'Alice'"),
        ('age', '42'),
        ('node', '(:Person)'),
        ('tags', "['a', 'b']"),
    ]


def test_empty_parameters() -> None:
    """Render parameters without values as an empty table."""
    block = StepRenderer().render(Parameters())

    assert _label(block).css == (CSS.STEP_NAME,)
    assert len(block.find_all('table')) == 1
    assert block.find_all('tr') == ()


def test_register_procedure() -> None:
    """Render the procedure signature followed by its output table."""
    signature = 'test.proc(in :: INTEGER?) :: (out :: STRING?)'
    step = RegisterProcedure(
        signature=signature,
        values=ValueRecords(
            header=('in', 'out'),
            rows=({'in': 1, 'out': 'one'},),
        ),
    )

    block = StepRenderer().render(step)
    content = _content(block)

    assert len(content.children) == 2
    assert content.children[0].find_all('code')[0].text == signature
    assert content.children[1].find_all('table')[0].text == "inout1'one'"


def test_expect_result_table(records: ValueRecords) -> None:
    """Render the expected result as a value records table."""
    block = StepRenderer().render(ExpectResult(expected=records))

    rows = block.find_all('tr')
    assert len(rows) == 3
    assert [cell.text for cell in rows[0].find_all('th')] == ['name', 'age']


@pytest.mark.parametrize('expected, counts', (
    pytest.param({}, ['0'] * 8, id='empty'),
    pytest.param(
        {SideEffect.ADDED_NODES: 2, SideEffect.DELETED_PROPERTIES: 1},
        ['2', '0', '0', '0', '0', '0', '0', '1'],
        id='partial',
    ),
    pytest.param(
        {
            '-labels': 3,
            '+labels': 4,
            '+relationships': 5,
        },
        ['0', '5', '4', '0', '0', '0', '3', '0'],
        id='unordered',
    ),
    pytest.param(
        {effect: num for num, effect in enumerate(SideEffect, start=1)},
        ['1', '2', '3', '4', '5', '6', '7', '8'],
        id='complete',
    ),
))
def test_side_effects_table(expected: dict, counts: list[str]) -> None:
    """Report all side effect kinds in fixed order, defaulting to zero."""
    block = StepRenderer().render(SideEffects(expected=expected))

    rows = [
        tuple(cell.text for cell in row.find_all('td'))
        for row in block.find_all('tr')
    ]

    assert len(rows) == 8
    assert rows == list(zip(
        (
            '+nodes',
            '+relationships',
            '+labels',
            '+properties',
            '-nodes',
            '-relationships',
            '-labels',
            '-properties',
        ),
        counts,
        strict=True,
    ))


@pytest.mark.parametrize('expected', (
    pytest.param({'+things': 1}, id='unknown kind'),
    pytest.param({'+nodes': -1}, id='negative count'),
))
def test_side_effects_validation(expected: dict) -> None:
    """Reject unknown side effect kinds and negative counts."""
    with pytest.raises(pydantic.ValidationError):
        SideEffects.model_validate({'expected': expected})


def test_expect_error_table() -> None:
    """Render error type, phase and detail with bold captions."""
    step = ExpectError(
        error_type='SyntaxError',
        phase='compile time',
        detail='UndefinedVariable',
    )

    block = StepRenderer().render(step)

    rows = block.find_all('tr')
    assert [row.text for row in rows] == [
        'Type:SyntaxError',
        'Phase:compile time',
        'Detail:UndefinedVariable',
    ]
    assert [caption.text for caption in block.find_all('b')] == [
        'Type:',
        'Phase:',
        'Detail:',
    ]


@pytest.mark.parametrize('step', (
    pytest.param(
        ExpectResult(expected=ValueRecords(header=('a', 'b'), rows=({'a': 1},))),
        id='expected result',
    ),
    pytest.param(
        RegisterProcedure(
            signature='test.proc() :: (out :: INTEGER?)',
            values=ValueRecords(header=('out',), rows=({},)),
        ),
        id='procedure output',
    ),
))
def test_step_missing_column(step: 'Step') -> None:
    """Propagate missing columns of embedded value records."""
    with pytest.raises(MissingColumnError):
        StepRenderer().render(step)


def test_unknown_step() -> None:
    """Fail fast on a step outside the known kinds."""
    with pytest.raises(UnknownStepError, match='Unsupported step element'):
        StepRenderer().render(object())  # type: ignore[arg-type]


def test_unknown_query_type() -> None:
    """Fail fast on a query role outside the known roles."""
    with pytest.raises(UnknownStepError):
        StepRenderer.query_label('bogus')  # type: ignore[arg-type]


def test_step_renderer_uses_settings(settings: 'RenderSettings') -> None:
    """Apply the configured code font to query blocks."""
    custom = settings.model_copy(update={'code_font': 'Courier'})

    block = StepRenderer(custom).render(Execute(query='RETURN 1'))

    assert block.find_all('pre')[0].attrs == {'style': 'font-family: Courier'}
