"""Single scenario rendering."""

from logging import getLogger
from typing import TYPE_CHECKING

from tck_inspection.errors import MissingColumnError
from tck_inspection.markup import CSS, frag, h2, h3
from tck_inspection.settings import get_settings

from .locations import LocationRenderer
from .steps import StepRenderer

if TYPE_CHECKING:
    from tck_inspection.markup import Fragment
    from tck_inspection.schema import Scenario
    from tck_inspection.settings import RenderSettings

logger = getLogger(__name__)


def scenario_title(scenario: 'Scenario') -> str:
    """Title of a scenario: its name and example index, if any.

    Args:
        scenario: Scenario to title.

    Returns:
        The scenario name, followed by ` #<index>` for examples.
    """
    if scenario.example_index is None:
        return scenario.name

    return f'{scenario.name} #{scenario.example_index}'


class ScenarioRenderer:
    """Renderer of a complete scenario view.

    The view consists of the location line as a section title, the
    scenario title as a sub-section title and one block per step.
    """

    def __init__(self, settings: 'RenderSettings | None' = None,
                 locations: LocationRenderer | None = None,
                 steps: StepRenderer | None = None) -> None:
        """Initialize the renderer.

        Args:
            settings: Rendering settings, resolved from the environment
                when omitted.
            locations: Renderer of the location line.
            steps: Renderer of scenario steps.
        """
        self.settings = settings or get_settings()
        self.locations = locations or LocationRenderer(self.settings)
        self.steps = steps or StepRenderer(self.settings)

    def render(self, scenario: 'Scenario',
               collection: str | None = None,
               show_url: str | None = None,
               source_url: str | None = None) -> 'Fragment':
        """Render a scenario with all of its steps.

        Args:
            scenario: Scenario to render.
            collection: Label of the scenario collection.
            show_url: Link target showing the scenario.
            source_url: Link target opening the scenario source.

        Returns:
            Fragment with the titles and step blocks.

        Raises:
            MissingColumnError: If value records of a step are malformed.
                The error is located by step and scenario title.
            UnknownStepError: If a step kind is not supported.
        """
        title = scenario_title(scenario)
        logger.debug('Rendering scenario %r with %d step(s)', title, len(scenario.steps))

        blocks = []
        for step_num, step in enumerate(scenario.steps):
            try:
                blocks.append(self.steps.render(step))

            except MissingColumnError as base:
                logger.debug('Step %d of scenario %r is malformed', step_num, title)
                raise base.in_step(step_num, title) from base

        return frag(
            h2(
                self.locations.render(scenario, collection, show_url, source_url),
                css=CSS.SECTION_TITLE,
            ),
            h3(title, css=CSS.SUB_SECTION_TITLE),
            *blocks,
        )
