"""Scenario listing page composition."""

from logging import getLogger
from typing import TYPE_CHECKING

from tck_inspection.markup import CSS, Page, frag, h1, i, li, span, ul
from tck_inspection.settings import get_settings

from .locations import LocationRenderer
from .scenarios import scenario_title

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

if TYPE_CHECKING:
    from tck_inspection.markup import Element, Markup
    from tck_inspection.schema import Scenario
    from tck_inspection.settings import RenderSettings

logger = getLogger(__name__)

#: Builds a link target for a scenario.
type UrlBuilder = Callable[['Scenario'], str]


class ScenarioListComposer:
    """Composer of pages listing scenarios.

    Scenarios are listed in canonical order: by category path, feature
    name, scenario name and example index. Each entry shows the location
    line, a link showing the scenario and a link opening its source.
    """

    def __init__(self, settings: 'RenderSettings | None' = None,
                 locations: LocationRenderer | None = None) -> None:
        """Initialize the composer.

        Args:
            settings: Rendering settings, resolved from the environment
                when omitted.
            locations: Renderer of the location lines.
        """
        self.settings = settings or get_settings()
        self.locations = locations or LocationRenderer(self.settings)

    def compose(self, scenarios: 'Iterable[Scenario]', group: str, *,
                kind: 'Markup | None' = None,
                show_url: UrlBuilder,
                source_url: UrlBuilder) -> Page:
        """Compose a page listing scenarios of a group.

        Args:
            scenarios: Scenarios to list; may be empty.
            group: Label of the listed group.
            kind: Optional qualifier of the listed scenarios, for example
                `added` or `removed`.
            show_url: Builds the link target showing a scenario.
            source_url: Builds the link target opening a scenario source.

        Returns:
            Page with a title counting the scenarios and their listing.
        """
        ordered = sorted(scenarios, key=lambda scenario: scenario.sort_key)
        logger.debug('Composing listing of %d scenario(s) in group %r', len(ordered), group)

        title = h1(
            str(len(ordered)),
            frag(' ', kind) if kind is not None else None,
            ' scenario(s) in group ',
            i(group),
            css=CSS.PAGE_TITLE,
        )

        return Page.of(
            title,
            ul(*(
                self.entry(scenario, show_url(scenario), source_url(scenario))
                for scenario in ordered
            )),
        )

    def entry(self, scenario: 'Scenario', show_url: str, source_url: str) -> 'Element':
        """Build the listing entry of a scenario.

        Args:
            scenario: Listed scenario.
            show_url: Link target showing the scenario.
            source_url: Link target opening the scenario source.

        Returns:
            List item element.
        """
        return li(
            self.locations.render(scenario),
            self.spacer(),
            self.locations.link(show_url, scenario_title(scenario)),
            self.spacer(),
            self.locations.blank_link(source_url, '[code]'),
        )

    def spacer(self) -> 'Element':
        """Fixed width inline spacer."""
        return span(' ', style=f'width: {self.settings.spacer_width}; display: inline-block')
