"""Scenario location line rendering."""

from typing import TYPE_CHECKING

from tck_inspection.markup import CSS, a, frag, span
from tck_inspection.settings import get_settings

if TYPE_CHECKING:
    from tck_inspection.markup import Element, Fragment, Markup
    from tck_inspection.schema import Scenario
    from tck_inspection.settings import RenderSettings


class LocationRenderer:
    """Renderer of scenario locations as inline breadcrumbs.

    A location line reads `[collection] ⟩cat1⟩cat2⟩⟩feature [show] [code]`,
    where the collection label and both links are optional.
    """

    def __init__(self, settings: 'RenderSettings | None' = None) -> None:
        """Initialize the renderer.

        Args:
            settings: Rendering settings, resolved from the environment
                when omitted.
        """
        self.settings = settings or get_settings()

    def render(self, scenario: 'Scenario',
               collection: str | None = None,
               show_url: str | None = None,
               source_url: str | None = None) -> 'Fragment':
        """Render the location of a scenario.

        Each optional argument controls only its own part of the line.

        Args:
            scenario: Scenario to locate.
            collection: Label of the scenario collection.
            show_url: Link target showing the scenario.
            source_url: Link target opening the scenario source.

        Returns:
            Inline fragment of the location line.
        """
        separator = self.settings.category_separator

        categories: list['Markup'] = []
        for category in scenario.categories:
            categories.append(span(separator, css=CSS.CATEGORY_SEP_IN_LOCATION_LINE))
            categories.append(span(category, css=CSS.CATEGORY_NAME_IN_LOCATION_LINE))

        return frag(
            span(collection, css=CSS.TCK_COLLECTION) if collection is not None else None,
            *categories,
            span(separator, separator, css=CSS.FEATURE_INTRO_IN_LOCATION_LINE),
            span(scenario.feature_name, css=CSS.FEATURE_NAME_IN_LOCATION_LINE),
            self.link_span(self.link(show_url, '[show]')) if show_url is not None else None,
            self.link_span(self.blank_link(source_url, '[code]')) if source_url is not None else None,
        )

    @staticmethod
    def link_span(link: 'Element') -> 'Element':
        """Wrap a link placed in a location line."""
        return span(link, css=CSS.SCENARIO_LINK_IN_LOCATION_LINE)

    @staticmethod
    def link(url: str, *content: 'Markup') -> 'Element':
        """Build a link to the given URL."""
        return a(*content, href=url)

    def blank_link(self, url: str, *content: 'Markup') -> 'Element':
        """Build a link opening in a new viewing context."""
        return a(*content, href=url, target=self.settings.new_context_target)
