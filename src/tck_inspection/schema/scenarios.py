"""Scenario definition.

A scenario is one conformance test case: its location within the test
corpus (category path and feature), its name, an optional example index
for scenarios expanded from a template, and its ordered steps.
"""

from pydantic import Field

from tck_inspection.models import SchemaModel

from .steps import Step  # noqa: TC001


class Scenario(SchemaModel):
    """Conformance test scenario."""

    categories: tuple[str, ...] = Field(
        default=(),
        title='Category path',
        description='Hierarchical grouping path of the scenario, outermost first.',
    )

    feature_name: str = Field(
        title='Feature name',
        description='Name of the feature the scenario belongs to.',
    )

    name: str = Field(
        title='Scenario name',
        description='Name of the scenario within its feature.',
    )

    example_index: int | None = Field(
        default=None,
        title='Example index',
        description=(
            'Number of the example when the scenario is drawn '
            'from a scenario template.'
        ),
    )

    steps: tuple[Step, ...] = Field(
        default=(),
        title='Steps',
        description='Ordered actions and assertions of the scenario.',
    )

    @property
    def sort_key(self) -> tuple[str, str, str, bool, int]:
        """Canonical ordering key of scenarios.

        Scenarios without an example index sort before indexed ones
        sharing the same category path, feature and name.
        """
        return (
            '/'.join(self.categories),
            self.feature_name,
            self.name,
            self.example_index is not None,
            self.example_index or 0,
        )
