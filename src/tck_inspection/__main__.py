"""CLI utilities for tck-inspection.

Provides the scenario document schema for external loaders and the
list of style markers for stylesheet authors.
"""

from click import echo, group

from tck_inspection.jsonschema import SchemaGenerator
from tck_inspection.markup import CSS


@group(help='Command-line utilities for tck-inspection.')
def cli() -> None:
    """Root CLI group for tck-inspection tools."""
    return None


@cli.command(
    name='schema',
    help='Print the JSON Schema of scenario documents to standard output.',
)
def print_schema() -> None:
    """Generate and print the JSON Schema."""
    echo(SchemaGenerator.make_schema())


@cli.command(
    name='markers',
    help='Print the style markers attached to rendered markup, one per line.',
)
def print_markers() -> None:
    """Print every style marker."""
    for marker in CSS:
        echo(marker.value)


if __name__ == '__main__':
    cli()
