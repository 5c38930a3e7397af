"""Rendering settings.

Settings are resolved once from the environment (variables prefixed
with `TCK_INSPECTION_`) and shared by all renderers, so rendering stays
a pure function of its input and these fixed values.
"""

from functools import cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tck_inspection.models import SettingsModel


class RenderSettings(SettingsModel):
    """Formatting settings of the renderers."""

    model_config = SettingsConfigDict(
        env_prefix='TCK_INSPECTION_',
    )

    category_separator: str = Field(
        default='⟩',
        min_length=1,
        title='Category separator',
        description='Glyph separating categories and the feature name in location lines.',
    )

    new_context_target: str = Field(
        default='_blank',
        min_length=1,
        title='New context target',
        description='Link target for links opening in a new viewing context.',
    )

    code_font: str = Field(
        default='Monospace',
        title='Code font',
        description='Font family hint for query source blocks.',
    )

    spacer_width: str = Field(
        default='1em',
        title='Spacer width',
        description='Width of the inline spacer between parts of a listing entry.',
    )


@cache
def get_settings() -> RenderSettings:
    """Return the settings resolved from the environment.

    Returns:
        Cached settings instance.
    """
    return RenderSettings()
