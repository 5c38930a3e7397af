"""Style markers attached to markup nodes.

Markers are opaque identifiers looked up by an external stylesheet.
The renderers decide where they are placed, never how they look.
"""

from enum import StrEnum


class CSS(StrEnum):
    """Style markers used by the renderers."""

    PAGE_TITLE = 'pageTitle'
    SECTION_TITLE = 'sectionTitle'
    SUB_SECTION_TITLE = 'subSectionTitle'

    STEP = 'step'
    STEP_NAME = 'stepName'
    EMPTY_STEP_NAME = 'emptyStepName'
    STEP_CONTENT = 'stepContent'

    TCK_COLLECTION = 'tckCollection'
    CATEGORY_SEP_IN_LOCATION_LINE = 'categorySepInLocationLine'
    CATEGORY_NAME_IN_LOCATION_LINE = 'categoryNameInLocationLine'
    FEATURE_INTRO_IN_LOCATION_LINE = 'featureIntroInLocationLine'
    FEATURE_NAME_IN_LOCATION_LINE = 'featureNameInLocationLine'
    SCENARIO_LINK_IN_LOCATION_LINE = 'scenarioLinkInLocationLine'
