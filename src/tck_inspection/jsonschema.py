"""JSON Schema management."""

from functools import cache
from json import dumps

from pydantic.json_schema import GenerateJsonSchema

from tck_inspection.schema import Scenario


class SchemaGenerator(GenerateJsonSchema):
    """JSON Schema generator for scenario documents.

    External loaders and fixture authors validate scenario documents
    against this schema before constructing `Scenario` models.
    """

    @classmethod
    @cache
    def make_schema(cls, indent: int | str | None = 4) -> str:
        """Generate the JSON Schema for scenario documents.

        Args:
            indent: Indentation level used for JSON formatting.

        Returns:
            Serialized JSON Schema string.
        """
        schema = {
            **Scenario.model_json_schema(schema_generator=cls),
            'title': 'tck-inspection',
            'description': 'JSON Schema for TCK scenario documents',
            '$schema': cls.schema_dialect,
        }

        return dumps(
            schema,
            ensure_ascii=False,
            sort_keys=True,
            indent=indent,
        )
