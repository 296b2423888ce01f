"""Code and document generators built on the parsed schema."""

from .emitter import FileEmitter
from .entity_generator import EntityGenerator
from .naming import to_camel_case, to_pascal_case
from .schema_export import export_schema_json, simplify_schema
from .type_mapping import TypeMapper

__all__ = [
    "EntityGenerator",
    "FileEmitter",
    "TypeMapper",
    "export_schema_json",
    "simplify_schema",
    "to_camel_case",
    "to_pascal_case",
]
