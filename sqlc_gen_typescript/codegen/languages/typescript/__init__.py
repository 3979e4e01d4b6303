"""
TypeScript code generator module.

Generates type declarations and query binding objects for sqlc queries.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .types import (
    RESULT_SHAPES,
    TYPE_FAMILIES,
    IntegerMode,
    ResultShape,
    RowMode,
    TypeFamily,
    TypeScriptTypeConfig,
    TypeScriptTypeMapper,
)

__all__ = [
    "TypeScriptGenerator",
    "create_typescript_generator",
    # Type system
    "RESULT_SHAPES",
    "TYPE_FAMILIES",
    "IntegerMode",
    "ResultShape",
    "RowMode",
    "TypeFamily",
    "TypeScriptTypeConfig",
    "TypeScriptTypeMapper",
]
