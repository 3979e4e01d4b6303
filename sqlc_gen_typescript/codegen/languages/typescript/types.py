"""
TypeScript-specific type system for code generation.

Maps database column types to TypeScript type expressions, for both
result rows (sound types) and query parameters (permissive types).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ...core.schema import Column


class RowMode(Enum):
    """Shape of a result row."""

    OBJECT = "object"  # { "id": number; }
    TUPLE = "tuple"  # [id: number,]

    @property
    def label(self) -> str:
        return self.value.title()


class IntegerMode(Enum):
    """Representation of integer-family columns in result rows."""

    NUMBER = "number"
    BIGINT = "bigint"

    @property
    def label(self) -> str:
        return "BigInt" if self is IntegerMode.BIGINT else "Number"

    @property
    def is_bigint(self) -> bool:
        return self is IntegerMode.BIGINT


class TypeFamily(Enum):
    """Database type families the mapper recognizes."""

    INTEGER = "integer"
    FLOAT = "float"
    BLOB = "blob"
    BOOLEAN = "boolean"
    TEXT = "text"


TYPE_FAMILIES: Dict[str, TypeFamily] = {
    "int": TypeFamily.INTEGER,
    "integer": TypeFamily.INTEGER,
    "tinyint": TypeFamily.INTEGER,
    "smallint": TypeFamily.INTEGER,
    "mediumint": TypeFamily.INTEGER,
    "bigint": TypeFamily.INTEGER,
    "unsignedbigint": TypeFamily.INTEGER,
    "int2": TypeFamily.INTEGER,
    "int8": TypeFamily.INTEGER,
    "real": TypeFamily.FLOAT,
    "double": TypeFamily.FLOAT,
    "doubleprecisionfloat": TypeFamily.FLOAT,
    "float": TypeFamily.FLOAT,
    "blob": TypeFamily.BLOB,
    "bool": TypeFamily.BOOLEAN,
    "boolean": TypeFamily.BOOLEAN,
    "text": TypeFamily.TEXT,
    "varchar": TypeFamily.TEXT,
}


@dataclass(frozen=True)
class ResultShape:
    """One row-shape / integer-mode combination of a result declaration."""

    row_mode: RowMode
    integer_mode: IntegerMode

    @property
    def suffix(self) -> str:
        """Type name suffix, e.g. RecordRowModeObjectIntegerModeNumber."""
        return (
            f"RecordRowMode{self.row_mode.label}"
            f"IntegerMode{self.integer_mode.label}"
        )


# Declaration order; the first entry is the runtime default
RESULT_SHAPES: Tuple[ResultShape, ...] = (
    ResultShape(RowMode.OBJECT, IntegerMode.NUMBER),
    ResultShape(RowMode.OBJECT, IntegerMode.BIGINT),
    ResultShape(RowMode.TUPLE, IntegerMode.NUMBER),
    ResultShape(RowMode.TUPLE, IntegerMode.BIGINT),
)


@dataclass
class TypeScriptTypeConfig:
    """Configuration for TypeScript type mapping behavior."""

    # Numeric types
    number_type: str = "number"
    bigint_type: str = "bigint"

    # Basic types
    string_type: str = "string"
    boolean_type: str = "boolean"

    # Binary data; parameters accept any binary view
    blob_output_type: str = "Uint8Array"
    blob_input_type: str = "NodeJS.ArrayBufferView"

    # Fallbacks: result types stay sound, parameter types stay permissive
    unknown_output_type: str = "unknown"
    unknown_input_type: str = "any"

    null_type: str = "null"


class TypeScriptTypeMapper:
    """
    Central engine for mapping database column types to TypeScript types.

    Output types describe result rows and depend on the integer mode;
    input types describe parameters and accept every representation a
    caller may pass.
    """

    def __init__(self, config: Optional[TypeScriptTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or TypeScriptTypeConfig()
        self._input_types = self._build_input_type_map()

    def _build_input_type_map(self) -> Dict[TypeFamily, str]:
        """Build mapping of type families to parameter types."""
        return {
            TypeFamily.INTEGER: f"{self.config.number_type} | {self.config.bigint_type}",
            TypeFamily.FLOAT: self.config.number_type,
            TypeFamily.BLOB: self.config.blob_input_type,
            TypeFamily.BOOLEAN: self.config.boolean_type,
            TypeFamily.TEXT: self.config.string_type,
        }

    def _output_base_type(self, family: TypeFamily, integer_mode: IntegerMode) -> str:
        if family is TypeFamily.INTEGER:
            if integer_mode.is_bigint:
                return self.config.bigint_type
            return self.config.number_type
        if family is TypeFamily.BLOB:
            return self.config.blob_output_type
        return self._input_types[family]

    @staticmethod
    def family_of(type_name: Optional[str]) -> Optional[TypeFamily]:
        """Return the family of a database type name, if recognized."""
        if type_name is None:
            return None
        return TYPE_FAMILIES.get(type_name)

    def infer_output_type(
        self, column: Column, integer_mode: IntegerMode = IntegerMode.NUMBER
    ) -> Optional[str]:
        """
        Infer the result type of a column.

        Args:
            column: Result column
            integer_mode: Representation for integer-family types

        Returns:
            TypeScript type, or None if the column type is not recognized
        """
        family = self.family_of(column.type_name)
        if family is None:
            return None
        return self._apply_nullability(
            self._output_base_type(family, integer_mode), column
        )

    def infer_input_type(self, column: Column) -> Optional[str]:
        """
        Infer the parameter type of a column.

        Args:
            column: Column bound to a query parameter

        Returns:
            TypeScript type, or None if the column type is not recognized
        """
        family = self.family_of(column.type_name)
        if family is None:
            return None
        return self._apply_nullability(self._input_types[family], column)

    def output_type(
        self, column: Column, integer_mode: IntegerMode = IntegerMode.NUMBER
    ) -> str:
        """Result type of a column, falling back to the unknown output type."""
        inferred = self.infer_output_type(column, integer_mode)
        return inferred if inferred is not None else self.config.unknown_output_type

    def input_type(self, column: Column) -> str:
        """Parameter type of a column, falling back to the unknown input type."""
        inferred = self.infer_input_type(column)
        return inferred if inferred is not None else self.config.unknown_input_type

    def _apply_nullability(self, inferred: str, column: Column) -> str:
        if column.not_null:
            return inferred
        return f"{inferred} | {self.config.null_type}"
