"""
TypeScript code generator implementation.

Generates parameter and result-row type declarations plus an exported
binding object for every query, one module per originating SQL file.
"""

from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.errors import UnresolvedParameterError
from ...core.generator import CodeGenerator
from ...core.naming import QueryName
from ...core.schema import Command, OutputFile, Query, group_by_file
from ...core.templates import TemplateEngine
from .templates import TEMPLATES
from .types import (
    RESULT_SHAPES,
    IntegerMode,
    ResultShape,
    RowMode,
    TypeScriptTypeConfig,
    TypeScriptTypeMapper,
)

logger = get_logger(__name__)

SOURCE_SUFFIX = ".sql"

PARAMETER_BINDINGS = (
    {"mode": "named", "parameters_suffix": "ParametersNamed", "by_name": True},
    {"mode": "anonymous", "parameters_suffix": "ParametersAnonymous", "by_name": False},
)


def _literal_union(values) -> str:
    return " | ".join(f'"{value}"' for value in values)


# Optional bind() argument selecting the result shape
CONFIGURATION_TYPE = (
    f"{{ rowMode?: {_literal_union(mode.value for mode in RowMode)}, "
    f"integerMode?: {_literal_union(mode.value for mode in IntegerMode)} }}"
)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript query modules."""

    def __init__(
        self,
        config: GeneratorConfig,
        type_config: Optional[TypeScriptTypeConfig] = None,
    ):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)
        self.type_mapper = TypeScriptTypeMapper(type_config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def register_templates(self, engine: TemplateEngine) -> None:
        """Register the built-in query and file templates."""
        engine.add_templates(TEMPLATES)

    def target_file_name(self, source_name: str) -> str:
        """Derive the generated file name from a SQL file name."""
        if source_name.endswith(SOURCE_SUFFIX):
            source_name = source_name[: -len(SOURCE_SUFFIX)]
        return f"{source_name}{self.file_extension}"

    def generate(self, queries: List[Query]) -> List[OutputFile]:
        """Generate one TypeScript module per originating SQL file."""
        files = []

        for source_name, file_queries in group_by_file(queries).items():
            logger.debug(
                "Generating %s (%d queries)", source_name, len(file_queries)
            )
            blocks = [self.generate_single_query(query) for query in file_queries]
            contents = self.render_template(
                "file.ts", {"types_path": self.config.types_path, "blocks": blocks}
            )
            files.append(OutputFile(self.target_file_name(source_name), contents))

        return files

    def generate_single_query(self, query: Query) -> str:
        """Serialize a single query into declarations and its binding export."""
        identifier = QueryName.parse(query.name)
        command = Command.from_tag(query.cmd)
        logger.debug("Serializing %s (%s)", identifier.name, command.value)

        named_parameters = self.parameter_members(query)
        anonymous_parameters = [
            {"name": member["name"], "type": member["type"]}
            for member in named_parameters
        ]
        results = self.result_declarations(query, command)

        type_names = [
            f"{identifier.name}ParametersNamed",
            f"{identifier.name}ParametersAnonymous",
        ] + [f"{identifier.name}{shape.suffix}" for shape in RESULT_SHAPES]

        default_shape = RESULT_SHAPES[0]
        context = {
            "name": identifier.name,
            "value_name": identifier.value_name,
            "command_tag": query.cmd,
            "sql": query.text,
            "result_mode": command.result_mode,
            "connection_mode": identifier.connection_mode.value,
            "has_parameters": bool(query.params),
            "named_parameters": named_parameters,
            "anonymous_parameters": anonymous_parameters,
            "results": results,
            "type_names": type_names,
            "bindings": PARAMETER_BINDINGS,
            "configuration_type": CONFIGURATION_TYPE,
            "default_row_mode": default_shape.row_mode.value,
            "default_integer_mode": default_shape.integer_mode.value,
        }

        return self.render_template("query.ts", context)

    def parameter_members(self, query: Query) -> List[Dict[str, Any]]:
        """
        Build the parameter members of a query in position order.

        Args:
            query: Query whose parameters to describe

        Returns:
            One dict per parameter with its name, input type and comment

        Raises:
            UnresolvedParameterError: If a parameter has no bound column
        """
        members = []
        for parameter in query.params:
            column = parameter.column
            if column is None:
                raise UnresolvedParameterError(query.name, parameter.number)

            members.append(
                {
                    "name": column.name,
                    "type": self.type_mapper.input_type(column),
                    "comment": column.comment if column.has_comment else None,
                }
            )
        return members

    def result_declarations(
        self, query: Query, command: Command
    ) -> List[Dict[str, Any]]:
        """
        Build the four result-row declarations of a query.

        Declarations without members (members is None) are emitted as
        `never`: queries that return no rows or have no columns.
        """
        emit_rows = command.returns_rows and bool(query.columns)
        return [
            {
                "suffix": shape.suffix,
                "row_mode": shape.row_mode.value,
                "members": self._result_members(query, shape) if emit_rows else None,
            }
            for shape in RESULT_SHAPES
        ]

    def _result_members(self, query: Query, shape: ResultShape) -> List[Dict[str, Any]]:
        with_comments = shape.row_mode is RowMode.OBJECT
        return [
            {
                "name": column.name,
                "type": self.type_mapper.output_type(column, shape.integer_mode),
                "comment": (
                    column.comment if with_comments and column.has_comment else None
                ),
            }
            for column in query.columns
        ]

    def validate_queries(self, queries: List[Query]) -> List[str]:
        """Report columns and parameters whose types fall back."""
        warnings = super().validate_queries(queries)
        fallback_output = self.type_mapper.config.unknown_output_type
        fallback_input = self.type_mapper.config.unknown_input_type

        for query in queries:
            for column in query.columns:
                if self.type_mapper.family_of(column.type_name) is None:
                    warnings.append(
                        f"Unknown type {column.type_name!r} for column "
                        f"{query.name}.{column.name}, using {fallback_output}"
                    )
            for parameter in query.params:
                column = parameter.column
                if column is not None and self.type_mapper.family_of(column.type_name) is None:
                    warnings.append(
                        f"Unknown type {column.type_name!r} for parameter "
                        f"{query.name}.{column.name}, using {fallback_input}"
                    )

        return warnings


def create_typescript_generator(types_path: str, **custom: Any) -> TypeScriptGenerator:
    """Create a TypeScript generator importing its runtime types from types_path."""
    return TypeScriptGenerator(GeneratorConfig(types_path=types_path, custom=custom))
