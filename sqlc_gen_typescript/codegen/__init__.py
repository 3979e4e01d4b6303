"""
sqlc TypeScript Code Generation Module

Generates TypeScript query modules from sqlc query descriptors.
"""

from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError
from .core.schema import Column, Command, OutputFile, Parameter, Query
from .core.config import GeneratorConfig, ConfigError, load_config
from .languages.typescript import TypeScriptGenerator


def generate_from_queries(queries, options) -> GenerationResult:
    """
    Generate TypeScript modules from query descriptors.

    Args:
        queries: Query descriptors in batch order
        options: Plugin options (raw bytes, JSON string or dict)

    Returns:
        GenerationResult with the generated files

    Raises:
        ConfigError: If the options are missing or malformed
    """
    config = load_config(options)
    generator = TypeScriptGenerator(config)
    return generate_code(generator, list(queries))


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "Column",
    "Command",
    "OutputFile",
    "Parameter",
    "Query",
    "GeneratorConfig",
    "ConfigError",
    "TypeScriptGenerator",
    "generate_code",
    "generate_from_queries",
    "load_config",
]
