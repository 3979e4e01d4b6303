"""
sqlc-gen-typescript

sqlc process plugin generating TypeScript type declarations and query
binding objects from annotated SQL queries.
"""

__version__ = "0.1.0"

from .codegen import (
    GenerationResult,
    GeneratorError,
    ConfigError,
    TypeScriptGenerator,
    generate_from_queries,
)
from .plugin import PluginProtocolError, WireFormat, handle_request, process

__all__ = [
    "__version__",
    "GenerationResult",
    "GeneratorError",
    "ConfigError",
    "TypeScriptGenerator",
    "PluginProtocolError",
    "WireFormat",
    "generate_from_queries",
    "handle_request",
    "process",
]
