"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .errors import (
    GeneratorError,
    NameParseError,
    MalformedNameError,
    UnrecognizedActionError,
    UnrecognizedCommandError,
    UnresolvedParameterError,
)
from .schema import Column, Command, OutputFile, Parameter, Query, group_by_file
from .naming import Action, ConnectionMode, QueryName, lowercase_first_letter
from .config import GeneratorConfig, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "NameParseError",
    "MalformedNameError",
    "UnrecognizedActionError",
    "UnrecognizedCommandError",
    "UnresolvedParameterError",
    # Query model
    "Column",
    "Command",
    "OutputFile",
    "Parameter",
    "Query",
    "group_by_file",
    # Naming
    "Action",
    "ConnectionMode",
    "QueryName",
    "lowercase_first_letter",
    # Configuration system
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
