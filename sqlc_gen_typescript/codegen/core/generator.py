"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ...logging_config import get_logger
from .config import GeneratorConfig
from .errors import GeneratorError
from .schema import OutputFile, Query
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: GeneratorConfig):
        """Initialize generator with its configuration."""
        self.config = config
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine()
        self.register_templates(self._template_engine)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def register_templates(self, engine: TemplateEngine) -> None:
        """Hook for subclasses to register in-memory templates."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, queries: List[Query]) -> List[OutputFile]:
        """
        Generate one output file per originating source file.

        Args:
            queries: All queries of the batch, in batch order

        Returns:
            Generated files in order of first occurrence

        Raises:
            GeneratorError: If any query cannot be serialized
        """
        pass

    @abstractmethod
    def generate_single_query(self, query: Query) -> str:
        """
        Generate code for a single query.

        Args:
            query: Query to generate code for

        Returns:
            Generated code for this query only
        """
        pass

    def validate_queries(self, queries: List[Query]) -> List[str]:
        """
        Validate queries for basic structural issues.

        Language generators should override this to add language-specific validation.

        Args:
            queries: Queries to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for query in queries:
            if not query.text.strip():
                warnings.append(f"Query '{query.name}' has no SQL text")

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: List[OutputFile],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated files
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files=[])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, queries: List[Query]) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    A failing query aborts the whole batch: the returned result then
    carries the error and no files at all.

    Args:
        generator: Code generator instance
        queries: Queries to generate code for

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = generator.validate_queries(queries)
        files = generator.generate(queries)
    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    for warning in warnings:
        logger.warning(warning)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "query_count": len(queries),
        "file_count": len(files),
    }

    return GenerationResult(files, warnings, metadata)
