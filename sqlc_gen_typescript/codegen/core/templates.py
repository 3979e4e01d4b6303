"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Any, Dict, Mapping, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound
from jinja2.exceptions import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
        """
        self._loader = DictLoader(dict(templates or {}))

        # Block tags sit on their own lines and must not leave blank lines
        # behind; generated source is never HTML-escaped.
        self._env = Environment(
            loader=self._loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["doc_comment"] = self._doc_comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of the template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._loader.mapping[name] = content

    def add_templates(self, templates: Mapping[str, str]):
        """Add several in-memory templates at once."""
        for name, content in templates.items():
            self.add_template(name, content)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    # Template filters for code generation

    def _doc_comment_filter(self, value: str) -> str:
        """Wrap a single-line description in a JSDoc comment."""
        return f"/** {value} */"


def create_template_engine(templates: Optional[Mapping[str, str]] = None) -> TemplateEngine:
    """Create a template engine, optionally preloaded with templates."""
    return TemplateEngine(templates)
