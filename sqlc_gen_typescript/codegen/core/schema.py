"""
Core query representation for code generation.

Normalizes the query descriptors handed over by sqlc into immutable
dataclasses that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from enum import Enum

from .errors import UnrecognizedCommandError


class Command(Enum):
    """Execution cardinality of a query, keyed by its sqlc command tag."""

    ONE = ":one"
    MANY = ":many"
    EXEC = ":exec"

    @classmethod
    def from_tag(cls, tag: str) -> "Command":
        """
        Classify a command tag.

        Args:
            tag: Command tag as written in the query annotation (e.g. ":one")

        Returns:
            Matching Command

        Raises:
            UnrecognizedCommandError: If the tag is not one of the accepted tags
        """
        for command in cls:
            if command.value == tag:
                return command
        raise UnrecognizedCommandError(tag, [command.value for command in cls])

    @property
    def result_mode(self) -> str:
        """Cardinality name used by the runtime descriptor."""
        return _RESULT_MODES[self]

    @property
    def returns_rows(self) -> bool:
        """Whether the query produces result rows at all."""
        return self is not Command.EXEC


_RESULT_MODES = {
    Command.ONE: "one",
    Command.MANY: "many",
    Command.EXEC: "none",
}


@dataclass(frozen=True)
class Column:
    """A typed column, used both for query parameters and result rows."""

    name: str
    type_name: Optional[str] = None
    not_null: bool = False
    comment: str = ""

    @property
    def has_comment(self) -> bool:
        return bool(self.comment.strip())


@dataclass(frozen=True)
class Parameter:
    """A positional query parameter (1-based) with its optional bound column."""

    number: int
    column: Optional[Column] = None


@dataclass(frozen=True)
class Query:
    """A single annotated SQL query."""

    name: str
    cmd: str
    text: str = ""
    params: Tuple[Parameter, ...] = field(default_factory=tuple)
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    filename: str = ""


@dataclass(frozen=True)
class OutputFile:
    """One generated file: target name and text contents."""

    name: str
    contents: str


def group_by_file(queries: List[Query]) -> Dict[str, List[Query]]:
    """
    Group queries by their originating source file.

    Groups appear in order of first occurrence and keep the batch order
    of their queries.

    Args:
        queries: Queries in batch order

    Returns:
        Mapping of source file name to its queries
    """
    grouped: Dict[str, List[Query]] = {}
    for query in queries:
        grouped.setdefault(query.filename, []).append(query)
    return grouped
