"""
Naming utilities for query code generation.

Parses query names of the form "<Action><Rest>" (GetUserByEmail,
InsertNote, ...) into the action they perform and derives the
identifiers used in generated code.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Pattern

from .errors import MalformedNameError, UnrecognizedActionError


class ConnectionMode(Enum):
    """Whether a query needs a read or a write connection."""

    READ = "r"
    WRITE = "w"


class Action(Enum):
    """Leading action word of a query name."""

    GET = "Get"
    INSERT = "Insert"
    UPDATE = "Update"
    UPSERT = "Upsert"
    DELETE = "Delete"

    @property
    def connection_mode(self) -> ConnectionMode:
        if self is Action.GET:
            return ConnectionMode.READ
        return ConnectionMode.WRITE


def lowercase_first_letter(value: str) -> str:
    """Lower-case the first character, keeping the rest verbatim."""
    return value[:1].lower() + value[1:]


@dataclass(frozen=True)
class QueryName:
    """A parsed query name."""

    name: str
    value_name: str
    action: Action

    # Leading run of one uppercase letter followed by lowercase letters
    _FORMAT: ClassVar[Pattern] = re.compile(r"^(?P<action>[A-Z][a-z]+)")

    @classmethod
    def parse(cls, name: str) -> "QueryName":
        """
        Parse a query name.

        Args:
            name: Declared query name (e.g. "GetUserByEmail")

        Returns:
            Parsed name with its action and value-binding identifier

        Raises:
            MalformedNameError: If the name has no leading action word
            UnrecognizedActionError: If the action word is not supported
        """
        match = cls._FORMAT.match(name)
        if match is None:
            raise MalformedNameError(name)

        prefix = match.group("action")
        try:
            action = Action(prefix)
        except ValueError:
            raise UnrecognizedActionError(
                name, prefix, [action.value for action in Action]
            ) from None

        return cls(name=name, value_name=lowercase_first_letter(name), action=action)

    @property
    def connection_mode(self) -> ConnectionMode:
        return self.action.connection_mode
