"""
Exception hierarchy for code generation.

Every failure raised while serializing a query derives from GeneratorError,
so callers can abort a whole batch with a single except clause.
"""

from typing import Sequence


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class NameParseError(GeneratorError):
    """Raised when a query name does not follow the naming convention."""

    pass


class MalformedNameError(NameParseError):
    """Query name has no leading capitalized action word."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f'unexpected name <{name}> (examples: "GetFoo", "InsertBar", '
            f'"UpdateBazWithQux", "DeleteFooWithBar")'
        )


class UnrecognizedActionError(NameParseError):
    """Query name starts with an action word that is not supported."""

    def __init__(self, name: str, prefix: str, allowed: Sequence[str] = ()):
        self.name = name
        self.prefix = prefix
        self.allowed = tuple(allowed)
        allowed_text = ", ".join(f'"{action}"' for action in self.allowed)
        super().__init__(
            f"unexpected name prefix <{prefix}> in <{name}> (allowed: {allowed_text})"
        )


class UnrecognizedCommandError(GeneratorError):
    """Query command tag is not one of the accepted tags."""

    def __init__(self, tag: str, allowed: Sequence[str] = ()):
        self.tag = tag
        self.allowed = tuple(allowed)
        allowed_text = ", ".join(f'"{t}"' for t in self.allowed)
        super().__init__(f"unexpected command <{tag}> (allowed: {allowed_text})")


class UnresolvedParameterError(GeneratorError):
    """A query parameter has no bound column, so its name is unknown."""

    def __init__(self, query: str, index: int):
        self.query = query
        self.index = index
        super().__init__(
            f"unknown parameter name at position {index} for query {query}"
        )
