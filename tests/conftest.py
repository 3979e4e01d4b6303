"""Shared fixtures for the code generation tests."""

import pytest

from sqlc_gen_typescript.codegen.core.config import GeneratorConfig
from sqlc_gen_typescript.codegen.core.schema import Column, Parameter, Query
from sqlc_gen_typescript.codegen.languages.typescript import TypeScriptGenerator

TYPES_PATH = "../service/database/query"


@pytest.fixture
def generator():
    """A TypeScript generator with a fixed types path."""
    return TypeScriptGenerator(GeneratorConfig(types_path=TYPES_PATH))


@pytest.fixture
def user_query():
    """GetUserByEmail :one with one text parameter and two result columns."""
    return Query(
        name="GetUserByEmail",
        cmd=":one",
        text="SELECT id, name FROM users WHERE email = ?",
        params=(Parameter(1, Column("email", "text", not_null=True)),),
        columns=(
            Column("id", "integer", not_null=True),
            Column("name", "text", not_null=False),
        ),
        filename="users.sql",
    )


@pytest.fixture
def make_query():
    """Factory building a Query with sensible defaults."""

    def _make_query(
        name, cmd=":exec", params=(), columns=(), filename="query.sql", text="SELECT 1"
    ):
        return Query(
            name=name,
            cmd=cmd,
            text=text,
            params=tuple(params),
            columns=tuple(columns),
            filename=filename,
        )

    return _make_query
