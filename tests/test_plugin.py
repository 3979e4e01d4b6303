"""Tests for sqlc request decoding and response encoding."""

import base64
import json

import pytest
from google.protobuf import json_format

from sqlc_gen_typescript import protocol
from sqlc_gen_typescript.codegen.core.config import ConfigError
from sqlc_gen_typescript.codegen.core.errors import UnrecognizedActionError
from sqlc_gen_typescript.codegen.core.schema import OutputFile
from sqlc_gen_typescript.plugin import (
    PluginProtocolError,
    WireFormat,
    decode_request,
    detect_format,
    encode_response,
    handle_request,
    process,
)

OPTIONS = b'{"types_path": "../types"}'


def build_request(queries=None, plugin_options=OPTIONS):
    request = protocol.GenerateRequest(sqlc_version="v1.25.0", plugin_options=plugin_options)
    for query in queries or [user_query_message()]:
        request.queries.append(query)
    return request


def user_query_message(name="GetUserByEmail", filename="users.sql"):
    query = protocol.Query(
        name=name,
        cmd=":one",
        text="SELECT id, name FROM users WHERE email = ?",
        filename=filename,
    )
    query.params.add(
        number=1,
        column=protocol.Column(
            name="email", not_null=True, type=protocol.Identifier(name="text")
        ),
    )
    query.columns.add(name="id", not_null=True, type=protocol.Identifier(name="integer"))
    query.columns.add(name="name", comment="Display name", type=protocol.Identifier(name="text"))
    return query


class TestDetectFormat:
    @pytest.mark.parametrize("data", [b"{}", b'  \n{"queries": []}'])
    def test_json(self, data):
        assert detect_format(data) is WireFormat.JSON

    @pytest.mark.parametrize("data", [b"\x1a\x00", b"", b"[]"])
    def test_protobuf(self, data):
        assert detect_format(data) is WireFormat.PROTOBUF


class TestDecodeRequest:
    def test_protobuf(self):
        request = decode_request(build_request().SerializeToString())
        assert request.sqlc_version == "v1.25.0"
        assert request.plugin_options == OPTIONS

        (query,) = request.queries
        assert query.name == "GetUserByEmail"
        assert query.cmd == ":one"
        assert query.filename == "users.sql"
        assert query.params[0].number == 1
        assert query.params[0].column.name == "email"
        assert query.params[0].column.type_name == "text"
        assert query.params[0].column.not_null
        assert [c.name for c in query.columns] == ["id", "name"]
        assert query.columns[1].comment == "Display name"
        assert not query.columns[1].not_null

    def test_json(self):
        data = json_format.MessageToJson(build_request()).encode("utf-8")
        request = decode_request(data, "json")
        assert request.plugin_options == OPTIONS
        assert request.queries[0].params[0].column.name == "email"

    def test_json_ignores_unknown_fields(self):
        payload = {
            "sqlcVersion": "v1.25.0",
            "settings": {"engine": "sqlite"},
            "pluginOptions": base64.b64encode(OPTIONS).decode("ascii"),
            "queries": [
                {
                    "name": "GetOne",
                    "cmd": ":one",
                    "text": "SELECT 1",
                    "filename": "one.sql",
                    "insertIntoTable": {"name": "ignored"},
                }
            ],
        }
        request = decode_request(json.dumps(payload).encode("utf-8"))
        assert request.queries[0].name == "GetOne"
        assert request.queries[0].params == ()

    def test_missing_parameter_column(self):
        query = protocol.Query(name="GetUser", cmd=":one", filename="users.sql")
        query.params.add(number=1)
        request = decode_request(build_request([query]).SerializeToString())
        assert request.queries[0].params[0].column is None

    def test_missing_column_type(self):
        query = protocol.Query(name="GetUser", cmd=":one", filename="users.sql")
        query.columns.add(name="id")
        request = decode_request(build_request([query]).SerializeToString())
        assert request.queries[0].columns[0].type_name is None

    def test_invalid_protobuf(self):
        with pytest.raises(PluginProtocolError, match="protocol buffer"):
            decode_request(b"\xff\xff\xff", WireFormat.PROTOBUF)

    def test_invalid_json(self):
        with pytest.raises(PluginProtocolError, match="JSON"):
            decode_request(b'{"queries": 3}', WireFormat.JSON)


class TestEncodeResponse:
    def test_protobuf(self):
        data = encode_response([OutputFile("users.ts", "export {};\n")])
        response = protocol.GenerateResponse()
        response.ParseFromString(data)
        assert [f.name for f in response.files] == ["users.ts"]
        assert response.files[0].contents == b"export {};\n"

    def test_json(self):
        data = encode_response([OutputFile("users.ts", "x")], WireFormat.JSON)
        payload = json.loads(data)
        assert payload["files"][0]["name"] == "users.ts"
        assert base64.b64decode(payload["files"][0]["contents"]) == b"x"

    def test_auto_is_rejected(self):
        with pytest.raises(PluginProtocolError):
            encode_response([], WireFormat.AUTO)


class TestProcess:
    def test_protobuf_round(self):
        data = process(build_request().SerializeToString())
        response = protocol.GenerateResponse()
        response.ParseFromString(data)

        (output,) = response.files
        assert output.name == "users.ts"
        contents = output.contents.decode("utf-8")
        assert contents.startswith("/* c8 ignore start */\n")
        assert 'from "../types"' in contents
        assert '\t/** Display name */\n\t"name": string | null;\n' in contents
        assert "export const getUserByEmail: Query<" in contents

    def test_json_round(self):
        data = json_format.MessageToJson(build_request()).encode("utf-8")
        response = json_format.Parse(process(data), protocol.GenerateResponse())
        assert [f.name for f in response.files] == ["users.ts"]

    def test_one_file_per_source(self):
        request = build_request(
            [
                user_query_message("GetUserByEmail", "users.sql"),
                user_query_message("GetNoteByEmail", "notes.sql"),
                user_query_message("GetAdminByEmail", "users.sql"),
            ]
        )
        response = protocol.GenerateResponse()
        response.ParseFromString(process(request.SerializeToString()))
        assert [f.name for f in response.files] == ["users.ts", "notes.ts"]

    def test_missing_options(self):
        with pytest.raises(ConfigError):
            process(build_request(plugin_options=b"").SerializeToString())

    def test_failing_query_aborts(self):
        request = build_request(
            [user_query_message(), user_query_message("ListUsers", "other.sql")]
        )
        with pytest.raises(UnrecognizedActionError):
            process(request.SerializeToString())


class TestHandleRequest:
    def test_detects_json_and_reports_it(self):
        data = json_format.MessageToJson(build_request()).encode("utf-8")
        result, wire_format = handle_request(data)
        assert wire_format is WireFormat.JSON
        assert result.success
        assert [f.name for f in result.files] == ["users.ts"]
        assert result.metadata["query_count"] == 1

    def test_explicit_format(self):
        result, wire_format = handle_request(build_request().SerializeToString(), "protobuf")
        assert wire_format is WireFormat.PROTOBUF
        assert result.success

    def test_generation_failure_is_returned(self):
        request = build_request([user_query_message("ListUsers")])
        result, _ = handle_request(request.SerializeToString())
        assert not result.success
        assert result.files == []
        assert isinstance(result.exception, UnrecognizedActionError)
