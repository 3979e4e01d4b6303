"""sqlc plugin request/response handling.

Decodes a `GenerateRequest` (protobuf, or JSON when the plugin is configured
with `format: json`), converts its queries into the code generation model and
encodes the generated files as a `GenerateResponse` in the same format.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from google.protobuf import json_format
from google.protobuf.message import DecodeError

from . import protocol
from .codegen.core.config import load_config
from .codegen.core.generator import GenerationResult, generate_code
from .codegen.core.schema import Column, OutputFile, Parameter, Query
from .codegen.languages.typescript import TypeScriptGenerator
from .logging_config import get_logger

logger = get_logger(__name__)

# RPC method sqlc passes as the first argument to process plugins
GENERATE_METHOD = "/plugin.CodegenService/Generate"


class PluginProtocolError(Exception):
    """Exception raised when a request cannot be decoded or a response encoded."""

    pass


class WireFormat(Enum):
    """Encoding of the request and response envelopes."""

    AUTO = "auto"
    PROTOBUF = "protobuf"
    JSON = "json"


@dataclass(frozen=True)
class PluginRequest:
    """The parts of a GenerateRequest the generator needs."""

    queries: Tuple[Query, ...] = field(default_factory=tuple)
    plugin_options: bytes = b""
    sqlc_version: str = ""


def detect_format(data: bytes) -> WireFormat:
    """Guess the request encoding: JSON objects start with '{'."""
    if data.lstrip()[:1] == b"{":
        return WireFormat.JSON
    return WireFormat.PROTOBUF


def _resolve_format(data: bytes, wire_format: Union[WireFormat, str]) -> WireFormat:
    wire_format = WireFormat(wire_format)
    if wire_format is WireFormat.AUTO:
        wire_format = detect_format(data)
        logger.debug("Detected %s request", wire_format.value)
    return wire_format


def decode_request(
    data: bytes, wire_format: Union[WireFormat, str] = WireFormat.AUTO
) -> PluginRequest:
    """
    Decode a GenerateRequest.

    Args:
        data: Raw request bytes
        wire_format: Request encoding, or AUTO to detect it

    Returns:
        Decoded request

    Raises:
        PluginProtocolError: If the request cannot be decoded
    """
    wire_format = _resolve_format(data, wire_format)
    message = protocol.GenerateRequest()

    try:
        if wire_format is WireFormat.JSON:
            json_format.Parse(
                data.decode("utf-8"), message, ignore_unknown_fields=True
            )
        else:
            message.ParseFromString(data)
    except UnicodeDecodeError as e:
        raise PluginProtocolError(f"JSON request is not valid UTF-8: {e}") from e
    except json_format.ParseError as e:
        raise PluginProtocolError(f"JSON request decoding failed: {e}") from e
    except DecodeError as e:
        raise PluginProtocolError(f"protocol buffer decoding failed: {e}") from e

    logger.info(
        "Decoded request with %d queries (sqlc %s)",
        len(message.queries),
        message.sqlc_version or "unknown",
    )

    return PluginRequest(
        queries=tuple(_convert_query(query) for query in message.queries),
        plugin_options=bytes(message.plugin_options),
        sqlc_version=message.sqlc_version,
    )


def _convert_column(message) -> Column:
    return Column(
        name=message.name,
        type_name=message.type.name if message.HasField("type") else None,
        not_null=message.not_null,
        comment=message.comment,
    )


def _convert_query(message) -> Query:
    return Query(
        name=message.name,
        cmd=message.cmd,
        text=message.text,
        params=tuple(
            Parameter(
                number=param.number,
                column=_convert_column(param.column) if param.HasField("column") else None,
            )
            for param in message.params
        ),
        columns=tuple(_convert_column(column) for column in message.columns),
        filename=message.filename,
    )


def encode_response(
    files: List[OutputFile], wire_format: Union[WireFormat, str] = WireFormat.PROTOBUF
) -> bytes:
    """
    Encode generated files as a GenerateResponse.

    Args:
        files: Generated files
        wire_format: PROTOBUF or JSON

    Returns:
        Encoded response bytes
    """
    wire_format = WireFormat(wire_format)
    if wire_format is WireFormat.AUTO:
        raise PluginProtocolError("response format must be protobuf or json")

    response = protocol.GenerateResponse()
    for output in files:
        response.files.add(name=output.name, contents=output.contents.encode("utf-8"))

    if wire_format is WireFormat.JSON:
        return json_format.MessageToJson(response).encode("utf-8")
    return response.SerializeToString()


def handle_request(
    data: bytes, wire_format: Union[WireFormat, str] = WireFormat.AUTO
) -> Tuple[GenerationResult, WireFormat]:
    """
    Decode a request and generate its files.

    Generation failures are returned in the result rather than raised, so
    callers decide how to report them.

    Args:
        data: Raw request bytes
        wire_format: Request encoding, or AUTO to detect it

    Returns:
        Generation result and the resolved encoding the response must use

    Raises:
        PluginProtocolError: If the request cannot be decoded
        ConfigError: If the plugin options are missing or malformed
    """
    wire_format = _resolve_format(data, wire_format)
    request = decode_request(data, wire_format)

    config = load_config(request.plugin_options)
    result = generate_code(TypeScriptGenerator(config), list(request.queries))
    return result, wire_format


def process(
    data: bytes, wire_format: Union[WireFormat, str] = WireFormat.AUTO
) -> bytes:
    """
    Handle a complete plugin invocation.

    The response uses the same encoding as the request. Any failure aborts
    the whole batch; nothing is returned for the queries already processed.

    Args:
        data: Raw request bytes
        wire_format: Request encoding, or AUTO to detect it

    Returns:
        Encoded response bytes

    Raises:
        PluginProtocolError: If the request cannot be decoded
        ConfigError: If the plugin options are missing or malformed
        GeneratorError: If any query cannot be serialized
    """
    result, wire_format = handle_request(data, wire_format)
    if not result.success:
        raise result.exception

    return encode_response(result.files, wire_format)


def check_method(method: Optional[str]) -> None:
    """Log a warning when sqlc asks for an RPC method other than Generate."""
    if method and method != GENERATE_METHOD:
        logger.warning(
            "Unexpected plugin method %s, treating it as %s", method, GENERATE_METHOD
        )
