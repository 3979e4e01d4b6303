"""
Message classes for the sqlc plugin protocol.

Covers the part of sqlc's `plugin/codegen.proto` this plugin reads and
writes. Field numbers and JSON names match sqlc; every field left out here
is skipped as an unknown field when decoding.
"""

from typing import Dict, List, Optional, Tuple

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PROTO_PACKAGE = "plugin"
PROTO_FILE = "plugin/codegen.proto"

FieldDescriptorProto = descriptor_pb2.FieldDescriptorProto

STRING = FieldDescriptorProto.TYPE_STRING
BOOL = FieldDescriptorProto.TYPE_BOOL
INT32 = FieldDescriptorProto.TYPE_INT32
BYTES = FieldDescriptorProto.TYPE_BYTES
MESSAGE = FieldDescriptorProto.TYPE_MESSAGE

# name, number, type, message type, repeated, JSON name override
FieldSpec = Tuple[str, int, int, Optional[str], bool, Optional[str]]

MESSAGES: Dict[str, List[FieldSpec]] = {
    "Identifier": [
        ("catalog", 1, STRING, None, False, None),
        ("schema", 2, STRING, None, False, None),
        ("name", 3, STRING, None, False, None),
    ],
    "Column": [
        ("name", 1, STRING, None, False, None),
        ("not_null", 3, BOOL, None, False, None),
        ("is_array", 4, BOOL, None, False, None),
        ("comment", 5, STRING, None, False, None),
        ("type", 12, MESSAGE, "Identifier", False, None),
    ],
    "Parameter": [
        ("number", 1, INT32, None, False, None),
        ("column", 2, MESSAGE, "Column", False, None),
    ],
    "Query": [
        ("text", 1, STRING, None, False, None),
        ("name", 2, STRING, None, False, None),
        ("cmd", 3, STRING, None, False, None),
        ("columns", 4, MESSAGE, "Column", True, None),
        ("params", 5, MESSAGE, "Parameter", True, "parameters"),
        ("comments", 6, STRING, None, True, None),
        ("filename", 7, STRING, None, False, None),
    ],
    "GenerateRequest": [
        ("queries", 3, MESSAGE, "Query", True, None),
        ("sqlc_version", 4, STRING, None, False, None),
        ("plugin_options", 5, BYTES, None, False, None),
        ("global_options", 6, BYTES, None, False, None),
    ],
    "File": [
        ("name", 1, STRING, None, False, None),
        ("contents", 2, BYTES, None, False, None),
    ],
    "GenerateResponse": [
        ("files", 1, MESSAGE, "File", True, None),
    ],
}


def _json_name(name: str) -> str:
    """Default protobuf JSON name (lowerCamelCase)."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Build the file descriptor for the plugin messages."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE, package=PROTO_PACKAGE, syntax="proto3"
    )

    for message_name, fields in MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for name, number, field_type, type_name, repeated, json_name in fields:
            field = message.field.add(
                name=name,
                number=number,
                type=field_type,
                label=(
                    FieldDescriptorProto.LABEL_REPEATED
                    if repeated
                    else FieldDescriptorProto.LABEL_OPTIONAL
                ),
                json_name=json_name or _json_name(name),
            )
            if type_name:
                field.type_name = f".{PROTO_PACKAGE}.{type_name}"

    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(build_file_descriptor().SerializeToString())


def _message_class(name: str):
    descriptor = _pool.FindMessageTypeByName(f"{PROTO_PACKAGE}.{name}")
    return message_factory.GetMessageClass(descriptor)


Identifier = _message_class("Identifier")
Column = _message_class("Column")
Parameter = _message_class("Parameter")
Query = _message_class("Query")
GenerateRequest = _message_class("GenerateRequest")
File = _message_class("File")
GenerateResponse = _message_class("GenerateResponse")
