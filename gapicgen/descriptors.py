"""Minimal protobuf descriptor model used by the generator."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


class FieldType(enum.IntEnum):
    """Protobuf field types, numbered as in descriptor.proto."""

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    GROUP = 10
    MESSAGE = 11
    BYTES = 12
    UINT32 = 13
    ENUM = 14
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18


class FieldLabel(enum.IntEnum):
    """Protobuf field labels."""

    OPTIONAL = 1
    REQUIRED = 2
    REPEATED = 3


class FieldBehavior(enum.IntEnum):
    """Values of the google.api.field_behavior annotation."""

    FIELD_BEHAVIOR_UNSPECIFIED = 0
    OPTIONAL = 1
    REQUIRED = 2
    OUTPUT_ONLY = 3
    INPUT_ONLY = 4
    IMMUTABLE = 5
    UNORDERED_LIST = 6
    NON_EMPTY_DEFAULT = 7
    IDENTIFIER = 8


_HTTP_VERBS = frozenset({"", "get", "post", "put", "patch", "delete"})


@dataclass
class FieldDescriptor:
    """A message field."""

    name: str = ""
    number: Optional[int] = None
    type: Optional[FieldType] = None
    type_name: str = ""
    label: FieldLabel = FieldLabel.OPTIONAL
    json_name: str = ""
    proto3_optional: bool = False
    behaviors: tuple[FieldBehavior, ...] = ()

    def is_required(self) -> bool:
        """Whether the field is annotated as REQUIRED."""
        return FieldBehavior.REQUIRED in self.behaviors


@dataclass
class MessageDescriptor:
    """A message type and its fields."""

    name: str = ""
    fields: list[FieldDescriptor] = field(default_factory=list)

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Return the field called ``name``, or None."""
        return next((f for f in self.fields if f.name == name), None)

    def has_field(self, name: str) -> bool:
        """Whether the message has a field called ``name``."""
        return self.get_field(name) is not None

    def is_optional(self, name: str) -> bool:
        """Whether the field called ``name`` exists and is proto3 optional."""
        found = self.get_field(name)
        return found is not None and found.proto3_optional


@dataclass
class HttpRule:
    """A google.api.http binding; ``verb`` is empty when no pattern is set."""

    selector: str = ""
    verb: str = ""
    path: str = ""
    body: str = ""

    def __post_init__(self) -> None:
        if self.verb not in _HTTP_VERBS:
            raise ValueError(f"unknown HTTP verb {self.verb!r}")


@dataclass
class MethodDescriptor:
    """An RPC method."""

    name: str = ""
    input_type: str = ""
    output_type: str = ""
    client_streaming: bool = False
    server_streaming: bool = False
    http: Optional[HttpRule] = None


@dataclass
class ServiceDescriptor:
    """A service and its methods."""

    name: str = ""
    methods: list[MethodDescriptor] = field(default_factory=list)
    default_host: str = ""
    api_version: str = ""

    def get_method(self, name: str) -> Optional[MethodDescriptor]:
        """Return the method called ``name``, or None."""
        return next((m for m in self.methods if m.name == name), None)

    def has_method(self, name: str) -> bool:
        """Whether the service defines an RPC called ``name``."""
        return self.get_method(name) is not None

    def has_rest_method(self) -> bool:
        """Whether at least one RPC carries an HTTP transcoding pattern."""
        return any(m.http is not None and m.http.verb for m in self.methods)


def contains_service(services: Iterable[ServiceDescriptor], service: ServiceDescriptor) -> bool:
    """Whether ``services`` holds a service with the same simple name."""
    return any(s.name == service.name for s in services)