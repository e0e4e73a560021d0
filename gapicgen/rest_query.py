"""Discovery of REST query parameters: leaf fields not bound to path or body."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from gapicgen.descriptors import (
    FieldDescriptor,
    FieldLabel,
    FieldType,
    MessageDescriptor,
    MethodDescriptor,
)
from gapicgen.naming import lower_first, snake_to_camel
from gapicgen.rest import get_http_info, lookup_field, path_params

# Well-known types have special JSON encodings and are treated as leaves.
WELL_KNOWN_TYPE_NAMES = frozenset(
    {
        ".google.protobuf.FieldMask",
        ".google.protobuf.Timestamp",
        ".google.protobuf.Duration",
        ".google.protobuf.DoubleValue",
        ".google.protobuf.FloatValue",
        ".google.protobuf.Int64Value",
        ".google.protobuf.UInt64Value",
        ".google.protobuf.Int32Value",
        ".google.protobuf.UInt32Value",
        ".google.protobuf.BoolValue",
        ".google.protobuf.StringValue",
        ".google.protobuf.BytesValue",
    }
)


def _contains(fields: Iterable[FieldDescriptor], target: FieldDescriptor) -> bool:
    return any(f is target for f in fields)


def get_leafs(
    msg: MessageDescriptor,
    types: Mapping[str, MessageDescriptor],
    excluded_fields: Iterable[Optional[FieldDescriptor]] = (),
) -> dict[str, FieldDescriptor]:
    """Map dotted paths to every leaf field reachable from ``msg``.

    A leaf is a non-message field (or a well-known type). Repeated message
    fields, the ``excluded_fields`` and recursive revisits are not descended.
    Raises KeyError if a message field names a type missing from ``types``.
    """
    excluded = [f for f in excluded_fields if f is not None]
    leafs: dict[str, FieldDescriptor] = {}

    def recurse(stack: list[FieldDescriptor], message: MessageDescriptor) -> None:
        for fld in message.fields:
            if fld.type == FieldType.MESSAGE and fld.type_name not in WELL_KNOWN_TYPE_NAMES:
                if fld.label == FieldLabel.REPEATED:
                    # Repeated message fields cannot be mapped to query params.
                    continue
                if _contains(excluded, fld) or _contains(stack, fld):
                    continue
                sub = types.get(fld.type_name)
                if sub is None:
                    raise KeyError(f"unknown message type {fld.type_name!r}")
                recurse([*stack, fld], sub)
            else:
                key = ".".join([*(f.name for f in stack), fld.name])
                leafs[key] = fld

    recurse([], msg)
    return leafs


def query_params(
    method: MethodDescriptor, types: Mapping[str, MessageDescriptor]
) -> dict[str, FieldDescriptor]:
    """Map each query-parameter path of ``method`` to its field, sorted by path.

    Query parameters are leaf fields of the request that are neither path
    parameters nor part of the request body.
    """
    info = get_http_info(method)
    if info is None or info.body == "*":
        return {}

    blocked = set(path_params(method, types))
    blocked.add(info.body)

    request = types.get(method.input_type)
    if request is None:
        raise KeyError(f"unknown request type {method.input_type!r}")
    body_field = lookup_field(types, method.input_type, info.body)

    leafs = get_leafs(request, types, [body_field])
    return {
        path: leaf
        for path, leaf in sorted(leafs.items())
        if path not in blocked and lookup_field(types, request.name, leaf.name) is None
    }


def query_param_key(path: str) -> str:
    """The lowerCamel query-string key for a dotted field path."""
    return lower_first(snake_to_camel(path))