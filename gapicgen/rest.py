"""REST transcoding helpers: HTTP bindings, path parameters and URL formats."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from gapicgen.descriptors import FieldDescriptor, MessageDescriptor, MethodDescriptor
from gapicgen.naming import lower_first, snake_to_camel

HTTP_PATTERN_VAR_RE = re.compile(r"{([a-zA-Z0-9_.]+?)(=[^{}]+)?}")
_PATH_PARAM_RE = re.compile(r"{([^}]+)}")


@dataclass(frozen=True)
class HttpInfo:
    """The verb, URL template and body selector of an HTTP binding."""

    verb: str = ""
    url: str = ""
    body: str = ""


def lowcase_rest_client_name(serv_name: str) -> str:
    """Name of the unexported REST client type for a reduced service name."""
    if not serv_name:
        return "restClient"
    return lower_first(serv_name + "RESTClient")


def get_http_info(method: Optional[MethodDescriptor]) -> Optional[HttpInfo]:
    """Return the HTTP binding of ``method``, or None if it has none."""
    if method is None or method.http is None:
        return None
    rule = method.http
    return HttpInfo(verb=rule.verb, url=rule.path, body=rule.body)


def lookup_field(
    types: Mapping[str, MessageDescriptor], message_name: str, path: str
) -> Optional[FieldDescriptor]:
    """Resolve a dotted field ``path`` starting at the message ``message_name``.

    Returns None when the message or any field along the path is unknown.
    """
    message = types.get(message_name)
    if message is None:
        return None
    *parents, leaf = path.split(".")
    for segment in parents:
        parent_field = message.get_field(segment)
        if parent_field is None:
            return None
        message = types.get(parent_field.type_name)
        if message is None:
            return None
    return message.get_field(leaf)


def field_getter(path: str) -> str:
    """Chain of Go getter calls reaching the dotted field ``path``."""
    if not path:
        return ""
    return "".join(f".Get{snake_to_camel(segment)}()" for segment in path.split("."))


def path_params(
    method: MethodDescriptor, types: Mapping[str, MessageDescriptor]
) -> dict[str, FieldDescriptor]:
    """Map each URL path variable that names a request field to that field."""
    info = get_http_info(method)
    if info is None:
        return {}
    params: dict[str, FieldDescriptor] = {}
    for match in _PATH_PARAM_RE.finditer(info.url):
        param = match.group(1).split("=")[0]
        found = lookup_field(types, method.input_type, param)
        if found is not None:
            params[param] = found
    return params


def base_url_format(info: HttpInfo) -> tuple[str, list[str]]:
    """Split a URL template into a ``%v`` format string and request accessors.

    The accessors appear in the order their variables occur in the URL.
    """
    fmt = HTTP_PATTERN_VAR_RE.sub("%v", info.url)
    accessors = [f"req{field_getter(m.group(1))}" for m in HTTP_PATTERN_VAR_RE.finditer(info.url)]
    return fmt, accessors