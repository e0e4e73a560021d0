"""Identifier case conversion and routing path-template helpers."""

from __future__ import annotations

import re

_CURLY_BRACE_RE = re.compile(r"{([^}]+)\}")
_BEFORE_EQUALS_RE = re.compile(r"(?P<before>[^=]*)=.*")


def lower_first(s: str) -> str:
    """Return ``s`` with its first character lower-cased."""
    if not s:
        return ""
    return s[0].lower() + s[1:]


def upper_first(s: str) -> str:
    """Return ``s`` with its first character upper-cased."""
    if not s:
        return ""
    return s[0].upper() + s[1:]


def camel_to_snake(s: str) -> str:
    """Convert CamelCase to snake_case, keeping upper-case acronyms together."""
    parts: list[str] = []
    for i, char in enumerate(s):
        if char.isupper() and i != 0:
            following = s[i + 1 : i + 2]
            # An upper-case letter followed by a non-upper-case one starts a word.
            if following and not following.isupper():
                parts.append("_")
        parts.append(char.lower())
    return "".join(parts)


def snake_to_camel(s: str) -> str:
    """Convert snake_case or SNAKE_CASE to CamelCase."""
    parts: list[str] = []
    up = True
    for char in s:
        if char == "_":
            up = True
        elif up and char.isdecimal():
            parts.append("_" + char)
            up = False
        elif up:
            parts.append(char.upper())
            up = False
        else:
            parts.append(char.lower())
    return "".join(parts)


def grpc_client_field(reduced_serv_name: str) -> str:
    """Name of the struct field that stores the gRPC client.

    An empty reduced service name yields the unexported ``client``.
    """
    return lower_first(reduced_serv_name + "Client")


def convert_path_template_to_regex(pattern: str) -> str:
    """Convert a routing-annotation path template into a regex string.

    The named capture group holds the header value.
    """
    if not pattern:
        return "(.*)"
    regex = pattern.replace("{", "(?P<").replace("}", ")")
    if "=" not in pattern or "/" not in pattern:
        # Unnamed segment: the whole capture is a wildcard.
        regex = regex.replace("*", "").replace("=", "")
        return regex.replace(")", ">.*)")
    for old, new in (
        ("/**", "(?:/.*)?"),
        ("/*", "/[^/]+"),
        ("=**", ">.*"),
        ("=*", ">[^/]+"),
        ("=", ">"),
        ("**", ".*"),
    ):
        regex = regex.replace(old, new)
    return regex


def get_header_name(pattern: str) -> str:
    """Return the header name named by a path template, or "" if it names none."""
    match = _CURLY_BRACE_RE.search(pattern)
    if pattern.count("=") > 1 or match is None:
        return ""
    segment = match.group(1)
    if "=" not in pattern:
        # A bare collection id is its own name.
        return segment
    before = _BEFORE_EQUALS_RE.search(segment)
    if before is None:
        raise ValueError(f"path template {pattern!r} has '=' outside its braces")
    return before.group("before")