"""Parsing of the generator's plugin parameter string."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Optional


class OptionsError(ValueError):
    """The plugin parameter string is malformed."""


INVALID_PARAM_MESSAGE = (
    "need parameter in format: go-gapic-package=client/import/path;packageName"
)


class Transport(enum.IntEnum):
    """Transport backends a client can be generated for."""

    GRPC = 0
    REST = 1

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_BOOLEAN_FLAGS = {
    "metadata": "metadata",
    "diregapic": "diregapic",
    "rest-numeric-enums": "rest_numeric_enum",
    "omit-snippets": "omit_snippets",
}


@dataclass
class Options:
    """Customisations of the generated client surface."""

    pkg_path: str = ""
    pkg_name: str = ""
    out_dir: str = ""
    rel_lvl: str = ""
    module_prefix: str = ""
    grpc_conf_path: str = ""
    service_config_path: str = ""
    transports: list[Transport] = field(default_factory=list)
    metadata: bool = False
    diregapic: bool = False
    rest_numeric_enum: bool = False
    pkg_overrides: dict[str, str] = field(default_factory=dict)
    omit_snippets: bool = False


def _parse_transports(value: str) -> list[Transport]:
    chosen: set[Transport] = set()
    for name in value.split("+"):
        try:
            chosen.add(Transport[name.upper()] if name in ("grpc", "rest") else None)
        except KeyError:
            pass
        if name not in ("grpc", "rest"):
            raise OptionsError(f'invalid transport option: "{name}"')
    return sorted(chosen)


def parse_options(parameter: Optional[str]) -> Options:
    """Parse comma-separated plugin options into an :class:`Options`.

    Options are ``key=value`` pairs or bare boolean flags; unknown keys are
    ignored, and ``go-gapic-package=path;name`` is required.
    """
    if parameter is None:
        raise OptionsError("empty options parameter")

    opts = Options()
    for item in parameter.split(","):
        if not item:
            continue
        if item in _BOOLEAN_FLAGS:
            setattr(opts, _BOOLEAN_FLAGS[item], True)
            continue

        key, sep, value = item.partition("=")
        if not sep:
            raise OptionsError(f'invalid plugin option format, must be key=value: "{item}"')
        if not value:
            raise OptionsError(
                f'invalid plugin option value, missing value in key=value: "{item}"'
            )

        if key == "go-gapic-package":
            pkg_path, semicolon, pkg_name = value.partition(";")
            if not semicolon:
                raise OptionsError(INVALID_PARAM_MESSAGE)
            opts.pkg_path = pkg_path
            opts.pkg_name = pkg_name
            opts.out_dir = pkg_path.replace("/", os.sep)
        elif key in ("gapic-service-config", "api-service-config"):
            # gapic-service-config is a deprecated alias.
            opts.service_config_path = value
        elif key == "grpc-service-config":
            opts.grpc_conf_path = value
        elif key == "module":
            opts.module_prefix = value
        elif key == "release-level":
            opts.rel_lvl = value.lower()
        elif key == "transport":
            opts.transports = _parse_transports(value)
        elif key.startswith("M"):
            # go_package override for the protobuf/grpc stubs.
            opts.pkg_overrides[key[1:]] = value

    if not (opts.pkg_path and opts.pkg_name and opts.out_dir):
        raise OptionsError(INVALID_PARAM_MESSAGE)

    if opts.module_prefix:
        if not opts.out_dir.startswith(opts.module_prefix):
            raise OptionsError(
                f'go-gapic-package "{opts.out_dir}" does not match prefix "{opts.module_prefix}"'
            )
        prefix = opts.module_prefix + "/"
        if opts.out_dir.startswith(prefix):
            opts.out_dir = opts.out_dir[len(prefix):]

    if not opts.transports:
        opts.transports = [Transport.GRPC]

    return opts