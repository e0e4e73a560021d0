"""GAPIC metadata: which generated client method serves each RPC."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class MethodList:
    """The client methods that implement one RPC."""

    methods: list[str] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"methods": list(self.methods)} if self.methods else {}


@dataclass
class ServiceAsClient:
    """A service as exposed by one generated client type."""

    library_client: str = ""
    rpcs: dict[str, MethodList] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.library_client:
            out["libraryClient"] = self.library_client
        if self.rpcs:
            out["rpcs"] = {name: self.rpcs[name]._to_dict() for name in sorted(self.rpcs)}
        return out


@dataclass
class ServiceForTransport:
    """A service's clients, keyed by transport name."""

    clients: dict[str, ServiceAsClient] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        if not self.clients:
            return {}
        return {"clients": {name: self.clients[name]._to_dict() for name in sorted(self.clients)}}


@dataclass
class GapicMetadata:
    """Metadata describing a generated client library."""

    schema: str = ""
    comment: str = ""
    language: str = ""
    proto_package: str = ""
    library_package: str = ""
    services: dict[str, ServiceForTransport] = field(default_factory=dict)

    def add_service_for_transport(self, service: str, transport: str, lib: str) -> None:
        """Record the client of ``service`` for ``transport``; idempotent."""
        entry = self.services.setdefault(service, ServiceForTransport())
        if transport not in entry.clients:
            # The generated type's name always ends in "Client".
            entry.clients[transport] = ServiceAsClient(library_client=lib + "Client")

    def add_method(self, service: str, transport: str, rpc: str) -> None:
        """Record that ``rpc`` is served by a client method of the same name.

        Raises KeyError if the service or transport has not been added.
        """
        self.services[service].clients[transport].rpcs[rpc] = MethodList(methods=[rpc])

    def to_json(self) -> str:
        """Serialise as multi-line JSON with sorted map keys, omitting empty fields."""
        out: dict[str, Any] = {}
        for key, value in (
            ("schema", self.schema),
            ("comment", self.comment),
            ("language", self.language),
            ("protoPackage", self.proto_package),
            ("libraryPackage", self.library_package),
        ):
            if value:
                out[key] = value
        if self.services:
            out["services"] = {
                name: self.services[name]._to_dict() for name in sorted(self.services)
            }
        return json.dumps(out, indent=2)