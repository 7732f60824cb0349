# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Hostname parsing and comparison for mesh host references.

A raw host string from a routing object is classified into one of four
shapes:

- **short** (``reviews``): scoped to the namespace of the referencing object.
- **namespace-qualified** (``reviews.bookinfo`` or
  ``reviews.bookinfo.svc.cluster.local``): the second label names a namespace.
- **wildcard** (``*`` or ``*.local``): matches every host ending in the suffix.
- **external** (anything else): compared literally against registry and
  service-entry hosts.

Classification never fails. The cluster identity domain is always passed in
by the caller.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

DEFAULT_IDENTITY_DOMAIN = "svc.cluster.local"

WILDCARD = "*"


class HostKind(enum.Enum):
    """Shape of a parsed host reference."""

    SHORT = "short"
    NAMESPACE_QUALIFIED = "namespace-qualified"
    WILDCARD = "wildcard"
    EXTERNAL = "external"


@dataclass(frozen=True)
class ParsedHost:
    """A host reference classified relative to a namespace.

    Attributes:
        raw: The host string exactly as written in the routing object.
        kind: The classified shape of the host.
        service: Service name portion for short and namespace-qualified hosts.
        namespace: Implied or explicit namespace for short and
            namespace-qualified hosts.
        fqdn: Fully-qualified form. For local shapes this is
            ``service.namespace.<identity domain>``; otherwise the raw host.
    """

    raw: str
    kind: HostKind
    service: str | None
    namespace: str | None
    fqdn: str

    @property
    def identities(self) -> tuple[str, ...]:
        """Forms under which this host may appear in a registry or service entry."""
        if self.fqdn == self.raw:
            return (self.raw,)
        return (self.raw, self.fqdn)

    def is_local_to(self, namespace: str) -> bool:
        """Return True if the host refers to a service in ``namespace``."""
        return self.kind in (HostKind.SHORT, HostKind.NAMESPACE_QUALIFIED) and self.namespace == namespace


def parse_host(host: str, namespace: str, identity_domain: str = DEFAULT_IDENTITY_DOMAIN) -> ParsedHost:
    """Classify a raw host reference.

    Args:
        host: Host string from the routing object.
        namespace: Namespace of the routing object; short names resolve here.
        identity_domain: Cluster-local service domain (e.g. ``svc.cluster.local``).

    Returns:
        The :class:`ParsedHost`. Malformed input degrades to ``EXTERNAL``.
    """
    if WILDCARD in host:
        # Only a whole leading label may be a wildcard.
        if host == WILDCARD or (host.startswith(WILDCARD + ".") and WILDCARD not in host[1:]):
            return ParsedHost(raw=host, kind=HostKind.WILDCARD, service=None, namespace=None, fqdn=host)
        return _external(host)

    labels = host.split(".")
    if any(not label for label in labels):
        return _external(host)

    if len(labels) == 1:
        return _local(host, HostKind.SHORT, labels[0], namespace, identity_domain)

    if len(labels) == 2:
        return _local(host, HostKind.NAMESPACE_QUALIFIED, labels[0], labels[1], identity_domain)

    domain_labels = identity_domain.split(".")
    if len(labels) == len(domain_labels) + 2 and labels[2:] == domain_labels:
        return _local(host, HostKind.NAMESPACE_QUALIFIED, labels[0], labels[1], identity_domain)

    return _external(host)


def host_matches(pattern: str, host: str) -> bool:
    """Return True if ``host`` is matched by ``pattern``.

    A pattern without a leading wildcard must equal the host exactly. A
    pattern ``*.<suffix>`` matches hosts whose trailing labels equal the
    suffix labels and that carry at least one more label in front, so
    ``*.local`` matches ``foo.bar.local`` but neither ``local`` nor
    ``foobarlocal``. The bare ``*`` matches everything.
    """
    if pattern == WILDCARD:
        return True
    if not pattern.startswith(WILDCARD + "."):
        return pattern == host

    suffix = pattern.split(".")[1:]
    labels = host.split(".")
    if len(labels) <= len(suffix):
        return False
    return labels[-len(suffix) :] == suffix


def labels_match(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    """Return True if ``labels`` carries every key/value pair of ``selector``.

    Extra labels are ignored. An empty selector matches any label set.
    """
    return all(key in labels and labels[key] == value for key, value in selector.items())


# ################
# Implementation
# ################


def _local(raw: str, kind: HostKind, service: str, namespace: str, identity_domain: str) -> ParsedHost:
    fqdn = f"{service}.{namespace}.{identity_domain}"
    return ParsedHost(raw=raw, kind=kind, service=service, namespace=namespace, fqdn=fqdn)


def _external(raw: str) -> ParsedHost:
    return ParsedHost(raw=raw, kind=HostKind.EXTERNAL, service=None, namespace=None, fqdn=raw)
