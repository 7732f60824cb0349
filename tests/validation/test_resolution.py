# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for host resolution."""

import pytest

from meshcheck.hosts import parse_host
from meshcheck.inventory import InventoryView
from meshcheck.model import DestinationRule, ResolutionContext, Service
from meshcheck.validation import (
    CODE_HOST_UNRESOLVED,
    CODE_NAMESPACE_NOT_FOUND,
    MatchKind,
    Severity,
    host_findings,
    resolve,
)
from meshcheck.validation.resolution import (
    STRATEGIES,
    match_external_registry,
    match_local_service,
    match_namespace_qualified,
    match_service_entry,
    match_wildcard,
)

# ###############
# Test Helpers
# ###############

NAMESPACE = "test-namespace"


def _rule(host: str, namespace: str = NAMESPACE) -> DestinationRule:
    return DestinationRule(name="name", namespace=namespace, host=host)


def _reviews() -> list[Service]:
    return [
        Service(
            name="reviews",
            namespace=NAMESPACE,
            labels={"app": "reviews", "version": "v1"},
            selector={"app": "reviews"},
        )
    ]


def _context(namespace: str = NAMESPACE, **kwargs: object) -> ResolutionContext:
    return ResolutionContext(namespace=namespace, **kwargs)


def _kind(host: str, context: ResolutionContext) -> MatchKind:
    return resolve(_rule(host, context.namespace), context).kind


# ###############
# Local Services
# ###############


class TestLocalService:
    """Short and own-namespace hosts resolve against local services."""

    def test_short_name(self) -> None:
        match = resolve(_rule("reviews"), _context(services=_reviews()))
        assert match.kind is MatchKind.LOCAL_SERVICE
        assert match.service is not None
        assert match.service.name == "reviews"
        assert match.destination == "reviews.test-namespace.svc.cluster.local"

    def test_local_match_is_hashable(self) -> None:
        rule = _rule("reviews")
        context = _context(services=_reviews())
        match = resolve(rule, context)
        assert match.service is not None
        assert len({match, resolve(rule, context)}) == 1

    def test_namespace_qualified_to_own_namespace(self) -> None:
        assert _kind("reviews.test-namespace", _context(services=_reviews())) is MatchKind.LOCAL_SERVICE

    def test_cluster_local_form_of_own_namespace(self) -> None:
        host = "reviews.test-namespace.svc.cluster.local"
        assert _kind(host, _context(services=_reviews())) is MatchKind.LOCAL_SERVICE

    def test_unknown_short_name_is_unresolved(self) -> None:
        match = resolve(_rule("reviews"), _context(services=[]))
        assert match.kind is MatchKind.UNRESOLVED
        assert match.code == CODE_HOST_UNRESOLVED

    def test_service_in_other_namespace_does_not_match_short_name(self) -> None:
        services = [Service(name="reviews", namespace="other")]
        assert _kind("reviews", _context(services=services)) is MatchKind.UNRESOLVED


# ###############
# Cross-namespace
# ###############


class TestNamespaceQualified:
    """Hosts qualified to another namespace need a registry entry."""

    def test_registered_host_in_known_namespace(self) -> None:
        context = _context(
            known_namespaces={NAMESPACE, "outside-ns"},
            services=_reviews(),
            external_hosts={"reviews.outside-ns.svc.cluster.local"},
        )
        match = resolve(_rule("reviews.outside-ns.svc.cluster.local"), context)
        assert match.kind is MatchKind.NAMESPACE_QUALIFIED
        assert match.destination == "reviews.outside-ns.svc.cluster.local"

    def test_short_qualified_form_is_compared_by_fqdn(self) -> None:
        context = _context(external_hosts={"reviews.outside-ns.svc.cluster.local"})
        assert _kind("reviews.outside-ns", context) is MatchKind.NAMESPACE_QUALIFIED

    def test_registered_host_without_known_namespaces(self) -> None:
        context = _context(services=_reviews(), external_hosts={"reviews.different-ns.svc.cluster.local"})
        assert _kind("reviews.different-ns.svc.cluster.local", context) is MatchKind.NAMESPACE_QUALIFIED

    def test_known_namespace_without_registry_entry_is_unresolved(self) -> None:
        context = _context(known_namespaces={NAMESPACE, "outside-ns"}, services=_reviews())
        match = resolve(_rule("reviews.outside-ns"), context)
        assert match.kind is MatchKind.UNRESOLVED
        assert match.code == CODE_HOST_UNRESOLVED

    def test_unknown_namespace_gets_its_own_code(self) -> None:
        context = _context(known_namespaces={NAMESPACE, "outside-ns"}, services=_reviews())
        match = resolve(_rule("reviews.not-a-namespace"), context)
        assert match.kind is MatchKind.UNRESOLVED
        assert match.code == CODE_NAMESPACE_NOT_FOUND

    def test_service_physically_in_unknown_namespace_is_not_consulted(self) -> None:
        context = _context(
            known_namespaces={NAMESPACE},
            services=[*_reviews(), Service(name="reviews", namespace="hidden")],
            external_hosts={"reviews.hidden.svc.cluster.local"},
        )
        match = resolve(_rule("reviews.hidden"), context)
        assert match.kind is MatchKind.UNRESOLVED
        assert match.code == CODE_NAMESPACE_NOT_FOUND

    def test_service_in_other_namespace_without_registry_is_unresolved(self) -> None:
        context = _context(
            known_namespaces={NAMESPACE, "other"},
            services=[Service(name="reviews", namespace="other")],
        )
        assert _kind("reviews.other", context) is MatchKind.UNRESOLVED


# ###############
# Wildcards, service entries, registry
# ###############


class TestMeshWide:
    """Wildcard, service-entry and registry hosts resolve without local services."""

    @pytest.mark.parametrize("host", ["*", "*.local", "*.test-namespace.svc.cluster.local"])
    def test_wildcards_always_resolve(self, host: str) -> None:
        assert _kind(host, _context()) is MatchKind.MESH_WIDE_WILDCARD

    def test_service_entry_exact_host(self) -> None:
        context = _context(namespace="test", service_entry_hosts={"sni-proxy.local"})
        match = resolve(_rule("sni-proxy.local", "test"), context)
        assert match.kind is MatchKind.SERVICE_ENTRY_MATCH
        assert match.destination == "sni-proxy.local"

    def test_service_entry_wildcard_host(self) -> None:
        context = _context(namespace="test", service_entry_hosts={"*.local"})
        match = resolve(_rule("sni-proxy.local", "test"), context)
        assert match.kind is MatchKind.SERVICE_ENTRY_MATCH
        assert match.destination == "*.local"

    def test_service_entry_applies_despite_known_namespaces(self) -> None:
        context = _context(namespace="test", known_namespaces={"test"}, service_entry_hosts={"sni-proxy.local"})
        assert _kind("sni-proxy.local", context) is MatchKind.SERVICE_ENTRY_MATCH

    def test_imported_mesh_host_needs_registry_entry(self) -> None:
        host = "ratings.mesh2-bookinfo.svc.mesh1-imports.local"
        assert _kind(host, _context(namespace="test")) is MatchKind.UNRESOLVED
        assert _kind(host, _context(namespace="test", external_hosts={host})) is MatchKind.EXTERNAL_REGISTRY
        other = "ratings2.mesh2-bookinfo.svc.mesh1-imports.local"
        assert _kind(host, _context(namespace="test", external_hosts={other})) is MatchKind.UNRESOLVED

    def test_registry_lookup_independent_of_services(self) -> None:
        host = "ratings.bookinfo.svc.cluster.local"
        context = _context(namespace="test", external_hosts={host})
        assert resolve(_rule(host, "test"), context).resolved
        context = _context(namespace="test", external_hosts={"ratings2.bookinfo.svc.cluster.local"})
        assert not resolve(_rule(host, "test"), context).resolved


# ###############
# Strategies
# ###############


class TestStrategies:
    """Each strategy answers for one source of truth only."""

    def test_order(self) -> None:
        assert STRATEGIES == (
            match_local_service,
            match_namespace_qualified,
            match_wildcard,
            match_service_entry,
            match_external_registry,
        )

    def test_local_service_wins_over_service_entry(self) -> None:
        context = _context(services=_reviews(), service_entry_hosts={"*"})
        assert _kind("reviews", context) is MatchKind.LOCAL_SERVICE

    def test_wildcard_strategy_ignores_plain_hosts(self) -> None:
        view = InventoryView(_context())
        assert match_wildcard(parse_host("reviews", NAMESPACE), view) is None

    def test_local_strategy_ignores_external_hosts(self) -> None:
        view = InventoryView(_context(services=_reviews()))
        assert match_local_service(parse_host("reviews.example.com.org", NAMESPACE), view) is None

    def test_registry_strategy_respects_namespace_visibility(self) -> None:
        view = InventoryView(
            _context(known_namespaces={NAMESPACE}, external_hosts={"reviews.hidden.svc.cluster.local"})
        )
        assert match_external_registry(parse_host("reviews.hidden", NAMESPACE), view) is None


# ###############
# Findings
# ###############


class TestHostFindings:
    def test_resolved_host_has_no_findings(self) -> None:
        assert host_findings(resolve(_rule("*.local"), _context())) == []

    def test_unresolved_host_reports_error_at_spec_host(self) -> None:
        findings = host_findings(resolve(_rule("reviews"), _context()))
        assert len(findings) == 1
        assert findings[0].severity is Severity.ERROR
        assert findings[0].code == CODE_HOST_UNRESOLVED
        assert findings[0].path == "spec/host"

    def test_resolve_is_idempotent(self) -> None:
        context = _context(services=_reviews(), external_hosts={"x.example.com"})
        rule = _rule("reviews")
        assert resolve(rule, context) == resolve(rule, context)
