"""Shape checks for the Ingress spec: standalone, master and minion variants."""

from __future__ import annotations

from collections.abc import Sequence

from ingressguard.models.errors import (
    ErrorList,
    FieldPath,
    duplicate,
    required,
    too_many,
)
from ingressguard.models.ingress import IngressRule, IngressSpec


def _validate_rules(rules: Sequence[IngressRule], path: FieldPath) -> ErrorList:
    """Non-empty rule list, non-empty hosts, no host repeated across rules."""
    errors: ErrorList = []
    rules_path = path.child("rules")
    if not rules:
        errors.append(required(rules_path))
        return errors

    seen_hosts: set[str] = set()
    for i, rule in enumerate(rules):
        host_path = rules_path.index(i).child("host")
        if rule.host == "":
            errors.append(required(host_path))
        elif rule.host in seen_hosts:
            errors.append(duplicate(host_path, rule.host))
        else:
            seen_hosts.add(rule.host)
    return errors


def validate_ingress_spec(spec: IngressSpec, path: FieldPath) -> ErrorList:
    """Validate a standalone (non-mergeable) Ingress spec."""
    return _validate_rules(spec.rules, path)


def _validate_mergeable_rules(spec: IngressSpec, path: FieldPath) -> tuple[ErrorList, bool]:
    """Rule-count bound plus host checks shared by master and minion.

    Returns the errors and whether rule 0 is the only rule, i.e. whether
    its paths are worth checking.
    """
    errors: ErrorList = []
    rules = spec.rules
    if len(rules) > 1:
        errors.append(too_many(path.child("rules"), len(rules), 1))
        errors.extend(_validate_rules(rules[:1], path))
        return errors, False

    errors.extend(_validate_rules(rules, path))
    return errors, len(rules) == 1


def validate_master_spec(spec: IngressSpec, path: FieldPath) -> ErrorList:
    """A master carries at most one host and no paths of its own."""
    errors, single_rule = _validate_mergeable_rules(spec, path)
    if single_rule:
        paths = spec.rules[0].paths
        if paths:
            paths_path = path.child("rules").index(0).child("http", "paths")
            errors.append(too_many(paths_path, len(paths), 0))
    return errors


def validate_minion_spec(spec: IngressSpec, path: FieldPath) -> ErrorList:
    """A minion carries at most one host, at least one path and no TLS."""
    errors, single_rule = _validate_mergeable_rules(spec, path)
    if single_rule and not spec.rules[0].paths:
        paths_path = path.child("rules").index(0).child("http", "paths")
        errors.append(required(paths_path, "must include at least one path"))

    if spec.tls:
        errors.append(too_many(path.child("tls"), len(spec.tls), 0))
    return errors
