"""Static table of recognized NGINX annotations and their value contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from ingressguard.annotations.parsing import (
    parse_bool,
    parse_lb_method,
    parse_non_negative_int,
    parse_time,
)
from ingressguard.models.errors import FieldError, FieldPath, forbidden, invalid, required

LB_METHOD = "nginx.org/lb-method"
MERGEABLE_INGRESS_TYPE = "nginx.org/mergeable-ingress-type"
HEALTH_CHECKS = "nginx.com/health-checks"
HEALTH_CHECKS_MANDATORY = "nginx.com/health-checks-mandatory"
HEALTH_CHECKS_MANDATORY_QUEUE = "nginx.com/health-checks-mandatory-queue"
SLOW_START = "nginx.com/slow-start"
SERVER_TOKENS = "nginx.org/server-tokens"
SERVER_SNIPPETS = "nginx.org/server-snippets"
LOCATION_SNIPPETS = "nginx.org/location-snippets"

MASTER = "master"
MINION = "minion"

PLUS_ONLY_DETAIL = "annotation requires NGINX Plus"


class ValueKind(StrEnum):
    BOOLEAN = "boolean"
    NON_NEGATIVE_INT = "non_negative_int"
    TIME = "time"
    LB_METHOD = "lb_method"
    MERGEABLE_TYPE = "mergeable_type"
    TEXT = "text"


@dataclass(frozen=True)
class AnnotationRule:
    """How one annotation key is checked.

    ``kind`` applies on both tiers unless ``plus_kind`` overrides it when
    NGINX Plus is enabled. ``depends_on`` names an annotation whose raw
    value must be ``true`` for this one to be allowed.
    """

    key: str
    kind: ValueKind
    plus_kind: ValueKind | None = None
    plus_only: bool = False
    depends_on: str | None = None

    def kind_for(self, is_plus: bool) -> ValueKind:
        if is_plus and self.plus_kind is not None:
            return self.plus_kind
        return self.kind


ValueChecker = Callable[[str, FieldPath, bool], FieldError | None]


def _parsed_by(parser: Callable[[str], object]) -> ValueChecker:
    def check(value: str, path: FieldPath, is_plus: bool) -> FieldError | None:
        try:
            parser(value)
        except ValueError as exc:
            return invalid(path, value, str(exc))
        return None

    return check


def _check_lb_method(value: str, path: FieldPath, is_plus: bool) -> FieldError | None:
    try:
        parse_lb_method(value, is_plus)
    except ValueError as exc:
        return invalid(path, value, str(exc))
    return None


def _check_mergeable_type(value: str, path: FieldPath, is_plus: bool) -> FieldError | None:
    if value == "":
        return required(path)
    if value not in (MASTER, MINION):
        return invalid(path, value, f"must be one of: '{MASTER}' or '{MINION}'")
    return None


def _check_text(value: str, path: FieldPath, is_plus: bool) -> FieldError | None:
    return None


_CHECKERS: Mapping[ValueKind, ValueChecker] = MappingProxyType(
    {
        ValueKind.BOOLEAN: _parsed_by(parse_bool),
        ValueKind.NON_NEGATIVE_INT: _parsed_by(parse_non_negative_int),
        ValueKind.TIME: _parsed_by(parse_time),
        ValueKind.LB_METHOD: _check_lb_method,
        ValueKind.MERGEABLE_TYPE: _check_mergeable_type,
        ValueKind.TEXT: _check_text,
    }
)


def _rules(*rules: AnnotationRule) -> Mapping[str, AnnotationRule]:
    return MappingProxyType({rule.key: rule for rule in rules})


ANNOTATION_RULES: Mapping[str, AnnotationRule] = _rules(
    AnnotationRule(LB_METHOD, ValueKind.LB_METHOD),
    AnnotationRule(MERGEABLE_INGRESS_TYPE, ValueKind.MERGEABLE_TYPE),
    AnnotationRule(HEALTH_CHECKS, ValueKind.BOOLEAN, plus_only=True),
    AnnotationRule(
        HEALTH_CHECKS_MANDATORY,
        ValueKind.BOOLEAN,
        plus_only=True,
        depends_on=HEALTH_CHECKS,
    ),
    AnnotationRule(
        HEALTH_CHECKS_MANDATORY_QUEUE,
        ValueKind.NON_NEGATIVE_INT,
        plus_only=True,
        depends_on=HEALTH_CHECKS_MANDATORY,
    ),
    AnnotationRule(SLOW_START, ValueKind.TIME, plus_only=True),
    AnnotationRule(SERVER_TOKENS, ValueKind.BOOLEAN, plus_kind=ValueKind.TEXT),
    AnnotationRule(SERVER_SNIPPETS, ValueKind.TEXT),
    AnnotationRule(LOCATION_SNIPPETS, ValueKind.TEXT),
)


def evaluate_rule(
    rule: AnnotationRule,
    annotations: Mapping[str, str],
    is_plus: bool,
    path: FieldPath,
) -> FieldError | None:
    """Check one annotation: tier gate, then value, then its dependency.

    Dependencies are read from the raw ``annotations`` mapping, never from
    another rule's result.
    """
    if rule.plus_only and not is_plus:
        return forbidden(path, PLUS_ONLY_DETAIL)

    value = annotations[rule.key]
    error = _CHECKERS[rule.kind_for(is_plus)](value, path, is_plus)
    if error is not None:
        return error

    if rule.depends_on is not None:
        related = annotations.get(rule.depends_on)
        if related is None:
            return forbidden(path, f"related annotation {rule.depends_on}: must be set")
        if related != "true":
            return forbidden(path, f"related annotation {rule.depends_on}: must be true")
    return None
