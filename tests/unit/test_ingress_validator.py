"""Tests for top-level Ingress validation."""

from __future__ import annotations

import pytest

from ingressguard import check_ingress, validate_ingress
from ingressguard.models.errors import error_strings
from ingressguard.validation.ingress import spec_validator_for
from ingressguard.validation.spec import (
    validate_ingress_spec,
    validate_master_spec,
    validate_minion_spec,
)
from tests.conftest import make_ingress, rule


class TestValidateIngress:
    def test_valid_input(self) -> None:
        ingress = make_ingress(rules=[rule("example.com", http=False)])
        assert validate_ingress(ingress, is_plus=False) == []

    def test_invalid_ingress(self) -> None:
        ingress = make_ingress(
            annotations={"nginx.org/mergeable-ingress-type": "invalid"},
            rules=[rule("", http=False)],
        )
        assert error_strings(validate_ingress(ingress, is_plus=False)) == [
            'annotations.nginx.org/mergeable-ingress-type: Invalid value: "invalid": '
            "must be one of: 'master' or 'minion'",
            "spec.rules[0].host: Required value",
        ]

    def test_invalid_master(self) -> None:
        ingress = make_ingress(
            annotations={"nginx.org/mergeable-ingress-type": "master"},
            rules=[rule("example.com", "/")],
        )
        assert error_strings(validate_ingress(ingress, is_plus=False)) == [
            "spec.rules[0].http.paths: Too many: 1: must have at most 0 items",
        ]

    def test_invalid_minion(self) -> None:
        ingress = make_ingress(
            annotations={"nginx.org/mergeable-ingress-type": "minion"},
            rules=[rule("example.com", http=False)],
        )
        assert error_strings(validate_ingress(ingress, is_plus=False)) == [
            "spec.rules[0].http.paths: Required value: must include at least one path",
        ]

    def test_annotation_errors_precede_spec_errors(self) -> None:
        ingress = make_ingress(
            annotations={
                "nginx.org/mergeable-ingress-type": "minion",
                "nginx.org/lb-method": "bogus",
            },
            rules=[rule("a", http=False), rule("b", http=False)],
            tls=[{"hosts": ["a"]}],
        )
        assert error_strings(validate_ingress(ingress, is_plus=True)) == [
            'annotations.nginx.org/lb-method: Invalid value: "bogus": '
            'Invalid load balancing method: "bogus"',
            "spec.rules: Too many: 2: must have at most 1 items",
            "spec.tls: Too many: 1: must have at most 0 items",
        ]

    @pytest.mark.parametrize("is_plus, expected", [(False, 1), (True, 0)])
    def test_tier_gating(self, is_plus: bool, expected: int) -> None:
        ingress = make_ingress(
            annotations={"nginx.com/health-checks": "true"},
            rules=[rule("example.com")],
        )
        assert len(validate_ingress(ingress, is_plus)) == expected

    def test_empty_mergeable_type_validates_as_standalone(self) -> None:
        ingress = make_ingress(
            annotations={"nginx.org/mergeable-ingress-type": ""},
            rules=[rule("example.com", "/")],
            tls=[{"hosts": ["example.com"]}],
        )
        assert error_strings(validate_ingress(ingress, is_plus=False)) == [
            "annotations.nginx.org/mergeable-ingress-type: Required value",
        ]

    def test_deterministic(self) -> None:
        ingress = make_ingress(
            annotations={"nginx.org/lb-method": "x", "nginx.com/slow-start": "y"},
            rules=[rule("a"), rule("a"), rule("")],
        )
        assert validate_ingress(ingress, False) == validate_ingress(ingress, False)

    def test_returns_a_fresh_list(self) -> None:
        ingress = make_ingress(rules=[rule("")])
        first = validate_ingress(ingress, False)
        first.clear()
        assert len(validate_ingress(ingress, False)) == 1


class TestSpecValidatorSelection:
    @pytest.mark.parametrize(
        "annotations, expected",
        [
            ({}, validate_ingress_spec),
            ({"nginx.org/mergeable-ingress-type": "master"}, validate_master_spec),
            ({"nginx.org/mergeable-ingress-type": "minion"}, validate_minion_spec),
            ({"nginx.org/mergeable-ingress-type": "Master"}, validate_ingress_spec),
            ({"nginx.org/mergeable-ingress-type": ""}, validate_ingress_spec),
        ],
    )
    def test_selection(self, annotations: dict[str, str], expected: object) -> None:
        assert spec_validator_for(annotations) is expected


class TestCheckIngress:
    def test_valid(self) -> None:
        result = check_ingress(make_ingress(rules=[rule("example.com")]), is_plus=False)
        assert result.valid is True
        assert result.errors == []

    def test_invalid(self) -> None:
        result = check_ingress(make_ingress(), is_plus=False)
        assert result.valid is False
        assert result.messages == ["spec.rules: Required value"]
