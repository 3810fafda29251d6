"""Ingress spec-shape and top-level validation."""

from ingressguard.validation.ingress import check_ingress, spec_validator_for, validate_ingress
from ingressguard.validation.spec import (
    validate_ingress_spec,
    validate_master_spec,
    validate_minion_spec,
)

__all__ = [
    "check_ingress",
    "spec_validator_for",
    "validate_ingress",
    "validate_ingress_spec",
    "validate_master_spec",
    "validate_minion_spec",
]
