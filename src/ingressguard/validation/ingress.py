"""Top-level Ingress validation: annotations first, then the spec shape."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from ingressguard.annotations.rules import MASTER, MERGEABLE_INGRESS_TYPE, MINION
from ingressguard.annotations.validator import validate_annotations
from ingressguard.models.errors import ErrorList, FieldPath, ValidationResult
from ingressguard.models.ingress import Ingress, IngressSpec
from ingressguard.validation.spec import (
    validate_ingress_spec,
    validate_master_spec,
    validate_minion_spec,
)

logger = logging.getLogger("ingressguard.validation")

SpecValidator = Callable[[IngressSpec, FieldPath], ErrorList]

# Keyed by the raw mergeable-ingress-type value; anything else is standalone.
_SPEC_VALIDATORS: Mapping[str, SpecValidator] = MappingProxyType(
    {
        MASTER: validate_master_spec,
        MINION: validate_minion_spec,
    }
)


def spec_validator_for(annotations: Mapping[str, str]) -> SpecValidator:
    """Pick the spec-shape validator from the mergeable-ingress-type annotation."""
    mergeable_type = annotations.get(MERGEABLE_INGRESS_TYPE, "")
    return _SPEC_VALIDATORS.get(mergeable_type, validate_ingress_spec)


def validate_ingress(ingress: Ingress, is_plus: bool) -> ErrorList:
    """Validate an Ingress and its annotations.

    Annotation errors always precede spec errors. An empty list means the
    Ingress is valid.
    """
    annotations = ingress.annotations
    errors = validate_annotations(annotations, is_plus, FieldPath.root("annotations"))

    spec_validator = spec_validator_for(annotations)
    errors.extend(spec_validator(ingress.spec, FieldPath.root("spec")))

    logger.debug(
        "validated ingress %r with %s: %d errors",
        ingress.qualified_name, spec_validator.__name__, len(errors),
    )
    return errors


def check_ingress(ingress: Ingress, is_plus: bool) -> ValidationResult:
    """Like :func:`validate_ingress` but wrapped in a ``ValidationResult``."""
    return ValidationResult.from_errors(validate_ingress(ingress, is_plus))
