"""NGINX annotation rules and the annotation set validator."""

from ingressguard.annotations.rules import ANNOTATION_RULES, AnnotationRule, ValueKind
from ingressguard.annotations.validator import validate_annotations

__all__ = [
    "ANNOTATION_RULES",
    "AnnotationRule",
    "ValueKind",
    "validate_annotations",
]
