"""Pydantic domain models for ingressguard."""

from ingressguard.models.errors import (
    ErrorList,
    ErrorType,
    FieldError,
    FieldPath,
    ValidationResult,
)
from ingressguard.models.ingress import (
    HTTPIngressPath,
    HTTPIngressRuleValue,
    Ingress,
    IngressBackend,
    IngressRule,
    IngressSpec,
    IngressTLS,
    ObjectMeta,
)

__all__ = [
    "ErrorList",
    "ErrorType",
    "FieldError",
    "FieldPath",
    "HTTPIngressPath",
    "HTTPIngressRuleValue",
    "Ingress",
    "IngressBackend",
    "IngressRule",
    "IngressSpec",
    "IngressTLS",
    "ObjectMeta",
    "ValidationResult",
]
