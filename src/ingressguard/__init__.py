"""ingressguard — admission-time validation for NGINX Ingress resources."""

from ingressguard.validation.ingress import check_ingress, validate_ingress

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "check_ingress",
    "validate_ingress",
]
