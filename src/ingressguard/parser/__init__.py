"""YAML manifest loading for ingressguard."""

from ingressguard.parser.loader import ManifestError, ManifestLoader, ManifestSafetyError

__all__ = [
    "ManifestError",
    "ManifestLoader",
    "ManifestSafetyError",
]
