"""Ingress manifest loader built on ruamel.yaml."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from ingressguard.models.ingress import Ingress

logger = logging.getLogger("ingressguard.parser")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 20

# Anchor definitions (&name) at line start or after whitespace/sequence
# indicators. Quoted strings are not excluded.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)

INGRESS_KIND = "Ingress"


class ManifestError(Exception):
    """Raised when a manifest cannot be parsed into Ingress objects."""


class ManifestSafetyError(ManifestError):
    """Raised when manifest text violates the loader's safety limits.

    Distinct from parse errors: these indicate potentially malicious input
    (anchor expansion, excessive nesting, oversized documents).
    """


class ManifestLoader:
    """Loads ``kind: Ingress`` documents from a (multi-document) YAML stream."""

    def __init__(self) -> None:
        self._yaml = YAML(typ="rt")
        # ruamel.yaml raises once nesting exceeds this limit
        self._yaml.max_depth = _MAX_DEPTH

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise ManifestSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise ManifestSafetyError("YAML anchors/aliases are not supported in manifests")

    @staticmethod
    def _check_node_count(data: Any, limit: int = _MAX_NODE_COUNT) -> None:
        count = 0
        stack: list[Any] = [data]
        while stack:
            node = stack.pop()
            count += 1
            if count > limit:
                raise ManifestSafetyError(
                    f"YAML document exceeds maximum node count ({limit:,})"
                )
            if isinstance(node, dict):
                stack.extend(node.values())
            elif isinstance(node, list):
                stack.extend(node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> list[Ingress]:
        """Load every Ingress from a manifest file."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> list[Ingress]:
        """Load every Ingress from YAML text; other kinds are skipped."""
        self._check_yaml_safety(content)
        try:
            documents = list(self._yaml.load_all(content))
        except YAMLError as exc:
            raise ManifestError(f"{filename}: invalid YAML: {exc}") from exc

        ingresses: list[Ingress] = []
        for index, document in enumerate(documents):
            if document is None:
                continue
            self._check_node_count(document)
            data = self._to_plain_value(document)
            if not isinstance(data, dict):
                raise ManifestError(f"{filename}: document {index} is not a mapping")
            kind = data.get("kind")
            if kind != INGRESS_KIND:
                logger.debug("%s: skipping document %d of kind %r", filename, index, kind)
                continue
            try:
                ingresses.append(Ingress.model_validate(data))
            except ValidationError as exc:
                raise ManifestError(
                    f"{filename}: document {index} is not a valid Ingress: {exc}"
                ) from exc

        logger.debug("%s: loaded %d ingress(es)", filename, len(ingresses))
        return ingresses

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
        if isinstance(data, (CommentedMap, dict)):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, (CommentedSeq, list)):
            return [self._to_plain_value(item) for item in data]
        return data
