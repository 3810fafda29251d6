"""Shared test fixtures for ingressguard."""

from __future__ import annotations

from typing import Any

import pytest

from ingressguard.models.ingress import Ingress
from ingressguard.parser.loader import ManifestLoader


def make_ingress(
    annotations: dict[str, str] | None = None,
    rules: list[dict[str, Any]] | None = None,
    tls: list[dict[str, Any]] | None = None,
) -> Ingress:
    """Build an Ingress from plain dicts in manifest (camelCase) form."""
    return Ingress.model_validate(
        {
            "metadata": {"name": "cafe", "namespace": "default", "annotations": annotations or {}},
            "spec": {"rules": rules or [], "tls": tls or []},
        }
    )


def rule(host: str, *paths: str, http: bool = True) -> dict[str, Any]:
    """A rule dict; ``http=False`` omits the http block entirely."""
    value: dict[str, Any] = {"host": host}
    if http:
        value["http"] = {
            "paths": [
                {"path": p, "backend": {"serviceName": "svc", "servicePort": 80}}
                for p in paths
            ]
        }
    return value


@pytest.fixture
def loader() -> ManifestLoader:
    return ManifestLoader()


SAMPLE_MANIFEST_YAML = """\
apiVersion: networking.k8s.io/v1beta1
kind: Ingress
metadata:
  name: cafe-ingress
  namespace: default
  annotations:
    nginx.org/lb-method: "least_conn"
    nginx.org/server-snippets: |
      location /healthz {
        return 200;
      }
spec:
  tls:
  - hosts:
    - cafe.example.com
    secretName: cafe-secret
  rules:
  - host: cafe.example.com
    http:
      paths:
      - path: /tea
        backend:
          serviceName: tea-svc
          servicePort: 80
      - path: /coffee
        backend:
          serviceName: coffee-svc
          servicePort: 80
"""

MERGEABLE_MANIFEST_YAML = """\
apiVersion: networking.k8s.io/v1beta1
kind: Ingress
metadata:
  name: cafe-master
  annotations:
    nginx.org/mergeable-ingress-type: "master"
spec:
  tls:
  - hosts:
    - cafe.example.com
    secretName: cafe-secret
  rules:
  - host: cafe.example.com
---
apiVersion: v1
kind: Service
metadata:
  name: tea-svc
spec:
  ports:
  - port: 80
---
apiVersion: networking.k8s.io/v1beta1
kind: Ingress
metadata:
  name: tea-minion
  annotations:
    nginx.org/mergeable-ingress-type: "minion"
spec:
  tls:
  - hosts:
    - cafe.example.com
  rules:
  - host: cafe.example.com
    http:
      paths:
      - path: /tea
        backend:
          serviceName: tea-svc
          servicePort: 80
"""
