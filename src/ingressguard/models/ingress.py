"""Read-only views of ``networking.k8s.io`` Ingress objects."""

from __future__ import annotations

from pydantic import BaseModel, Field

_VIEW_CONFIG = {"populate_by_name": True, "frozen": True}


class IngressBackend(BaseModel):
    """Service a path or default backend forwards to."""

    service_name: str = Field("", alias="serviceName")
    service_port: int | str = Field(0, alias="servicePort")

    model_config = _VIEW_CONFIG


class HTTPIngressPath(BaseModel):
    path: str = ""
    backend: IngressBackend | None = None

    model_config = _VIEW_CONFIG


class HTTPIngressRuleValue(BaseModel):
    paths: list[HTTPIngressPath] = []

    model_config = _VIEW_CONFIG


class IngressRule(BaseModel):
    """Host rule; ``http`` is absent when the rule carries no paths at all."""

    host: str = ""
    http: HTTPIngressRuleValue | None = None

    model_config = _VIEW_CONFIG

    @property
    def paths(self) -> list[HTTPIngressPath]:
        return self.http.paths if self.http is not None else []


class IngressTLS(BaseModel):
    hosts: list[str] = []
    secret_name: str = Field("", alias="secretName")

    model_config = _VIEW_CONFIG


class IngressSpec(BaseModel):
    backend: IngressBackend | None = None
    tls: list[IngressTLS] = []
    rules: list[IngressRule] = []

    model_config = _VIEW_CONFIG


class ObjectMeta(BaseModel):
    name: str = ""
    namespace: str = ""
    annotations: dict[str, str] = {}

    model_config = _VIEW_CONFIG


class Ingress(BaseModel):
    """An Ingress resource as supplied by the API server or a manifest."""

    api_version: str = Field("networking.k8s.io/v1beta1", alias="apiVersion")
    kind: str = "Ingress"
    metadata: ObjectMeta = ObjectMeta()
    spec: IngressSpec = IngressSpec()

    model_config = _VIEW_CONFIG

    @property
    def annotations(self) -> dict[str, str]:
        return self.metadata.annotations

    @property
    def qualified_name(self) -> str:
        """``namespace/name`` (``name`` alone when no namespace is set)."""
        if self.metadata.namespace:
            return f"{self.metadata.namespace}/{self.metadata.name}"
        return self.metadata.name
