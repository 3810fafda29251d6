"""Structured field errors with Kubernetes-style field paths."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, computed_field


class ErrorType(StrEnum):
    """Error categories; the value is the human-readable prefix."""

    REQUIRED = "Required value"
    INVALID = "Invalid value"
    DUPLICATE = "Duplicate value"
    TOO_MANY = "Too many"
    FORBIDDEN = "Forbidden"


# Types whose message body omits the offending value
_VALUELESS_TYPES = frozenset({ErrorType.REQUIRED, ErrorType.FORBIDDEN})


class FieldPath(BaseModel):
    """Address of a field inside the validated object, e.g. ``spec.rules[0].host``."""

    segments: tuple[str | int, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def root(cls, name: str) -> FieldPath:
        return cls(segments=(name,))

    def child(self, *names: str) -> FieldPath:
        return FieldPath(segments=self.segments + names)

    def index(self, i: int) -> FieldPath:
        return FieldPath(segments=self.segments + (i,))

    def __str__(self) -> str:
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"[{segment}]")
            elif parts:
                parts.append(f".{segment}")
            else:
                parts.append(segment)
        return "".join(parts)


_NAMED_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(value: str) -> str:
    """Double-quote a string the way Go's ``%q`` verb does.

    Printable characters (including non-ASCII) are kept; other characters
    become ``\\xNN``, ``\\uNNNN`` or ``\\UNNNNNNNN`` escapes.
    """
    parts = ['"']
    for ch in value:
        code = ord(ch)
        if ch in _NAMED_ESCAPES:
            parts.append(_NAMED_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if value is None:
        return "null"
    return str(value)


class FieldError(BaseModel):
    """A single validation failure pinned to a field path."""

    type: ErrorType
    path: FieldPath
    detail: str = ""
    bad_value: Any = None

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def field(self) -> str:
        return str(self.path)

    def error_body(self) -> str:
        """Render the message without the field path.

        ``Required value``, ``Invalid value: "x": <detail>``,
        ``Duplicate value: "x"``, ``Too many: 2: must have at most 1 items``,
        ``Forbidden: <detail>``.
        """
        if self.type in _VALUELESS_TYPES:
            body = str(self.type)
        else:
            body = f"{self.type}: {_format_value(self.bad_value)}"
        if self.detail:
            body += f": {self.detail}"
        return body

    def __str__(self) -> str:
        return f"{self.path}: {self.error_body()}"


ErrorList = list[FieldError]


def required(path: FieldPath, detail: str = "") -> FieldError:
    return FieldError(type=ErrorType.REQUIRED, path=path, detail=detail)


def invalid(path: FieldPath, value: Any, detail: str) -> FieldError:
    return FieldError(type=ErrorType.INVALID, path=path, detail=detail, bad_value=value)


def duplicate(path: FieldPath, value: Any) -> FieldError:
    return FieldError(type=ErrorType.DUPLICATE, path=path, bad_value=value)


def too_many(path: FieldPath, actual: int, maximum: int) -> FieldError:
    return FieldError(
        type=ErrorType.TOO_MANY,
        path=path,
        detail=f"must have at most {maximum} items",
        bad_value=actual,
    )


def forbidden(path: FieldPath, detail: str) -> FieldError:
    return FieldError(type=ErrorType.FORBIDDEN, path=path, detail=detail)


def error_strings(errors: ErrorList) -> list[str]:
    """Render an error list as ``<path>: <body>`` strings, preserving order."""
    return [str(error) for error in errors]


class ValidationResult(BaseModel):
    """Result of validating one Ingress."""

    valid: bool
    errors: list[FieldError] = []

    @classmethod
    def from_errors(cls, errors: ErrorList) -> ValidationResult:
        return cls(valid=not errors, errors=list(errors))

    @property
    def messages(self) -> list[str]:
        return error_strings(self.errors)
