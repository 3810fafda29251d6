"""Value parsers for NGINX annotation literals.

Each parser returns the parsed value or raises ``ValueError`` with the
message the annotation rules report.
"""

from __future__ import annotations

import json
import re

# Literals accepted as booleans, matching the Kubernetes/Go convention
_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# One or more <digits><unit> groups separated by optional spaces; a missing
# unit means seconds.
_TIME_UNIT = r"[0-9]++(?:ms|s|m|h|d|w|M|y)?"
_TIME_RE = re.compile(rf"{_TIME_UNIT}(?: *{_TIME_UNIT})*")
_NON_NEGATIVE_INT_RE = re.compile(r"[0-9]+")

# Largest value of a signed 64-bit integer
_MAX_INT64 = 2**63 - 1
_MAX_INT64_DIGITS = len(str(_MAX_INT64))

# ---------------------------------------------------------------------------
# Load-balancing methods
# ---------------------------------------------------------------------------

NGINX_LB_METHODS: frozenset[str] = frozenset(
    {
        "round_robin",
        "least_conn",
        "ip_hash",
        "random",
        "random two",
        "random two least_conn",
    }
)

NGINX_PLUS_LB_METHODS: frozenset[str] = NGINX_LB_METHODS | frozenset(
    {
        "least_time header",
        "least_time last_byte",
        "least_time header inflight",
        "least_time last_byte inflight",
        "random two least_time=header",
        "random two least_time=last_byte",
    }
)


def parse_bool(value: str) -> bool:
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ValueError("must be a valid boolean")


def parse_non_negative_int(value: str) -> int:
    if not _NON_NEGATIVE_INT_RE.fullmatch(value):
        raise ValueError("must be a non-negative integer")
    digits = value.lstrip("0")
    if len(digits) > _MAX_INT64_DIGITS or (digits and int(digits) > _MAX_INT64):
        raise ValueError("must be a non-negative integer")
    return int(digits or "0")


def parse_time(value: str) -> str:
    """Validate an NGINX time literal such as ``60s``, ``500ms`` or ``1m 30s``."""
    if not _TIME_RE.fullmatch(value):
        raise ValueError("must be a valid time")
    return value


def _is_hash_method(method: str) -> bool:
    words = method.split(" ")
    if words[0] != "hash":
        return False
    return len(words) == 2 or (len(words) == 3 and words[2] == "consistent")


def parse_lb_method(value: str, is_plus: bool) -> str:
    """Return the normalized load-balancing method for the given tier."""
    method = value.strip()
    valid = NGINX_PLUS_LB_METHODS if is_plus else NGINX_LB_METHODS
    if method in valid or _is_hash_method(method):
        return method
    raise ValueError(f"Invalid load balancing method: {json.dumps(method, ensure_ascii=False)}")
