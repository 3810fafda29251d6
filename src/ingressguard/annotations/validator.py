"""Run every recognized annotation rule over an annotation mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ingressguard.annotations.rules import ANNOTATION_RULES, evaluate_rule
from ingressguard.models.errors import ErrorList, FieldPath

logger = logging.getLogger("ingressguard.annotations")


def validate_annotations(
    annotations: Mapping[str, str],
    is_plus: bool,
    path: FieldPath,
) -> ErrorList:
    """Validate annotations, at most one error per key.

    Errors are ordered by annotation key so the result does not depend on
    the iteration order of ``annotations``. Unrecognized keys are ignored.
    """
    errors: ErrorList = []
    for key in sorted(annotations):
        rule = ANNOTATION_RULES.get(key)
        if rule is None:
            continue
        error = evaluate_rule(rule, annotations, is_plus, path.child(key))
        if error is not None:
            errors.append(error)

    logger.debug(
        "validated %d annotations (plus=%s): %d errors",
        len(annotations), is_plus, len(errors),
    )
    return errors
