from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any

from .errors import (
    ChildValidationError,
    FragmentNotAllowedError,
    InvalidChildError,
    MultipleChildrenError,
)
from .nodes import ContentKind, Node, classify_content, unwrap_single

logger = logging.getLogger("scopedtestid.boundary")


class ValidationPolicy(Enum):
    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class ChildValidation:
    ok: bool
    message: str
    error: type[ChildValidationError] | None = None


def check_child(content: Any, boundary: str = "TestIdAttribute") -> ChildValidation:
    kind = classify_content(content)
    if kind is ContentKind.MULTIPLE:
        return ChildValidation(
            False, f"{boundary} expects a single node as its child.", MultipleChildrenError
        )
    if kind is ContentKind.FRAGMENT:
        return ChildValidation(
            False, f"{boundary} does not accept a fragment as its child.", FragmentNotAllowedError
        )
    if kind is ContentKind.INVALID:
        return ChildValidation(
            False, f"{boundary} expects a valid node as its child.", InvalidChildError
        )
    return ChildValidation(True, "Child is a single node.")


def validate_child(content: Any, boundary: str = "TestIdAttribute") -> Node:
    result = check_child(content, boundary)
    if not result.ok:
        error = result.error or InvalidChildError
        raise error(result.message)
    return unwrap_single(content)


def validate_child_with_policy(
    content: Any,
    policy: ValidationPolicy,
    boundary: str = "TestIdAttribute",
) -> Node | None:
    if policy is ValidationPolicy.STRICT:
        return validate_child(content, boundary)

    result = check_child(content, boundary)
    if not result.ok:
        logger.error(result.message)
        return None
    return unwrap_single(content)
