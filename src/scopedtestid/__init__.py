"""Deterministic, hierarchical test identifiers for nested UI trees."""

from __future__ import annotations

from .boundaries import RenderedBoundary, ScopeContext, attach_lenient, attach_strict
from .composer import SKIP, Skip, compose, compose_root, compose_segment, is_skip
from .configuration import DEFAULT_CONFIGURATION, Configuration, resolve_configuration
from .errors import (
    ChildValidationError,
    ConfigurationError,
    FragmentNotAllowedError,
    InvalidChildError,
    MultipleChildrenError,
    ScopedTestIdError,
    StructureError,
)
from .nodes import ContentKind, Fragment, Node, classify_content, find_by_attribute
from .scope import EMPTY_SCOPE, ScopeValue, join_segments, nest_scope, root_scope
from .switch import Off, On, render_switch, select_branch, switch
from .transformers import (
    apply_transformers,
    convert_to_lower_case,
    convert_to_upper_case,
    replace_space_with,
    replace_with,
)
from .validation import ValidationPolicy, check_child, validate_child

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIGURATION",
    "EMPTY_SCOPE",
    "SKIP",
    "ChildValidationError",
    "Configuration",
    "ConfigurationError",
    "ContentKind",
    "Fragment",
    "FragmentNotAllowedError",
    "InvalidChildError",
    "MultipleChildrenError",
    "Node",
    "Off",
    "On",
    "RenderedBoundary",
    "ScopeContext",
    "ScopeValue",
    "ScopedTestIdError",
    "Skip",
    "StructureError",
    "ValidationPolicy",
    "apply_transformers",
    "attach_lenient",
    "attach_strict",
    "check_child",
    "classify_content",
    "compose",
    "compose_root",
    "compose_segment",
    "convert_to_lower_case",
    "convert_to_upper_case",
    "find_by_attribute",
    "is_skip",
    "join_segments",
    "nest_scope",
    "render_switch",
    "replace_space_with",
    "replace_with",
    "resolve_configuration",
    "root_scope",
    "select_branch",
    "switch",
    "validate_child",
]
