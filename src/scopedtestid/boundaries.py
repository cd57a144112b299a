from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Any, cast

from .composer import SKIP, Skip, compose
from .configuration import (
    DEFAULT_CONFIGURATION,
    Configuration,
    ConfigurationOverride,
    configuration_fields,
    resolve_configuration,
)
from .nodes import Node
from .scope import EMPTY_SCOPE, ScopeValue, nest_scope, root_scope
from .switch import Off, On, render_switch
from .validation import ValidationPolicy, validate_child_with_policy

logger = logging.getLogger("scopedtestid.boundary")


@dataclass(frozen=True, slots=True)
class ScopeContext:
    """Configuration and scope in effect at one boundary of the host tree.

    Contexts are threaded explicitly: every boundary derives a new context from
    its parent's and hands it to its descendants. A parent context is never
    modified.
    """

    configuration: Configuration = DEFAULT_CONFIGURATION
    scope: ScopeValue = EMPTY_SCOPE

    @property
    def enabled(self) -> bool:
        return self.configuration.enabled

    @property
    def identifier(self) -> str | Skip:
        return compose(self.scope, self.configuration)

    def configure(
        self,
        override: ConfigurationOverride | Configuration | None = None,
        **fields: Any,
    ) -> ScopeContext:
        merged: dict[str, Any] = {}
        if isinstance(override, Configuration):
            merged.update(configuration_fields(override))
        elif override:
            merged.update(override)
        merged.update(fields)
        if not merged:
            return self
        return replace(self, configuration=resolve_configuration(self.configuration, merged))

    def nest(self, value: str) -> ScopeContext:
        if not self.enabled:
            return self
        return replace(self, scope=nest_scope(self.scope, value, self.configuration))

    def root(self, value: str) -> ScopeContext:
        if not self.enabled:
            return self
        return replace(self, scope=root_scope(value, self.configuration))

    def attach(self, content: Any, policy: ValidationPolicy = ValidationPolicy.STRICT) -> Node | None:
        node = validate_child_with_policy(content, policy, "TestIdAttribute")
        if node is None:
            return None
        return render_switch(
            (
                On(lambda: _set_identifier(node, self)),
                Off(node),
            ),
            self.configuration,
        )

    def test_id(
        self,
        value: str,
        content: Any,
        policy: ValidationPolicy = ValidationPolicy.STRICT,
    ) -> RenderedBoundary:
        return self._render_boundary(self.nest(value), content, policy)

    def root_test_id(
        self,
        value: str,
        content: Any,
        policy: ValidationPolicy = ValidationPolicy.STRICT,
    ) -> RenderedBoundary:
        return self._render_boundary(self.root(value), content, policy)

    def _render_boundary(
        self,
        context: ScopeContext,
        content: Any,
        policy: ValidationPolicy,
    ) -> RenderedBoundary:
        node = context.attach(content, policy)
        if node is None:
            # A rejected boundary adds no link; its subtree keeps the parent chain.
            return RenderedBoundary(None, self)
        return RenderedBoundary(node, context)


@dataclass(frozen=True, slots=True)
class RenderedBoundary:
    node: Node | None
    context: ScopeContext

    @property
    def identifier(self) -> str | Skip:
        return self.context.identifier


def attach_strict(content: Any, context: ScopeContext) -> Node:
    return cast(Node, context.attach(content, ValidationPolicy.STRICT))


def attach_lenient(content: Any, context: ScopeContext) -> Node | None:
    return context.attach(content, ValidationPolicy.LENIENT)


def _set_identifier(node: Node, context: ScopeContext) -> Node:
    identifier = context.identifier
    if identifier is SKIP:
        logger.debug("Test id output disabled; leaving <%s> unchanged.", node.tag)
        return node
    return node.with_attribute(context.configuration.attribute_name, identifier)
