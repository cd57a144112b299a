from __future__ import annotations

from enum import Enum

from .configuration import Configuration
from .scope import ScopeValue, nest_scope, root_scope


class Skip(Enum):
    SKIP = "skip"

    def __bool__(self) -> bool:
        return False


SKIP = Skip.SKIP


def compose(scope: ScopeValue, config: Configuration) -> str | Skip:
    if not config.enabled:
        return SKIP
    return scope.join(config.separator)


def compose_segment(parent: ScopeValue, value: str, config: Configuration) -> str | Skip:
    # Disabled boundaries never touch the pipeline or the scope chain.
    if not config.enabled:
        return SKIP
    return compose(nest_scope(parent, value, config), config)


def compose_root(value: str, config: Configuration) -> str | Skip:
    if not config.enabled:
        return SKIP
    return compose(root_scope(value, config), config)


def is_skip(result: str | Skip) -> bool:
    return result is SKIP
