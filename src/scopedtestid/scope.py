from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .configuration import Configuration
from .transformers import apply_transformers


def join_segments(segments: Iterable[str | None], separator: str) -> str:
    return separator.join(segment for segment in segments if segment)


@dataclass(frozen=True, slots=True)
class ScopeValue:
    """Ordered segments accumulated from the root boundary down to the current one.

    Segments are stored already transformed. Empty segments keep their position
    but are dropped when the scope is joined.
    """

    segments: tuple[str, ...] = ()

    def join(self, separator: str) -> str:
        return join_segments(self.segments, separator)

    def append(self, segment: str) -> ScopeValue:
        return ScopeValue(self.segments + (segment,))

    @property
    def is_empty(self) -> bool:
        return not any(self.segments)


EMPTY_SCOPE = ScopeValue()


def transform_segment(value: str, config: Configuration) -> str:
    return apply_transformers(value, config.pipeline())


def root_scope(value: str, config: Configuration) -> ScopeValue:
    return ScopeValue((transform_segment(value, config),))


def nest_scope(parent: ScopeValue, value: str, config: Configuration) -> ScopeValue:
    return parent.append(transform_segment(value, config))
