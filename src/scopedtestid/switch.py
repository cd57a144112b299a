from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from .configuration import Configuration
from .errors import StructureError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class On(Generic[T]):
    content: T

    def render(self) -> Any:
        return _render(self.content)


@dataclass(frozen=True, slots=True)
class Off(Generic[T]):
    content: T

    def render(self) -> Any:
        return _render(self.content)


Branch = On[Any] | Off[Any]


def switch(branches: Iterable[object], config: Configuration) -> Any:
    """Return the content of the branch matching ``config.enabled``.

    The branch set must hold exactly one ``On`` and exactly one ``Off``.
    """
    return _select_branch(branches, config).content


def render_switch(branches: Iterable[object], config: Configuration) -> Any:
    """Like :func:`switch`, but calls the selected content when it is callable.

    Only the selected branch is evaluated.
    """
    return _select_branch(branches, config).render()


def select_branch(config: Configuration, *, on: T, off: T) -> T:
    return switch((On(on), Off(off)), config)


def _select_branch(branches: Iterable[object], config: Configuration) -> Branch:
    on_branch: On[Any] | None = None
    off_branch: Off[Any] | None = None

    try:
        candidates = list(branches)
    except TypeError as exc:
        raise StructureError(
            f"Switch expects a sequence of On and Off branches, got {type(branches).__name__}."
        ) from exc

    for branch in candidates:
        if isinstance(branch, On):
            if on_branch is not None:
                raise StructureError("Switch accepts a single On branch.")
            on_branch = branch
        elif isinstance(branch, Off):
            if off_branch is not None:
                raise StructureError("Switch accepts a single Off branch.")
            off_branch = branch
        else:
            raise StructureError(
                f"Switch only accepts On and Off branches, got {type(branch).__name__}."
            )

    if on_branch is None:
        raise StructureError("Switch requires an On branch.")
    if off_branch is None:
        raise StructureError("Switch requires an Off branch.")

    return on_branch if config.enabled else off_branch


def _render(content: Any) -> Any:
    if callable(content):
        factory: Callable[[], Any] = content
        return factory()
    return content
