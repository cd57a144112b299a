from __future__ import annotations

from dataclasses import dataclass, fields, replace
from functools import lru_cache
import logging
from typing import Any, Iterable, Literal, Mapping

from .errors import ConfigurationError
from .transformers import Transformer, case_transformer, replace_space_with

CaseTransform = Literal["lower", "upper", "none"]

FIELD_ALIASES: dict[str, str] = {
    "data_attribute_name": "attribute_name",
    "scope_separator": "separator",
    "path_separator": "separator",
    "scope_transformers": "transformers",
}

logger = logging.getLogger("scopedtestid.configuration")


@dataclass(frozen=True, slots=True)
class Configuration:
    enabled: bool = True
    attribute_name: str = "data-testid"
    separator: str = "-"
    transformers: tuple[Transformer, ...] = ()
    space_replacement: str | None = None
    case_transform: CaseTransform | None = None

    def pipeline(self) -> tuple[Transformer, ...]:
        steps: list[Transformer] = []
        if self.space_replacement:
            steps.append(replace_space_with(self.space_replacement))
        case_step = case_transformer(self.case_transform)
        if case_step is not None:
            steps.append(case_step)
        steps.extend(self.transformers)
        return tuple(steps)


DEFAULT_CONFIGURATION = Configuration()

ConfigurationOverride = Mapping[str, Any]

_FIELD_NAMES = frozenset(item.name for item in fields(Configuration))

# None means "not given" for these; the default is kept.
_REQUIRED_FIELDS = frozenset({"enabled", "attribute_name", "separator"})


def resolve_configuration(
    defaults: Configuration = DEFAULT_CONFIGURATION,
    override: ConfigurationOverride | Configuration | None = None,
) -> Configuration:
    if override is None:
        return defaults
    items = _normalize_override(override)
    if not items:
        return defaults
    try:
        return _resolve_cached(defaults, items, _type_signature(defaults, items))
    except TypeError:
        # Unhashable override values cannot be memoized; resolve directly.
        return _resolve(defaults, items)


def configuration_fields(configuration: Configuration) -> dict[str, Any]:
    return {name: getattr(configuration, name) for name in sorted(_FIELD_NAMES)}


def _normalize_override(override: ConfigurationOverride | Configuration) -> tuple[tuple[str, Any], ...]:
    if isinstance(override, Configuration):
        raw: Mapping[str, Any] = configuration_fields(override)
    else:
        raw = override

    normalized: dict[str, Any] = {}
    for key, value in raw.items():
        name = FIELD_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            raise ConfigurationError(f"Unknown configuration field: {key!r}")
        if value is None and name in _REQUIRED_FIELDS:
            continue
        if name in normalized:
            logger.debug("Configuration field %s given more than once; keeping %s", name, key)
        normalized[name] = _freeze_value(name, value)
    return tuple(sorted(normalized.items()))


def _freeze_value(name: str, value: Any) -> Any:
    if name != "transformers":
        return value
    if value is None:
        return ()
    return tuple(_as_iterable(value))


def _as_iterable(value: Any) -> Iterable[Transformer]:
    if callable(value):
        return (value,)
    return value


def _type_signature(defaults: Configuration, items: tuple[tuple[str, Any], ...]) -> tuple[type, ...]:
    # Keeps 1 and True (or 0 and False) apart in the cache key.
    default_types = tuple(type(getattr(defaults, name)) for name in sorted(_FIELD_NAMES))
    return default_types + tuple(type(value) for _, value in items)


@lru_cache(maxsize=256)
def _resolve_cached(
    defaults: Configuration,
    items: tuple[tuple[str, Any], ...],
    signature: tuple[type, ...],
) -> Configuration:
    return _resolve(defaults, items)


def _resolve(defaults: Configuration, items: tuple[tuple[str, Any], ...]) -> Configuration:
    return replace(defaults, **dict(items))
