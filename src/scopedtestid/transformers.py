from __future__ import annotations

from functools import reduce
import re
from typing import Callable, Iterable

Transformer = Callable[[str], str]

_WHITESPACE_PATTERN = re.compile(r"\s")


def apply_transformers(value: str, transformers: Iterable[Transformer] | None) -> str:
    if not transformers:
        return value
    return reduce(lambda current, transformer: transformer(current), transformers, value)


def convert_to_lower_case(value: str) -> str:
    return value.lower()


def convert_to_upper_case(value: str) -> str:
    return value.upper()


def replace_space_with(replacement: str) -> Transformer:
    def _replace_space(value: str) -> str:
        return _WHITESPACE_PATTERN.sub(lambda _match: replacement, value)

    return _replace_space


def replace_with(pattern: str | re.Pattern[str], replacement: str) -> Transformer:
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _replace(value: str) -> str:
        return compiled.sub(lambda _match: replacement, value)

    return _replace


def case_transformer(tag: str | None) -> Transformer | None:
    normalized = str(tag or "").strip().lower()
    if normalized == "lower":
        return convert_to_lower_case
    if normalized == "upper":
        return convert_to_upper_case
    # "none" and unknown tags leave the value untouched.
    return None
