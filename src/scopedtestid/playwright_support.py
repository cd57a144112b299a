from __future__ import annotations

from typing import TYPE_CHECKING

from .composer import SKIP, Skip
from .configuration import DEFAULT_CONFIGURATION, Configuration

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page, Playwright


def escape_css_attribute_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def selector_for_test_id(identifier: str, configuration: Configuration = DEFAULT_CONFIGURATION) -> str:
    name = configuration.attribute_name
    return f'[{name}="{escape_css_attribute_value(identifier)}"]'


def configure_test_id_attribute(
    playwright: Playwright,
    configuration: Configuration = DEFAULT_CONFIGURATION,
) -> None:
    playwright.selectors.set_test_id_attribute(configuration.attribute_name)


def locate_by_test_id(page: Page, identifier: str | Skip) -> Locator:
    if identifier is SKIP:
        raise ValueError("Cannot locate a node whose test id output is disabled.")
    return page.get_by_test_id(identifier)


def count_test_id_matches(
    page: Page,
    identifier: str | Skip,
    configuration: Configuration = DEFAULT_CONFIGURATION,
) -> int:
    if identifier is SKIP or not identifier:
        return 0
    return len(page.query_selector_all(selector_for_test_id(identifier, configuration)))
