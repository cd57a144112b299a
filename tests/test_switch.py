import pytest

from scopedtestid.configuration import Configuration
from scopedtestid.errors import StructureError
from scopedtestid.switch import Off, On, render_switch, select_branch, switch

ENABLED = Configuration(enabled=True)
DISABLED = Configuration(enabled=False)


def test_switch_selects_on_when_enabled_and_off_when_disabled() -> None:
    branches = [On("enabled"), Off("disabled")]
    assert switch(branches, ENABLED) == "enabled"
    assert switch(branches, DISABLED) == "disabled"


def test_switch_branch_order_does_not_matter() -> None:
    assert switch([Off("B"), On("A")], ENABLED) == "A"
    assert switch([Off("B"), On("A")], DISABLED) == "B"


def test_select_branch_keyword_form() -> None:
    assert select_branch(ENABLED, on="A", off="B") == "A"
    assert select_branch(DISABLED, on="A", off="B") == "B"


def test_render_switch_evaluates_only_selected_branch() -> None:
    evaluated: list[str] = []

    def build(label: str):
        def _factory() -> str:
            evaluated.append(label)
            return label

        return _factory

    assert render_switch([On(build("on")), Off(build("off"))], DISABLED) == "off"
    assert evaluated == ["off"]


def test_branch_render_returns_plain_content() -> None:
    assert On("value").render() == "value"
    assert Off(None).render() is None


@pytest.mark.parametrize(
    ("branches", "message"),
    [
        ([On("A")], "requires an Off branch"),
        ([Off("B")], "requires an On branch"),
        ([], "requires an On branch"),
        ([On("A"), On("C"), Off("B")], "single On branch"),
        ([On("A"), Off("B"), Off("C")], "single Off branch"),
        (["invalid", On("A"), Off("B")], "only accepts On and Off branches, got str"),
    ],
)
def test_switch_rejects_malformed_branch_sets(branches: list[object], message: str) -> None:
    with pytest.raises(StructureError, match=message):
        switch(branches, ENABLED)


@pytest.mark.parametrize("branches", [On("A"), None, 3])
def test_switch_rejects_non_iterable_branch_sets(branches: object) -> None:
    with pytest.raises(StructureError, match="expects a sequence of On and Off branches"):
        switch(branches, ENABLED)
