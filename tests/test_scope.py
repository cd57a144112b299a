from scopedtestid.configuration import DEFAULT_CONFIGURATION, Configuration
from scopedtestid.scope import EMPTY_SCOPE, ScopeValue, join_segments, nest_scope, root_scope
from scopedtestid.transformers import convert_to_upper_case


def test_join_filters_empty_and_missing_segments() -> None:
    assert join_segments(["a", "", "b"], "-") == "a-b"
    assert join_segments([None, "a", None], "-") == "a"
    assert join_segments(["", ""], "-") == ""
    assert join_segments([], "-") == ""


def test_join_is_order_sensitive_and_repeatable() -> None:
    segments = ("settings", "profile", "save")
    assert join_segments(segments, ":") == join_segments(segments, ":") == "settings:profile:save"
    assert join_segments(reversed(segments), ":") == "save:profile:settings"


def test_join_never_produces_stray_separators() -> None:
    joined = join_segments(["", "a", "", "", "b", ""], "--")
    assert joined == "a--b"
    assert not joined.startswith("--")
    assert not joined.endswith("--")


def test_root_scope_transforms_and_discards_parent() -> None:
    config = Configuration(transformers=(convert_to_upper_case,))
    scope = root_scope("modal", config)
    assert scope == ScopeValue(("MODAL",))
    assert scope.join("-") == "MODAL"


def test_nest_scope_appends_without_mutating_parent() -> None:
    parent = root_scope("app", DEFAULT_CONFIGURATION)
    child = nest_scope(parent, "form", DEFAULT_CONFIGURATION)
    grandchild = nest_scope(child, "submit", DEFAULT_CONFIGURATION)

    assert parent.segments == ("app",)
    assert child.segments == ("app", "form")
    assert grandchild.join("-") == "app-form-submit"


def test_nest_scope_is_pure() -> None:
    parent = root_scope("app", DEFAULT_CONFIGURATION)
    assert nest_scope(parent, "x", DEFAULT_CONFIGURATION) == nest_scope(parent, "x", DEFAULT_CONFIGURATION)


def test_empty_segment_keeps_position_but_vanishes_when_joined() -> None:
    base = root_scope("a", DEFAULT_CONFIGURATION)
    with_empty = nest_scope(base, "", DEFAULT_CONFIGURATION)
    result = nest_scope(with_empty, "b", DEFAULT_CONFIGURATION)

    assert with_empty.segments == ("a", "")
    assert with_empty.join("-") == base.join("-")
    assert result.join("-") == "a-b"


def test_segment_that_transforms_to_empty_is_dropped() -> None:
    config = Configuration(transformers=(lambda value: value.strip("!"),))
    scope = nest_scope(root_scope("app", config), "!!!", config)
    assert scope.segments == ("app", "")
    assert scope.join("-") == "app"


def test_empty_scope() -> None:
    assert EMPTY_SCOPE.segments == ()
    assert EMPTY_SCOPE.is_empty
    assert ScopeValue(("",)).is_empty
    assert not root_scope("app", DEFAULT_CONFIGURATION).is_empty
    assert nest_scope(EMPTY_SCOPE, "leaf", DEFAULT_CONFIGURATION).join("-") == "leaf"
