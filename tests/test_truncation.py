"""Tests for width-bounded truncation."""

import pytest
from rich.style import Style

from hilite.core.truncation import truncate_by_width, truncate_with
from hilite.models import Fragment, TruncateOptions


def raw(*texts: str) -> list[Fragment]:
    return [Fragment(text=t) for t in texts]


def texts(fragments: list[Fragment]) -> list[str]:
    return [f.text for f in fragments]


@pytest.mark.parametrize(
    ("max_width", "ellipsis", "expected"),
    [
        (1, "", ["a"]),
        (4, "", ["abc", "d"]),
        (8, "", ["abc", "def", "gh"]),
        (9, "", ["abc", "def", "ghi"]),
        (10, "", ["abc", "def", "ghi"]),
        (4, "..", ["ab", ".."]),
        (5, "..", ["abc", ".."]),
        (6, "..", ["abc", "d", ".."]),
        (7, "..", ["abc", "de", ".."]),
        (8, "..", ["abc", "def", ".."]),
        (9, "..", ["abc", "def", "ghi"]),
        (1, "...", ["."]),
        (2, "...", [".."]),
        (3, "...", ["..."]),
        (4, "...", ["a", "..."]),
        (6, "...", ["abc", "..."]),
        (8, "...", ["abc", "de", "..."]),
        (6, "....", ["ab", "...."]),
        (8, "....", ["abc", "d", "...."]),
        (9, "....", ["abc", "def", "ghi"]),
    ],
)
def test_truncate_by_width(max_width, ellipsis, expected):
    actual = truncate_by_width(raw("abc", "def", "ghi"), max_width, ellipsis)
    assert texts(actual) == expected


class TestTruncateStyles:
    """Kept fragments keep their style, the ellipsis gets its own."""

    STYLE1 = Style(color="red", bgcolor="cyan", bold=True)
    STYLE2 = Style(color="green", bgcolor="magenta", italic=True)
    STYLE3 = Style(color="blue", bgcolor="yellow", underline=True)
    ELLIPSIS = Style(color="white", bgcolor="black", dim=True)

    @pytest.fixture
    def fragments(self) -> list[Fragment]:
        return [
            Fragment(text="abc", style=self.STYLE1),
            Fragment(text="def", style=self.STYLE2),
            Fragment(text="ghi", style=self.STYLE3),
        ]

    @pytest.mark.parametrize(
        ("max_width", "expected"),
        [
            (1, [(".", ELLIPSIS)]),
            (3, [("a", STYLE1), ("..", ELLIPSIS)]),
            (5, [("abc", STYLE1), ("..", ELLIPSIS)]),
            (7, [("abc", STYLE1), ("de", STYLE2), ("..", ELLIPSIS)]),
            (8, [("abc", STYLE1), ("def", STYLE2), ("..", ELLIPSIS)]),
            (9, [("abc", STYLE1), ("def", STYLE2), ("ghi", STYLE3)]),
        ],
    )
    def test_styles(self, fragments, max_width, expected):
        actual = truncate_by_width(fragments, max_width, "..", self.ELLIPSIS)
        assert [f.as_tuple() for f in actual] == expected


class TestTruncateEdgeCases:
    """Identity, degenerate budgets and wide glyphs."""

    def test_identity_when_everything_fits(self):
        fragments = raw("abc", "def")
        assert truncate_by_width(fragments, 6, "...") == fragments
        assert truncate_by_width(fragments, 100, "...") == fragments

    def test_exact_fit_of_kept_fragments_still_appends_ellipsis(self):
        assert texts(truncate_by_width(raw("abc", "def", "ghi"), 7, "..")) == ["abc", "de", ".."]

    def test_zero_width_budget(self):
        assert texts(truncate_by_width(raw("abc"), 0, "...")) == [""]

    def test_ellipsis_defaults_to_null_style(self):
        actual = truncate_by_width(raw("abcdef"), 4, "..")
        assert actual[-1] == Fragment(text="..", style=Style.null())

    def test_wide_characters(self):
        fragments = raw("日本", "語")
        assert texts(truncate_by_width(fragments, 5, "…")) == ["日本", "…"]
        assert texts(truncate_by_width(fragments, 4, "…")) == ["日", "…"]
        assert texts(truncate_by_width(fragments, 6, "…")) == ["日本", "語"]

    def test_custom_measure(self):
        actual = truncate_by_width(raw("abcd"), 2, "", measure=len, truncate=lambda text, width: text[:width])
        assert texts(actual) == ["ab"]

    def test_truncate_with_options(self):
        options = TruncateOptions(max_width=5, ellipsis="..", ellipsis_style=Style(dim=True))
        actual = truncate_with(raw("abc", "def"), options)
        assert [f.as_tuple() for f in actual] == [("abc", Style.null()), ("..", Style(dim=True))]
