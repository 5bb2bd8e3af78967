"""Tests for the declaration, specificity and contribution models."""

import pytest

from inlinecss.model import (
    INLINE_ORIGIN,
    INLINE_SPECIFICITY,
    Declaration,
    RawDeclaration,
    Specificity,
    StyleContribution,
    split_important,
)


# ---------------------------------------------------------------------------
# !important extraction
# ---------------------------------------------------------------------------


class TestSplitImportant:
    def test_plain_value(self):
        assert split_important("red") == ("red", False)

    def test_trailing_marker(self):
        assert split_important("red !important") == ("red", True)

    def test_marker_without_space(self):
        assert split_important("red!important") == ("red", True)

    def test_space_after_bang(self):
        assert split_important("red ! important") == ("red", True)

    def test_case_insensitive(self):
        assert split_important("red !IMPORTANT") == ("red", True)

    def test_marker_must_be_trailing(self):
        value, important = split_important("url(a!important.png) no-repeat")
        assert important is False
        assert value == "url(a!important.png) no-repeat"

    def test_multi_word_value(self):
        assert split_important("0 auto !important") == ("0 auto", True)


class TestDeclaration:
    def test_from_raw_strips_marker_once(self):
        decl = Declaration.from_raw(RawDeclaration("color", "blue !important"))
        assert decl == Declaration(property="color", value="blue", important=True)
        assert "important" not in decl.value

    def test_from_raw_plain(self):
        decl = Declaration.from_raw(RawDeclaration("margin", "0"))
        assert decl.important is False
        assert decl.value == "0"

    def test_is_frozen(self):
        decl = Declaration("color", "red")
        with pytest.raises(AttributeError):
            decl.value = "blue"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSpecificity:
    def test_default_is_zero(self):
        assert Specificity() == (0, 0, 0, 0)

    def test_inline_outranks_any_selector(self):
        assert INLINE_SPECIFICITY > Specificity(ids=99, classes=99, types=99)

    def test_lexicographic_order(self):
        assert Specificity(ids=1) > Specificity(classes=10)
        assert Specificity(classes=1) > Specificity(types=10)
        assert Specificity(classes=1, types=2) > Specificity(classes=1, types=1)

    def test_str(self):
        assert str(Specificity(ids=1, types=2)) == "0,1,0,2"


class TestStyleContribution:
    def test_style_attribute_outranks_rules_at_equal_importance(self):
        inline = StyleContribution((), INLINE_SPECIFICITY, INLINE_ORIGIN)
        rule = StyleContribution((), Specificity(ids=5), 3)
        assert (*inline.specificity, inline.origin_order) > (*rule.specificity, rule.origin_order)

    def test_is_frozen(self):
        contribution = StyleContribution((), Specificity(), 1)
        with pytest.raises(AttributeError):
            contribution.origin_order = 2  # type: ignore[misc]
