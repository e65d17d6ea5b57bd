import re

import pytest

from interlinear.core.classifier import (
    DEFAULT_RULES,
    EligibilityClassifier,
    EligibilityRule,
    gloss_rule,
    is_eligible,
)


@pytest.mark.parametrize(
    "block, rule",
    [
        ("# Title", "heading"),
        ("###### Deep heading", "heading"),
        ("```js", "code_fence"),
        ("~~~\ncode\n~~~", "code_fence"),
        ("- item", "list_item"),
        ("* item", "list_item"),
        ("+ item", "list_item"),
        ("1. item", "list_item"),
        ("42. item", "list_item"),
        ("> quote", "block_quote"),
        (">no space", "block_quote"),
        ("| a | b |", "table_row"),
        ("<div>x</div>", "raw_markup"),
        ("<pre>code</pre>", "raw_markup"),
        ("<DETAILS open>", "raw_markup"),
        ("<hr>", "raw_markup"),
        ("<br", "raw_markup"),
        ("<ruby>x<rt>y</rt></ruby>", "gloss"),
        ("<RUBY class='g'>x</RUBY>", "gloss"),
    ],
)
def test_structural_blocks_are_ineligible(block, rule):
    classifier = EligibilityClassifier()
    assert classifier.is_eligible(block) is False
    assert classifier.matching_rule(block) == rule


@pytest.mark.parametrize(
    "block",
    [
        "A plain sentence.",
        "<p>explicit paragraph</p>",
        "<P class='lead'>Shouting paragraph</P>",
        "#hashtag without space",
        "1.5 million people live here.",
        "-dash without space",
        "Text with <em>inline</em> markup.",
        "  \n  Surrounded by whitespace.  \n",
    ],
)
def test_prose_blocks_are_eligible(block):
    assert is_eligible(block) is True
    assert EligibilityClassifier().matching_rule(block) is None


@pytest.mark.parametrize("block", ["", "   ", "\n\t\n"])
def test_empty_blocks_are_ineligible(block):
    classifier = EligibilityClassifier()
    assert classifier.is_eligible(block) is False
    assert classifier.matching_rule(block) == "empty"


def test_rules_are_checked_on_trimmed_block():
    assert is_eligible("   # Indented heading") is False
    assert is_eligible("\n\n- item") is False


def test_extended_adds_rules_without_touching_original():
    base = EligibilityClassifier()
    strict = base.extended(EligibilityRule("admonition", re.compile(r"^!>")))

    assert strict.is_eligible("!> Warning text") is False
    assert strict.matching_rule("!> Warning text") == "admonition"
    assert base.is_eligible("!> Warning text") is True
    assert len(strict.rules) == len(DEFAULT_RULES) + 1


def test_without_drops_rules_by_name():
    lenient = EligibilityClassifier().without("block_quote", "table_row")
    assert lenient.is_eligible("> quoted prose") is True
    assert lenient.is_eligible("| not really a table") is True
    assert lenient.is_eligible("# Title") is False


def test_replacing_swaps_gloss_rule():
    classifier = EligibilityClassifier().replacing(gloss_rule("span"))
    assert classifier.matching_rule("<span>x</span>") == "gloss"
    # <ruby> is still raw markup under the raw tag rule
    assert classifier.matching_rule("<ruby>x</ruby>") == "raw_markup"
    assert [r.name for r in classifier.rules] == [r.name for r in DEFAULT_RULES]
