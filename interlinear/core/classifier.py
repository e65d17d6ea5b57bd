"""
Block eligibility classification.

Decides whether a block is prose that should receive a gloss, or structural
content (headings, code fences, lists, quotes, tables, raw markup) that must be
left alone. The decision is a set of independent exclusion rules; the first
rule that matches the trimmed block excludes it.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class EligibilityRule:
    """A named exclusion rule matched against a trimmed block."""
    name: str
    pattern: re.Pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def gloss_rule(tag: str = "ruby") -> EligibilityRule:
    """Rule excluding blocks already wrapped in the gloss element."""
    return EligibilityRule(
        "gloss", re.compile(r"^<" + re.escape(tag) + r"[\s>]", re.IGNORECASE)
    )


DEFAULT_RULES: tuple[EligibilityRule, ...] = (
    gloss_rule(),
    EligibilityRule("code_fence", re.compile(r"^(?:`{3}|~{3})")),
    EligibilityRule("heading", re.compile(r"^#{1,6}\s")),
    EligibilityRule("list_item", re.compile(r"^(?:[-*+]\s|\d+\.\s)")),
    EligibilityRule("block_quote", re.compile(r"^>")),
    EligibilityRule("table_row", re.compile(r"^\|")),
    # Any block-level tag except an explicit <p>
    EligibilityRule("raw_markup", re.compile(r"^<(?!p[\s>])[a-z]+(?:[\s>]|$)", re.IGNORECASE)),
)


class EligibilityClassifier:
    """
    Classifies blocks as eligible (prose) or ineligible (structural).

    Example:
        classifier = EligibilityClassifier()
        classifier.is_eligible("A plain sentence.")   # True
        classifier.is_eligible("# Title")             # False

        # Also leave admonitions alone
        strict = classifier.extended(
            EligibilityRule("admonition", re.compile(r"^!>"))
        )
    """

    def __init__(self, rules: tuple[EligibilityRule, ...] | list[EligibilityRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def matching_rule(self, block: str) -> str | None:
        """
        Name of the first rule excluding the block.

        Returns "empty" for whitespace-only blocks, None for eligible ones.
        """
        text = block.strip()
        if not text:
            return "empty"

        for rule in self.rules:
            if rule.matches(text):
                return rule.name

        return None

    def is_eligible(self, block: str) -> bool:
        """Whether the block is prose that should receive a gloss."""
        return self.matching_rule(block) is None

    def extended(self, *rules: EligibilityRule) -> "EligibilityClassifier":
        """Return a classifier with additional exclusion rules."""
        return EligibilityClassifier(self.rules + rules)

    def without(self, *names: str) -> "EligibilityClassifier":
        """Return a classifier without the named rules."""
        return EligibilityClassifier(tuple(r for r in self.rules if r.name not in names))

    def replacing(self, rule: EligibilityRule) -> "EligibilityClassifier":
        """Return a classifier where the rule with the same name is swapped out."""
        return EligibilityClassifier(
            tuple(rule if r.name == rule.name else r for r in self.rules)
        )

    def __repr__(self) -> str:
        return f"EligibilityClassifier({[r.name for r in self.rules]})"


default_classifier = EligibilityClassifier()


def is_eligible(block: str) -> bool:
    """Classify a block with the default rule set."""
    return default_classifier.is_eligible(block)
