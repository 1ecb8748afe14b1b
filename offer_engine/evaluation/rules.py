"""Rule and rule-set evaluation.

Two combinators:
- a Rule ANDs its clauses;
- a RuleSet ORs its rules (each rule evaluated independently).
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import NamedTuple

from offer_engine.evaluation.clauses import evaluate_clause
from offer_engine.schemas.campaign import Rule
from offer_engine.schemas.profile import MemberProfileAttributes


class PreapprovalMatch(NamedTuple):
    """Outcome of scanning a preapproval rule set."""

    matched: bool
    limit: Decimal | None  # highest positive limit among matched rules


def evaluate_rule(rule: Rule, attributes: MemberProfileAttributes) -> bool:
    """True iff every clause matches. A rule with no clauses always matches."""
    if not rule.clauses:
        return True
    return all(evaluate_clause(clause, attributes) for clause in rule.clauses)


def any_rule_matches(rules: Iterable[Rule], attributes: MemberProfileAttributes) -> bool:
    """OR across a rule set. An empty rule set matches."""
    rules = list(rules)
    if not rules:
        return True
    return any(evaluate_rule(rule, attributes) for rule in rules)


def resolve_preapproval(rules: Iterable[Rule], attributes: MemberProfileAttributes) -> PreapprovalMatch:
    """Scan every preapproval rule; the displayed cap is the max matched limit.

    A matching rule without a limit still counts as a match, so a member can
    be preapproved with no cap.
    """
    matched = False
    highest = Decimal("0")
    for rule in rules:
        if not evaluate_rule(rule, attributes):
            continue
        matched = True
        if rule.preapproval_limit:
            highest = max(highest, rule.preapproval_limit)

    return PreapprovalMatch(matched=matched, limit=highest if highest > 0 else None)
