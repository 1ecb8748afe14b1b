"""Rule evaluation: clauses, rules, rule sets and campaign products."""

from offer_engine.evaluation.attributes import ATTRIBUTE_ALIASES, resolve_attribute
from offer_engine.evaluation.clauses import evaluate_clause
from offer_engine.evaluation.engine import evaluate_campaign_product
from offer_engine.evaluation.rules import (
    PreapprovalMatch,
    any_rule_matches,
    evaluate_rule,
    resolve_preapproval,
)

__all__ = [
    "ATTRIBUTE_ALIASES",
    "resolve_attribute",
    "evaluate_clause",
    "evaluate_rule",
    "any_rule_matches",
    "resolve_preapproval",
    "PreapprovalMatch",
    "evaluate_campaign_product",
]
