"""Tests for rule (AND) and rule-set (OR) evaluation, and preapproval resolution."""

from __future__ import annotations

from decimal import Decimal

from offer_engine.evaluation.rules import any_rule_matches, evaluate_rule, resolve_preapproval
from offer_engine.models.enums import RuleOperator
from offer_engine.schemas.campaign import RuleSet
from offer_engine.schemas.profile import MemberProfileAttributes
from tests.helpers import clause, credit_at_least, rule

ATTRS = MemberProfileAttributes(credit_score=700, has_auto_loan=True)


class TestEvaluateRule:
    def test_empty_rule_matches_anything(self):
        assert evaluate_rule(rule(), ATTRS) is True
        assert evaluate_rule(rule(), MemberProfileAttributes()) is True

    def test_all_clauses_must_match(self):
        both = rule(
            clause("Credit Score", RuleOperator.GREATER_THAN_OR_EQUAL, "680"),
            clause("Has Auto Loan", RuleOperator.IS_TRUE),
        )
        assert evaluate_rule(both, ATTRS) is True

    def test_one_failing_clause_fails_rule(self):
        mixed = rule(
            clause("Credit Score", RuleOperator.GREATER_THAN_OR_EQUAL, "680"),
            clause("Credit Score", RuleOperator.LESS_THAN, "700"),
        )
        assert evaluate_rule(mixed, ATTRS) is False


class TestAnyRuleMatches:
    def test_empty_set_matches(self):
        assert any_rule_matches(RuleSet(), ATTRS) is True

    def test_one_of_many(self):
        rules = [credit_at_least(800), credit_at_least(650)]
        assert any_rule_matches(rules, ATTRS) is True

    def test_none_match(self):
        assert any_rule_matches([credit_at_least(750), credit_at_least(800)], ATTRS) is False


class TestResolvePreapproval:
    def test_highest_matching_limit_wins(self):
        rules = [credit_at_least(650, limit=10000), credit_at_least(680, limit=25000)]
        result = resolve_preapproval(rules, ATTRS)
        assert result.matched is True
        assert result.limit == Decimal("25000")

    def test_limit_order_does_not_matter(self):
        rules = [credit_at_least(680, limit=25000), credit_at_least(650, limit=10000)]
        assert resolve_preapproval(rules, ATTRS).limit == Decimal("25000")

    def test_limits_are_not_summed(self):
        rules = [credit_at_least(650, limit=10000), credit_at_least(650, limit=10000)]
        assert resolve_preapproval(rules, ATTRS).limit == Decimal("10000")

    def test_non_matching_limit_ignored(self):
        rules = [credit_at_least(650, limit=10000), credit_at_least(750, limit=90000)]
        assert resolve_preapproval(rules, ATTRS).limit == Decimal("10000")

    def test_match_without_limit_is_uncapped(self):
        result = resolve_preapproval([credit_at_least(650)], ATTRS)
        assert result.matched is True
        assert result.limit is None

    def test_no_rules(self):
        result = resolve_preapproval([], ATTRS)
        assert result.matched is False
        assert result.limit is None
