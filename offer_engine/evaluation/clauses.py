"""Single-clause evaluation against a member's profile attributes.

Pure, deterministic, fail-closed: an unknown attribute name, an absent
profile value, an unknown operator or a non-numeric operand all evaluate to
False. Nothing here raises.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from offer_engine.evaluation.attributes import read_attribute, resolve_attribute
from offer_engine.models.enums import EvaluationIssue, RuleOperator
from offer_engine.schemas.campaign import RuleClause
from offer_engine.schemas.profile import MemberProfileAttributes

logger = logging.getLogger(__name__)

ProfileValue = bool | int | Decimal | str

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?Infinity")
_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")

_NUMERIC_OPERATORS = {
    RuleOperator.GREATER_THAN: lambda a, b: a > b,
    RuleOperator.LESS_THAN: lambda a, b: a < b,
    RuleOperator.GREATER_THAN_OR_EQUAL: lambda a, b: a >= b,
    RuleOperator.LESS_THAN_OR_EQUAL: lambda a, b: a <= b,
}


def as_text(value: ProfileValue) -> str:
    """String form used by equality and substring operators.

    Booleans render as "true"/"false" and integral numbers drop their
    fractional part, so "720" equals a credit score of 720.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        if value == value.to_integral_value():
            return str(int(value))
        return format(value.normalize(), "f")
    return str(value)


def as_number(value: ProfileValue) -> Decimal | None:
    """Numeric form used by ordering operators. None means not a number.

    Strings follow the stored-rule conventions: blank reads as 0, decimal and
    exponent literals, signed Infinity, and 0x/0o/0b integer literals are
    accepted. Anything else (including "inf", "1_000" and NaN) is not a number.
    """
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, (int, Decimal)):
        number = Decimal(value)
    else:
        text = value.strip()
        if not text:
            return Decimal(0)
        if _DECIMAL_LITERAL.fullmatch(text):
            number = Decimal(text)
        elif _RADIX_LITERAL.fullmatch(text):
            number = Decimal(int(text, 0))
        else:
            return None
    if number.is_nan():
        return None
    return number


def _parse_operator(operator: RuleOperator | str) -> RuleOperator | None:
    try:
        return RuleOperator(operator)
    except ValueError:
        return None


def evaluate_clause(clause: RuleClause, attributes: MemberProfileAttributes) -> bool:
    """Evaluate one attribute/operator/value comparison."""
    attribute = resolve_attribute(clause.attribute)
    if attribute is None:
        logger.debug("%s: %r", EvaluationIssue.UNKNOWN_ATTRIBUTE.value, clause.attribute)
        return False

    profile_value = read_attribute(attributes, attribute)
    if profile_value is None:
        logger.debug("%s: %s", EvaluationIssue.MISSING_PROFILE_VALUE.value, attribute.value)
        return False

    operator = _parse_operator(clause.operator)
    if operator is None:
        logger.debug("%s: %r", EvaluationIssue.UNKNOWN_OPERATOR.value, clause.operator)
        return False

    if operator in _NUMERIC_OPERATORS:
        left = as_number(profile_value)
        right = as_number(clause.value)
        if left is None or right is None:
            return False
        return _NUMERIC_OPERATORS[operator](left, right)

    if operator == RuleOperator.EQUALS:
        return as_text(profile_value) == clause.value
    if operator == RuleOperator.NOT_EQUALS:
        return as_text(profile_value) != clause.value
    if operator == RuleOperator.IS_TRUE:
        return profile_value is True
    if operator == RuleOperator.IS_FALSE:
        return profile_value is False

    contained = clause.value.lower() in as_text(profile_value).lower()
    if operator == RuleOperator.CONTAINS:
        return contained
    return not contained  # NOT_CONTAINS
