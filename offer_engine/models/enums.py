"""Domain enums shared by the schemas and the evaluation engine.

All enums use the str mixin so they serialise to their wire values.
"""

from __future__ import annotations

from enum import Enum


class CampaignType(str, Enum):
    """How a campaign reaches members. Drives cross-campaign priority."""

    PERPETUAL = "perpetual"    # always-on member offers
    TARGETED = "targeted"      # rules-based, built from a customer file
    UNTARGETED = "untargeted"  # shown to all members


class CampaignStatus(str, Enum):
    """Campaign lifecycle. Only LIVE campaigns are evaluated."""

    DRAFT = "draft"
    PENDING = "pending"
    LIVE = "live"
    COMPLETED = "completed"


class RuleOperator(str, Enum):
    """Comparison operators available to a rule clause."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    IS_TRUE = "is_true"
    IS_FALSE = "is_false"


class OfferVariant(str, Enum):
    """Display variant produced by evaluation."""

    PREAPPROVED = "preapproved"
    ITA = "ita"  # invite to apply


class ProductType(str, Enum):
    """Catalog product types, used for redemption-flow routing."""

    AUTO_LOAN = "auto-loan"
    AUTO_REFI = "auto-refi"
    HOME_LOAN = "home-loan"
    HELOC = "heloc"
    CREDIT_CARD = "credit-card"
    CREDIT_LIMIT_INCREASE = "credit-limit-increase"
    PERSONAL_LOAN = "personal-loan"
    TERM_LIFE = "term-life"
    GAP = "gap"
    MRC = "mrc"
    DEBT_PROTECTION = "debt-protection"
    SAVINGS = "savings"
    CHECKING = "checking"
    MONEY_MARKET = "money-market"
    CERTIFICATE = "certificate"
    MEMBERSHIP = "membership"


class ProfileAttribute(str, Enum):
    """Member profile attributes that rule clauses can reference.

    Values are the field names on MemberProfileAttributes.
    """

    CREDIT_SCORE = "credit_score"
    HAS_AUTO_LOAN = "has_auto_loan"
    HAS_MORTGAGE = "has_mortgage"
    HAS_CREDIT_CARD = "has_credit_card"
    MEMBER_TENURE_YEARS = "member_tenure_years"
    ACCOUNT_BALANCE = "account_balance"
    DIRECT_DEPOSIT = "direct_deposit"
    BANKRUPTCY_INDICATOR = "bankruptcy_indicator"
    MLA_INDICATOR = "mla_indicator"
    DEBT_TO_INCOME = "debt_to_income"


class EvaluationIssue(str, Enum):
    """Fail-closed conditions met during evaluation.

    None of these raise; they are logged and the affected comparison
    (or enrichment) degrades instead.
    """

    UNKNOWN_ATTRIBUTE = "unknown_attribute"
    MISSING_PROFILE_VALUE = "missing_profile_value"
    UNKNOWN_OPERATOR = "unknown_operator"
    MISSING_CATALOG_PRODUCT = "missing_catalog_product"
    MALFORMED_CAMPAIGN_SHAPE = "malformed_campaign_shape"
