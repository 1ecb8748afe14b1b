"""Logical attribute names used by rule clauses, mapped to profile attributes.

Rule authors pick names from this vocabulary; several names may alias the
same profile attribute. Clauses loaded from storage can carry any string, so
resolution returns None for unknown names instead of raising.
"""

from __future__ import annotations

from decimal import Decimal

from offer_engine.models.enums import ProfileAttribute
from offer_engine.schemas.profile import MemberProfileAttributes

ATTRIBUTE_ALIASES: dict[str, ProfileAttribute] = {
    "Credit Score": ProfileAttribute.CREDIT_SCORE,
    "FICO Score": ProfileAttribute.CREDIT_SCORE,
    "Has Auto Loan": ProfileAttribute.HAS_AUTO_LOAN,
    "Has Mortgage": ProfileAttribute.HAS_MORTGAGE,
    "Has Credit Card": ProfileAttribute.HAS_CREDIT_CARD,
    "Member Since": ProfileAttribute.MEMBER_TENURE_YEARS,
    "Account Balance": ProfileAttribute.ACCOUNT_BALANCE,
    "Direct Deposit": ProfileAttribute.DIRECT_DEPOSIT,
    "Bankruptcy Indicator": ProfileAttribute.BANKRUPTCY_INDICATOR,
    "MLA Indicator": ProfileAttribute.MLA_INDICATOR,
    "Debt to Income": ProfileAttribute.DEBT_TO_INCOME,
}


def resolve_attribute(name: str) -> ProfileAttribute | None:
    """Map a clause's logical attribute name to a profile attribute."""
    return ATTRIBUTE_ALIASES.get(name)


def read_attribute(
    attributes: MemberProfileAttributes,
    attribute: ProfileAttribute,
) -> bool | int | Decimal | None:
    """Read one profile attribute value; None means absent."""
    return getattr(attributes, attribute.value)
