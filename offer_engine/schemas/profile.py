"""Member profile schemas: the read-only input to rule evaluation."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from offer_engine.schemas.base import CamelModel


class MemberProfileAttributes(CamelModel):
    """Scalar attributes rule clauses are evaluated against.

    Every attribute is optional; None means the value is absent and any
    clause referencing it fails closed.
    """

    credit_score: int | None = None
    has_auto_loan: bool | None = None
    has_mortgage: bool | None = None
    has_credit_card: bool | None = None
    member_tenure_years: Decimal | None = None
    account_balance: Decimal | None = None
    direct_deposit: bool | None = None
    bankruptcy_indicator: bool | None = None
    mla_indicator: bool | None = None
    debt_to_income: Decimal | None = None


class MemberProfile(CamelModel):
    """A member identity plus one attributes snapshot."""

    id: str
    name: str = ""            # e.g. "High Credit Member (720+)"
    description: str = ""
    attributes: MemberProfileAttributes = Field(default_factory=MemberProfileAttributes)
    is_built_in: bool = False
