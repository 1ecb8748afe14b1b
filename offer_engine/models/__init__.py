"""Domain enums for the offer engine."""

from __future__ import annotations

from offer_engine.models.enums import (
    CampaignStatus,
    CampaignType,
    EvaluationIssue,
    OfferVariant,
    ProductType,
    ProfileAttribute,
    RuleOperator,
)

__all__ = [
    "CampaignStatus",
    "CampaignType",
    "EvaluationIssue",
    "OfferVariant",
    "ProductType",
    "ProfileAttribute",
    "RuleOperator",
]
