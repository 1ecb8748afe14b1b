"""Campaign aggregate schemas: rules, campaign products, sections, campaigns.

Campaign configurations are frequently incomplete while being authored, so
list fields tolerate null/missing values and read them as empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from decimal import Decimal

from pydantic import ConfigDict, Field, RootModel, field_validator

from offer_engine.config import settings
from offer_engine.models.enums import (
    CampaignStatus,
    CampaignType,
    EvaluationIssue,
    ProductType,
    RuleOperator,
)
from offer_engine.schemas.base import CamelModel

logger = logging.getLogger(__name__)


def _none_as_empty(value: object, field: str) -> object:
    """Read a null list field as empty."""
    if value is None:
        logger.debug("%s: null %s read as empty", EvaluationIssue.MALFORMED_CAMPAIGN_SHAPE.value, field)
        return []
    return value


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class RuleClause(CamelModel):
    """Single attribute/operator/value comparison.

    ``attribute`` is a logical name ("Credit Score", "FICO Score") resolved
    through the alias table at evaluation time. Operators outside
    RuleOperator are kept verbatim and never match.
    """

    id: str = ""
    attribute: str
    operator: RuleOperator | str
    value: str = ""


class Rule(CamelModel):
    """AND-combination of clauses. No clauses means the rule always matches."""

    id: str = ""
    clauses: list[RuleClause] = Field(default_factory=list)
    preapproval_limit: Decimal | None = None  # only read for preapproval rules

    @field_validator("clauses", mode="before")
    @classmethod
    def _clauses_none_as_empty(cls, v: object) -> object:
        return _none_as_empty(v, "clauses")


class RuleSet(RootModel[list[Rule]]):
    """OR-combination of rules, as stored in a campaign product's rule arrays."""

    model_config = ConfigDict(frozen=True)

    root: list[Rule] = Field(default_factory=list)

    @field_validator("root", mode="before")
    @classmethod
    def _root_none_as_empty(cls, v: object) -> object:
        return _none_as_empty(v, "rule set")

    def __iter__(self) -> Iterator[Rule]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


# ---------------------------------------------------------------------------
# Campaign products and sections
# ---------------------------------------------------------------------------


class CampaignProduct(CamelModel):
    """A catalog product placed in one section of one campaign, with its rules."""

    id: str
    product_id: str                    # weak reference into the product catalog
    product_name: str
    product_type: ProductType
    section_id: str = ""
    is_featured_offer: bool = False
    is_default_campaign_product: bool = False

    # Featured offer copy, chosen by variant
    featured_preapproval_headline: str | None = None
    featured_preapproval_description: str | None = None
    featured_application_headline: str | None = None
    featured_application_description: str | None = None

    product_rules: RuleSet = Field(default_factory=RuleSet)       # any match shows the product
    preapproval_rules: RuleSet = Field(default_factory=RuleSet)   # any match preapproves, highest limit wins
    intro_rate_rules: RuleSet = Field(default_factory=RuleSet)    # carried, not evaluated
    consumer_prequal_rules: RuleSet = Field(default_factory=RuleSet)  # carried, not evaluated

    @field_validator(
        "product_rules",
        "preapproval_rules",
        "intro_rate_rules",
        "consumer_prequal_rules",
        mode="before",
    )
    @classmethod
    def _rules_none_as_empty(cls, v: object) -> object:
        return _none_as_empty(v, "rules")


class CampaignSection(CamelModel):
    """Named, ordered group of campaign products."""

    id: str = ""
    name: str
    order: int = 0
    products: list[CampaignProduct] = Field(default_factory=list)

    @field_validator("products", mode="before")
    @classmethod
    def _products_none_as_empty(cls, v: object) -> object:
        return _none_as_empty(v, "products")


def _empty_featured_section() -> CampaignSection:
    return CampaignSection(name=settings.storefront.featured_section_name)


class Campaign(CamelModel):
    """A campaign aggregate. Owns its sections and campaign products."""

    id: str
    name: str = ""
    type: CampaignType
    status: CampaignStatus
    featured_offers_section: CampaignSection = Field(default_factory=_empty_featured_section)
    sections: list[CampaignSection] = Field(default_factory=list)

    @field_validator("featured_offers_section", mode="before")
    @classmethod
    def _featured_none_as_empty(cls, v: object) -> object:
        if v is None:
            logger.debug(
                "%s: null featured section read as empty",
                EvaluationIssue.MALFORMED_CAMPAIGN_SHAPE.value,
            )
            return _empty_featured_section()
        return v

    @field_validator("sections", mode="before")
    @classmethod
    def _sections_none_as_empty(cls, v: object) -> object:
        return _none_as_empty(v, "sections")

    @property
    def is_live(self) -> bool:
        return self.status == CampaignStatus.LIVE
