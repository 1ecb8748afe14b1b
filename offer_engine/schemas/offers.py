"""Evaluation outputs: per-product results, generated offers, storefront layout.

Nothing here is persisted. Offers are synthesized fresh on every pass.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from offer_engine.models.enums import OfferVariant, ProductType
from offer_engine.schemas.base import CamelModel
from offer_engine.schemas.campaign import Campaign
from offer_engine.schemas.catalog import Product, ProductAttribute
from offer_engine.schemas.profile import MemberProfile


class EvaluationResult(CamelModel):
    """Visibility and variant of one campaign product for one member."""

    show: bool
    variant: OfferVariant = OfferVariant.ITA
    preapproval_limit: Decimal | None = None  # None with PREAPPROVED means uncapped

    @property
    def is_preapproved(self) -> bool:
        return self.variant == OfferVariant.PREAPPROVED


class GeneratedOffer(CamelModel):
    """Display-ready offer. Identity is the referenced catalog product_id."""

    id: str                            # source campaign product id
    product_id: str
    title: str
    variant: OfferVariant
    product_type: ProductType
    section: str
    description: str | None = None
    is_featured: bool = False
    featured_headline: str | None = None
    featured_description: str | None = None
    attributes: list[ProductAttribute] = Field(default_factory=list)
    image_url: str | None = None
    cta_text: str
    preapproval_limit: Decimal | None = None

    @property
    def is_preapproved(self) -> bool:
        return self.variant == OfferVariant.PREAPPROVED


class StorefrontSection(CamelModel):
    """One titled row of non-featured offers."""

    name: str
    offers: list[GeneratedOffer] = Field(default_factory=list)


class StorefrontLayout(CamelModel):
    """Offers grouped for presentation."""

    featured_offers: list[GeneratedOffer] = Field(default_factory=list)
    sections: list[StorefrontSection] = Field(default_factory=list)
    has_offers: bool = False


# ---------------------------------------------------------------------------
# HTTP request bodies
# ---------------------------------------------------------------------------


class OfferRequest(CamelModel):
    """Everything one evaluation pass needs, supplied wholesale."""

    campaigns: list[Campaign] = Field(default_factory=list)
    profile: MemberProfile
    products: list[Product] = Field(default_factory=list)


class StorefrontRequest(OfferRequest):
    """Offer request plus layout switches."""

    show_featured_carousel: bool = True
