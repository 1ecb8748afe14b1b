"""Offer evaluation API: FastAPI router.

Callers supply campaigns, the selected member profile and the product
catalog wholesale on every request; nothing is stored between requests.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from offer_engine.offers.aggregator import (
    aggregate_offers,
    preview_campaign_offers,
    select_preview_campaign,
)
from offer_engine.offers.storefront import build_storefront
from offer_engine.schemas.offers import (
    GeneratedOffer,
    OfferRequest,
    StorefrontLayout,
    StorefrontRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/offers", tags=["offers"])


@router.post("/aggregate", response_model=list[GeneratedOffer])
async def aggregate(request: OfferRequest) -> list[GeneratedOffer]:
    """Live mode: merged offers from every live campaign."""
    offers = aggregate_offers(request.campaigns, request.profile, request.products)
    logger.info(
        "Aggregated %d offers for profile %s across %d campaigns",
        len(offers),
        request.profile.id,
        len(request.campaigns),
    )
    return offers


@router.post("/preview", response_model=list[GeneratedOffer])
async def preview(request: OfferRequest) -> list[GeneratedOffer]:
    """Demo mode: offers from the single preview campaign, without merging."""
    campaign = select_preview_campaign(request.campaigns)
    if campaign is None:
        logger.info("No live campaign to preview for profile %s", request.profile.id)
        return []
    return preview_campaign_offers(campaign, request.profile, request.products)


@router.post("/storefront", response_model=StorefrontLayout)
async def storefront(request: StorefrontRequest) -> StorefrontLayout:
    """Live-mode offers laid out as featured carousel plus sections."""
    offers = aggregate_offers(request.campaigns, request.profile, request.products)
    return build_storefront(offers, show_featured_carousel=request.show_featured_carousel)
