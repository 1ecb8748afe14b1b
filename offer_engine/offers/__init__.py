"""Offer synthesis, multi-campaign aggregation and storefront layout."""

from offer_engine.offers.aggregator import (
    CAMPAIGN_TYPE_PRIORITY,
    aggregate_offers,
    preview_campaign_offers,
    select_preview_campaign,
)
from offer_engine.offers.formatters import format_currency
from offer_engine.offers.storefront import build_storefront
from offer_engine.offers.synthesizer import synthesize_offer

__all__ = [
    "CAMPAIGN_TYPE_PRIORITY",
    "aggregate_offers",
    "preview_campaign_offers",
    "select_preview_campaign",
    "synthesize_offer",
    "build_storefront",
    "format_currency",
]
