"""Multi-campaign aggregator: what a member actually sees across live campaigns.

Campaign priority:
1. Perpetual campaigns (always-on member offers)
2. Targeted campaigns (rules-based with customer file)
3. Untargeted campaigns (shown to all)

Deduplication is by referenced catalog product: when the same product appears
in several campaigns, preapproved beats ITA, a higher limit beats a lower one,
and otherwise the first campaign in priority order wins.

All working state (best-offer map, section order) is built fresh per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal

from offer_engine.evaluation.engine import evaluate_campaign_product
from offer_engine.models.enums import CampaignStatus, CampaignType
from offer_engine.offers.synthesizer import synthesize_offer
from offer_engine.schemas.campaign import Campaign, CampaignProduct
from offer_engine.schemas.catalog import Product
from offer_engine.schemas.offers import GeneratedOffer
from offer_engine.schemas.profile import MemberProfile

logger = logging.getLogger(__name__)

CAMPAIGN_TYPE_PRIORITY: dict[CampaignType, int] = {
    CampaignType.PERPETUAL: 0,
    CampaignType.TARGETED: 1,
    CampaignType.UNTARGETED: 2,
}


def _live_by_priority(campaigns: Iterable[Campaign]) -> list[Campaign]:
    """Live campaigns in type-priority order; stable for equal types."""
    live = [c for c in campaigns if c.status == CampaignStatus.LIVE]
    return sorted(live, key=lambda c: CAMPAIGN_TYPE_PRIORITY[c.type])


def _placements(campaign: Campaign) -> Iterator[tuple[CampaignProduct, str, bool]]:
    """Yield (campaign product, section name, from featured section) in visit order."""
    featured = campaign.featured_offers_section
    for cp in featured.products:
        yield cp, featured.name, True
    for section in campaign.sections:
        for cp in section.products:
            yield cp, section.name, False


def _index_catalog(catalog_products: Iterable[Product]) -> dict[str, Product]:
    """Catalog keyed by id. The first record wins on duplicate ids."""
    index: dict[str, Product] = {}
    for product in catalog_products:
        index.setdefault(product.id, product)
    return index


def _should_replace(existing: GeneratedOffer, candidate: GeneratedOffer) -> bool:
    """Merge policy for a product already offered by an earlier campaign."""
    if existing.is_preapproved and not candidate.is_preapproved:
        return False
    if candidate.is_preapproved and not existing.is_preapproved:
        return True
    if candidate.is_preapproved and existing.is_preapproved:
        existing_limit = existing.preapproval_limit or Decimal("0")
        candidate_limit = candidate.preapproval_limit or Decimal("0")
        return candidate_limit > existing_limit
    return False  # neither preapproved: first seen wins


def aggregate_offers(
    campaigns: Iterable[Campaign],
    profile: MemberProfile,
    catalog_products: Iterable[Product],
) -> list[GeneratedOffer]:
    """Evaluate every live campaign for a member and merge into one ranked list.

    Returns one offer per distinct catalog product: featured offers first,
    then the rest grouped by the order their sections were first seen.
    """
    catalog = _index_catalog(catalog_products)
    live_campaigns = _live_by_priority(campaigns)

    best_by_product: dict[str, GeneratedOffer] = {}
    section_order: list[str] = []

    for campaign in live_campaigns:
        for cp, section_name, from_featured in _placements(campaign):
            evaluation = evaluate_campaign_product(cp, profile)
            if not evaluation.show:
                continue

            if not from_featured and section_name not in section_order:
                section_order.append(section_name)

            offer = synthesize_offer(cp, catalog.get(cp.product_id), evaluation, section_name)

            existing = best_by_product.get(cp.product_id)
            if existing is None or _should_replace(existing, offer):
                # Reassigning an existing key keeps its insertion position.
                best_by_product[cp.product_id] = offer

    def _rank(offer: GeneratedOffer) -> tuple[int, int]:
        if offer.is_featured:
            return (0, 0)
        # Sections never ranked (featured-section placements) sort ahead, at -1.
        position = section_order.index(offer.section) if offer.section in section_order else -1
        return (1, position)

    offers = sorted(best_by_product.values(), key=_rank)

    logger.debug(
        "Aggregated %d offers from %d live campaigns for profile %s",
        len(offers),
        len(live_campaigns),
        profile.id,
    )
    return offers


# ── Single-campaign preview ────────────────────────────────────────────────


def select_preview_campaign(campaigns: Iterable[Campaign]) -> Campaign | None:
    """First live perpetual campaign, else the first live campaign."""
    live = [c for c in campaigns if c.status == CampaignStatus.LIVE]
    for campaign in live:
        if campaign.type == CampaignType.PERPETUAL:
            return campaign
    return live[0] if live else None


def preview_campaign_offers(
    campaign: Campaign,
    profile: MemberProfile,
    catalog_products: Iterable[Product],
) -> list[GeneratedOffer]:
    """Every shown offer of one campaign, in visit order, without dedup."""
    catalog = _index_catalog(catalog_products)
    offers: list[GeneratedOffer] = []
    for cp, section_name, _from_featured in _placements(campaign):
        evaluation = evaluate_campaign_product(cp, profile)
        if evaluation.show:
            offers.append(synthesize_offer(cp, catalog.get(cp.product_id), evaluation, section_name))
    return offers
