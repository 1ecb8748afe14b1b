"""Storefront layout: groups a ranked offer list into carousel and sections."""

from __future__ import annotations

from collections.abc import Iterable

from offer_engine.config import settings
from offer_engine.schemas.offers import GeneratedOffer, StorefrontLayout, StorefrontSection


def build_storefront(
    offers: Iterable[GeneratedOffer],
    *,
    show_featured_carousel: bool = True,
) -> StorefrontLayout:
    """Split offers into the featured carousel and named sections.

    Sections keep first-seen order, except the prequalified section which is
    always placed first. Offers without a section land in the fallback section.
    """
    prequalified = settings.storefront.prequalified_section_name
    fallback = settings.storefront.fallback_section_name

    featured: list[GeneratedOffer] = []
    grouped: dict[str, list[GeneratedOffer]] = {}
    for offer in offers:
        if offer.is_featured:
            if show_featured_carousel:
                featured.append(offer)
            continue
        grouped.setdefault(offer.section or fallback, []).append(offer)

    sections: list[StorefrontSection] = []
    if prequalified in grouped:
        sections.append(StorefrontSection(name=prequalified, offers=grouped.pop(prequalified)))
    sections.extend(StorefrontSection(name=name, offers=items) for name, items in grouped.items())

    return StorefrontLayout(
        featured_offers=featured,
        sections=sections,
        has_offers=bool(featured) or any(s.offers for s in sections),
    )
