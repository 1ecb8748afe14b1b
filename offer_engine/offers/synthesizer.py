"""Offer synthesizer: turns an evaluated campaign product into a display offer.

Catalog lookups may miss; a missing catalog product only thins out the
offer's content, it never prevents the offer from being produced.
"""

from __future__ import annotations

import logging

from offer_engine.config import settings
from offer_engine.models.enums import EvaluationIssue
from offer_engine.offers.formatters import format_currency
from offer_engine.schemas.campaign import CampaignProduct
from offer_engine.schemas.catalog import Product, ProductAttribute
from offer_engine.schemas.offers import EvaluationResult, GeneratedOffer

logger = logging.getLogger(__name__)


def _display_attributes(catalog_product: Product | None, evaluation: EvaluationResult) -> list[ProductAttribute]:
    """Catalog attributes, with "Up to" values replaced by the member's limit."""
    if catalog_product is None:
        return []

    attributes = list(catalog_product.attributes)
    if not (evaluation.is_preapproved and evaluation.preapproval_limit):
        return attributes

    marker = settings.copy_text.limit_label_marker.lower()
    limit_text = format_currency(evaluation.preapproval_limit)
    return [
        attr.model_copy(update={"value": limit_text}) if marker in attr.label.lower() else attr
        for attr in attributes
    ]


def synthesize_offer(
    campaign_product: CampaignProduct,
    catalog_product: Product | None,
    evaluation: EvaluationResult,
    section_name: str,
) -> GeneratedOffer:
    """Build the GeneratedOffer for one shown campaign product."""
    if catalog_product is None:
        logger.debug(
            "%s: %s (campaign product %s)",
            EvaluationIssue.MISSING_CATALOG_PRODUCT.value,
            campaign_product.product_id,
            campaign_product.id,
        )

    is_preapproved = evaluation.is_preapproved
    if is_preapproved:
        headline = campaign_product.featured_preapproval_headline
        description = campaign_product.featured_preapproval_description
        cta_text = settings.copy_text.preapproved_cta_text
    else:
        headline = campaign_product.featured_application_headline
        description = campaign_product.featured_application_description
        cta_text = settings.copy_text.application_cta_text

    return GeneratedOffer(
        id=campaign_product.id,
        product_id=campaign_product.product_id,
        title=campaign_product.product_name,
        variant=evaluation.variant,
        product_type=campaign_product.product_type,
        section=section_name,
        description=catalog_product.description if catalog_product else None,
        is_featured=campaign_product.is_featured_offer,
        featured_headline=headline,
        featured_description=description,
        attributes=_display_attributes(catalog_product, evaluation),
        image_url=catalog_product.image_url if catalog_product else None,
        cta_text=cta_text,
        preapproval_limit=evaluation.preapproval_limit,
    )
