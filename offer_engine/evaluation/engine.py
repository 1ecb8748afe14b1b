"""Campaign product evaluator: decides visibility, variant and preapproval cap.

Pure Python. No I/O, no shared state; the profile is only read.
"""

from __future__ import annotations

from offer_engine.evaluation.rules import any_rule_matches, resolve_preapproval
from offer_engine.models.enums import OfferVariant
from offer_engine.schemas.campaign import CampaignProduct
from offer_engine.schemas.offers import EvaluationResult
from offer_engine.schemas.profile import MemberProfile


def _shown_result(campaign_product: CampaignProduct, profile: MemberProfile) -> EvaluationResult:
    """Variant and limit of a product already known to be visible."""
    preapproval = resolve_preapproval(campaign_product.preapproval_rules, profile.attributes)
    if preapproval.matched:
        return EvaluationResult(
            show=True,
            variant=OfferVariant.PREAPPROVED,
            preapproval_limit=preapproval.limit,
        )
    return EvaluationResult(show=True, variant=OfferVariant.ITA)


def evaluate_campaign_product(campaign_product: CampaignProduct, profile: MemberProfile) -> EvaluationResult:
    """Evaluate one campaign product for one member.

    - Default products always show (at minimum as ITA); product rules are ignored.
    - Other products show when they have no product rules or any rule matches.
    - A shown product is preapproved when any preapproval rule matches, capped
      at the highest matching limit.
    """
    if campaign_product.is_default_campaign_product:
        return _shown_result(campaign_product, profile)

    if not any_rule_matches(campaign_product.product_rules, profile.attributes):
        return EvaluationResult(show=False, variant=OfferVariant.ITA)

    return _shown_result(campaign_product, profile)
