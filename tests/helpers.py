"""Builders for campaign, catalog and profile fixtures used across tests."""

from __future__ import annotations

from decimal import Decimal

from offer_engine.models.enums import CampaignStatus, CampaignType, ProductType, RuleOperator
from offer_engine.schemas.campaign import Campaign, CampaignProduct, CampaignSection, Rule, RuleClause
from offer_engine.schemas.catalog import Product, ProductAttribute
from offer_engine.schemas.profile import MemberProfile, MemberProfileAttributes


def clause(attribute: str, operator: RuleOperator | str, value: str = "") -> RuleClause:
    return RuleClause(attribute=attribute, operator=operator, value=value)


def rule(*clauses: RuleClause, limit: int | str | None = None) -> Rule:
    return Rule(
        clauses=list(clauses),
        preapproval_limit=Decimal(str(limit)) if limit is not None else None,
    )


def credit_at_least(score: int, limit: int | None = None) -> Rule:
    """Single-clause rule: Credit Score >= score."""
    return rule(clause("Credit Score", RuleOperator.GREATER_THAN_OR_EQUAL, str(score)), limit=limit)


def profile(id_: str = "member-1", **attributes: object) -> MemberProfile:
    return MemberProfile(id=id_, attributes=MemberProfileAttributes(**attributes))


def campaign_product(
    cp_id: str,
    product_id: str,
    *,
    name: str = "New Auto Loan",
    product_type: ProductType = ProductType.AUTO_LOAN,
    default: bool = False,
    featured: bool = False,
    product_rules: list[Rule] | None = None,
    preapproval_rules: list[Rule] | None = None,
) -> CampaignProduct:
    return CampaignProduct(
        id=cp_id,
        product_id=product_id,
        product_name=name,
        product_type=product_type,
        is_default_campaign_product=default,
        is_featured_offer=featured,
        featured_preapproval_headline="You're preapproved!",
        featured_preapproval_description="Get behind the wheel with our lowest rates.",
        featured_application_headline="Apply today",
        featured_application_description="Competitive rates for every member.",
        product_rules=product_rules or [],
        preapproval_rules=preapproval_rules or [],
    )


def section(name: str, *products: CampaignProduct) -> CampaignSection:
    return CampaignSection(id=name.lower().replace(" ", "-"), name=name, products=list(products))


def campaign(
    campaign_id: str,
    type_: CampaignType = CampaignType.TARGETED,
    *,
    status: CampaignStatus = CampaignStatus.LIVE,
    featured: list[CampaignProduct] | None = None,
    featured_name: str = "Featured Offers",
    sections: list[CampaignSection] | None = None,
) -> Campaign:
    return Campaign(
        id=campaign_id,
        name=f"Campaign {campaign_id}",
        type=type_,
        status=status,
        featured_offers_section=CampaignSection(id=f"{campaign_id}-featured", name=featured_name, products=featured or []),
        sections=sections or [],
    )


def catalog_product(product_id: str, *, name: str = "New Auto Loan") -> Product:
    return Product(
        id=product_id,
        name=name,
        type=ProductType.AUTO_LOAN,
        description=f"{name} from your credit union.",
        image_url=f"https://cdn.example.com/{product_id}.jpg",
        attributes=[
            ProductAttribute(label="As low as", value="5.49%", subtext="APR*"),
            ProductAttribute(label="Up to", value="$50,000"),
        ],
    )
