"""Tests for the offer evaluation HTTP API."""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from offer_engine.main import app

PROFILE = {"id": "profile-1", "name": "High Credit Member", "attributes": {"creditScore": 720, "hasAutoLoan": False}}

PRODUCTS = [
    {
        "id": "product-1",
        "name": "New Auto Loan",
        "type": "auto-loan",
        "attributes": [{"label": "Up to", "value": "$50,000"}, {"label": "As low as", "value": "5.49%", "subtext": "APR*"}],
    }
]


def _campaign(campaign_id: str, campaign_type: str, status: str = "live") -> dict:
    return {
        "id": campaign_id,
        "type": campaign_type,
        "status": status,
        "featuredOffersSection": {"id": f"{campaign_id}-featured", "name": "Featured Offers", "products": []},
        "sections": [
            {
                "id": f"{campaign_id}-auto",
                "name": "Auto Loans & Offers",
                "products": [
                    {
                        "id": f"{campaign_id}-cp-1",
                        "productId": "product-1",
                        "productName": "New Auto Loan",
                        "productType": "auto-loan",
                        "isDefaultCampaignProduct": True,
                        "isFeaturedOffer": False,
                        "productRules": [],
                        "preapprovalRules": [
                            {
                                "clauses": [{"attribute": "Credit Score", "operator": "greater_than_or_equal", "value": "700"}],
                                "preapprovalLimit": 40000,
                            }
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestAggregate:
    def test_preapproved_offer(self, client):
        body = {"campaigns": [_campaign("c-1", "perpetual")], "profile": PROFILE, "products": PRODUCTS}
        response = client.post("/offers/aggregate", json=body)
        assert response.status_code == 200
        offers = response.json()
        assert len(offers) == 1
        assert offers[0]["variant"] == "preapproved"
        assert Decimal(str(offers[0]["preapprovalLimit"])) == Decimal("40000")
        assert offers[0]["ctaText"] == "Review Offer"
        assert offers[0]["attributes"][0]["value"] == "$40,000"

    def test_no_live_campaigns(self, client):
        body = {"campaigns": [_campaign("c-1", "targeted", status="draft")], "profile": PROFILE}
        response = client.post("/offers/aggregate", json=body)
        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_payload_rejected(self, client):
        response = client.post("/offers/aggregate", json={"campaigns": []})
        assert response.status_code == 422


class TestPreview:
    def test_preview_uses_single_campaign(self, client):
        body = {
            "campaigns": [_campaign("c-t", "targeted"), _campaign("c-p", "perpetual")],
            "profile": PROFILE,
            "products": PRODUCTS,
        }
        offers = client.post("/offers/preview", json=body).json()
        assert [o["id"] for o in offers] == ["c-p-cp-1"]

    def test_preview_without_live_campaign(self, client):
        body = {"campaigns": [], "profile": PROFILE}
        assert client.post("/offers/preview", json=body).json() == []


class TestStorefront:
    def test_layout(self, client):
        body = {"campaigns": [_campaign("c-1", "untargeted")], "profile": PROFILE, "products": PRODUCTS}
        layout = client.post("/offers/storefront", json=body).json()
        assert layout["hasOffers"] is True
        assert layout["featuredOffers"] == []
        assert layout["sections"][0]["name"] == "Auto Loans & Offers"
