# tests/test_api.py
import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wedding_wonders.catalog import build_catalog, get_catalog
from wedding_wonders.db import Base, get_db
from wedding_wonders.main import app

VENUES = [
    {"name": "Sunset Hall", "location": "Miami, FL", "capacity": "50-200 guests",
     "pricing": "$5,000+", "tags": ["ballroom"]},
    {"name": "Coral Terrace", "location": "Hollywood, FL", "capacity": "40-74 guests",
     "pricing": "$3,000+", "tags": ["garden", "beachfront"], "style": "Beachfront terrace",
     "images": [{"id": "c1", "url": "https://cdn.example.com/coral.jpg", "isPrimary": True}]},
    {"name": "Lakeside Loft", "location": "Boca Raton, FL", "capacity": "75-199 guests",
     "pricing": "$18,500", "tags": ["modern"]},
]
SHOPS = [
    {"name": "Kleinfeld Bridal", "location": "Miami, FL", "priceRange": "$1,500-$10,000+",
     "brands": ["Pnina Tornai"], "tags": ["designer"]},
    {"name": "David's Bridal", "location": "Fort Lauderdale, FL", "priceRange": "$99-$1,000",
     "tags": ["department", "plus-size"]},
]


@pytest.fixture()
def client():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    catalog = build_catalog(VENUES, SHOPS, random.Random(11))

    def override_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_venues_photo_first(client):
    r = client.get("/venues")
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 3
    assert data["total_pages"] == 1
    assert [v["name"] for v in data["items"]] == ["Coral Terrace", "Lakeside Loft", "Sunset Hall"]
    assert data["items"][0]["id"] == "1"
    assert data["items"][0]["venue_type"] == "beach"


def test_filter_venues(client):
    r = client.get("/venues", params={"region": "Miami-Dade & Broward", "size": "Large (200+)"})
    assert [v["name"] for v in r.json()["items"]] == ["Sunset Hall"]
    r = client.get("/venues", params={"size": "Intimate (Under 75)", "region": "All"})
    assert [v["name"] for v in r.json()["items"]] == ["Coral Terrace"]
    r = client.get("/venues", params={"search": "beachfront"})
    assert [v["name"] for v in r.json()["items"]] == ["Coral Terrace"]


def test_type_param_overrides_category(client):
    r = client.get("/venues", params={"category": "garden", "type": "modern"})
    assert [v["name"] for v in r.json()["items"]] == ["Lakeside Loft"]
    r = client.get("/venues", params={"category": "garden"})
    assert [v["name"] for v in r.json()["items"]] == ["Coral Terrace"]


def test_venue_pagination(client):
    r = client.get("/venues", params={"page": 2, "per_page": 2})
    data = r.json()
    assert data["page"] == 2
    assert data["total_pages"] == 2
    assert [v["name"] for v in data["items"]] == ["Sunset Hall"]


def test_get_venue_and_featured(client):
    r = client.get("/venues/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Lakeside Loft"
    assert client.get("/venues/42").status_code == 404
    featured = client.get("/venues/featured").json()
    assert [v["name"] for v in featured] == ["Coral Terrace", "Lakeside Loft", "Sunset Hall"]


def test_dress_shops(client):
    r = client.get("/dress-shops", params={"price": "budget"})
    assert [s["name"] for s in r.json()["items"]] == ["David's Bridal"]
    r = client.get("/dress-shops", params={"tab": "designer"})
    assert [s["name"] for s in r.json()["items"]] == ["Kleinfeld Bridal"]
    r = client.get("/dress-shops", params={"search": "pnina"})
    assert [s["name"] for s in r.json()["items"]] == ["Kleinfeld Bridal"]
    r = client.get("/dress-shops", params={"type": "plus-size"})
    assert [s["name"] for s in r.json()["items"]] == ["David's Bridal"]
    assert client.get("/dress-shops/1").json()["name"] == "David's Bridal"
    assert client.get("/dress-shops/9").status_code == 404
    assert len(client.get("/dress-shops/featured").json()) == 2


def test_claim_workflow(client):
    payload = {"listing_id": "3", "user_email": "owner@example.com", "user_name": "Pat"}
    r = client.post("/claims", json=payload)
    assert r.status_code == 200
    claim = r.json()
    assert claim["status"] == "pending"
    assert claim["listing_name"] == "Sunset Hall"

    r = client.post("/claims", json=payload)
    assert r.status_code == 400
    assert r.json()["detail"] == "This venue has a pending claim"

    r = client.patch(f"/claims/{claim['id']}", json={"status": "approved", "reviewed_by": "admin"})
    assert r.status_code == 200
    assert r.json()["status"] == "approved"

    r = client.post("/claims", json=payload)
    assert r.json()["detail"] == "This venue is already claimed"

    assert [c["id"] for c in client.get("/claims", params={"status": "approved"}).json()] == [claim["id"]]
    assert client.get("/claims", params={"status": "pending"}).json() == []


def test_claim_errors(client):
    r = client.post("/claims", json={"listing_id": "99", "user_email": "a@b.co", "user_name": "A"})
    assert r.status_code == 404
    r = client.post("/claims", json={"listing_id": "1", "listing_kind": "vendor", "user_email": "a@b.co", "user_name": "A"})
    assert r.status_code == 422
    r = client.patch("/claims/claim_missing", json={"status": "approved"})
    assert r.status_code == 404
    r = client.patch("/claims/claim_missing", json={"status": "pending"})
    assert r.status_code == 422


def test_reviewed_claim_returns_404_on_second_review(client):
    payload = {"listing_id": "2", "user_email": "owner@example.com", "user_name": "Pat"}
    first = client.post("/claims", json=payload).json()
    assert client.patch(f"/claims/{first['id']}", json={"status": "rejected"}).status_code == 200
    second = client.post("/claims", json=payload).json()
    assert client.patch(f"/claims/{second['id']}", json={"status": "approved"}).status_code == 200

    r = client.patch(f"/claims/{first['id']}", json={"status": "approved"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Claim not found or already processed"
    assert [c["id"] for c in client.get("/claims", params={"status": "approved"}).json()] == [second["id"]]


def test_venue_lead(client):
    lead = {
        "venue_id": "3", "venue_name": "Sunset Hall", "venue_email": "info@sunsethall.com",
        "user_name": "Sam", "user_email": "sam@example.com", "message": "Is June 2027 open?",
        "guest_count": 150, "preferred_date": "2027-06-12",
    }
    r = client.post("/venue-leads", json=lead)
    assert r.status_code == 200
    body = r.json()
    assert body["id"] >= 1
    assert body["preferred_date"] == "2027-06-12"


def test_venue_lead_requires_fields(client):
    r = client.post("/venue-leads", json={"venue_name": "Sunset Hall", "user_name": "Sam"})
    assert r.status_code == 422
    r = client.post("/venue-leads", json={
        "venue_name": "Sunset Hall", "venue_email": "info@sunsethall.com",
        "user_name": "Sam", "user_email": "sam@example.com", "message": "",
    })
    assert r.status_code == 422
