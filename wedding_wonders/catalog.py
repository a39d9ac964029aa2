# wedding_wonders/catalog.py
"""Catalog loading.

The catalog is read from JSON once by the hosting application and kept in
memory; `load_catalog` is the explicit initialization step and
`get_catalog` caches its result for the HTTP app.
"""
import json
import os
import random
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .normalize import normalize_dress_shops, normalize_venues
from .photos import featured_dress_shops, featured_venues
from .schemas import DressShop, Venue
from .utils import logger

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
VENUES_JSON = os.getenv("VENUES_JSON", str(DATA_DIR / "venues.json"))
DRESS_SHOPS_JSON = os.getenv("DRESS_SHOPS_JSON", str(DATA_DIR / "dressShops.json"))

VENUES_KEY = "weddingVenues"
DRESS_SHOPS_KEY = "weddingDressShops"

FALLBACK_VENUES: List[Dict[str, Any]] = [
    {
        "name": "The Breakers Palm Beach",
        "location": "Palm Beach, FL",
        "style": "Luxury oceanfront resort with elegant ballrooms and impeccable service",
        "capacity": "50-400 guests",
        "pricing": "$15,000+",
        "tags": ["beachfront", "luxury", "ballroom"],
        "website": "https://www.thebreakers.com",
    },
    {
        "name": "Vizcaya Museum and Gardens",
        "location": "Miami, FL",
        "style": "Historic Italian Renaissance villa with stunning formal gardens",
        "capacity": "100-250 guests",
        "pricing": "$12,000+",
        "tags": ["historic", "garden", "outdoor"],
        "website": "https://vizcaya.org",
    },
    {
        "name": "Four Seasons Resort Palm Beach",
        "location": "Palm Beach, FL",
        "style": "Sophisticated beachfront luxury with ocean views",
        "capacity": "75-300 guests",
        "pricing": "$18,000+",
        "tags": ["beachfront", "luxury", "modern"],
        "website": "https://www.fourseasons.com",
    },
]

FALLBACK_DRESS_SHOPS: List[Dict[str, Any]] = [
    {
        "name": "Kleinfeld Bridal",
        "location": "Miami, FL",
        "description": "World-renowned bridal boutique featuring designer gowns",
        "priceRange": "$1,500-$10,000+",
        "specialties": ["Designer Gowns", "Custom Alterations", "VIP Experience"],
        "brands": ["Pnina Tornai", "Randy Fenoli", "Maggie Sottero"],
        "tags": ["designer", "luxury", "custom", "alterations"],
    },
    {
        "name": "David's Bridal",
        "location": "Fort Lauderdale, FL",
        "description": "America's favorite bridal retailer with affordable options",
        "priceRange": "$99-$1,500",
        "specialties": ["Affordable Gowns", "Plus Size", "Quick Delivery"],
        "brands": ["David's Bridal", "Galina", "Vera Wang White"],
        "tags": ["affordable", "plus-size", "quick-delivery", "accessories"],
    },
    {
        "name": "The White Dress Boutique",
        "location": "Palm Beach, FL",
        "description": "Intimate boutique specializing in luxury designer gowns",
        "priceRange": "$2,000-$8,000",
        "specialties": ["Designer Collections", "Personal Styling", "Trunk Shows"],
        "brands": ["Jenny Packham", "Monique Lhuillier", "Carolina Herrera"],
        "tags": ["boutique", "designer", "personal-styling", "luxury"],
    },
]


def load_records(path, key: str, fallback: List[Dict[str, Any]]) -> List[Any]:
    """Read raw records from a JSON file, falling back to built-in data."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            doc = json.load(fh)
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s (%s); using %d fallback records", path, e, len(fallback))
        return list(fallback)
    if isinstance(doc, list):
        return doc
    if isinstance(doc, dict) and isinstance(doc.get(key), list):
        return doc[key]
    logger.warning("%s has no %r array; using fallback records", path, key)
    return list(fallback)


@dataclass
class Catalog:
    venues: List[Venue] = field(default_factory=list)
    dress_shops: List[DressShop] = field(default_factory=list)
    featured_venues: List[Venue] = field(default_factory=list)
    featured_dress_shops: List[DressShop] = field(default_factory=list)

    def venue(self, venue_id: str) -> Optional[Venue]:
        return next((v for v in self.venues if v.id == venue_id), None)

    def dress_shop(self, shop_id: str) -> Optional[DressShop]:
        return next((s for s in self.dress_shops if s.id == shop_id), None)

    def listing(self, listing_id: str, kind: str):
        if kind == "dress_shop":
            return self.dress_shop(listing_id)
        return self.venue(listing_id)


def build_catalog(raw_venues, raw_dress_shops, rng: Optional[random.Random] = None) -> Catalog:
    venues = normalize_venues(raw_venues, rng)
    shops = normalize_dress_shops(raw_dress_shops, rng)
    return Catalog(
        venues=venues,
        dress_shops=shops,
        featured_venues=featured_venues(venues),
        featured_dress_shops=featured_dress_shops(shops),
    )


def load_catalog(venues_path=None, dress_shops_path=None, rng: Optional[random.Random] = None) -> Catalog:
    raw_venues = load_records(venues_path or VENUES_JSON, VENUES_KEY, FALLBACK_VENUES)
    raw_shops = load_records(dress_shops_path or DRESS_SHOPS_JSON, DRESS_SHOPS_KEY, FALLBACK_DRESS_SHOPS)
    catalog = build_catalog(raw_venues, raw_shops, rng)
    logger.info(
        "Catalog loaded: %d venues (%d featured), %d dress shops",
        len(catalog.venues), len(catalog.featured_venues), len(catalog.dress_shops),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_catalog()
