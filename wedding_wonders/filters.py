# wedding_wonders/filters.py
"""Filter/search over normalized listings.

A listing is kept when it passes every active dimension of the
`FilterState`; results keep the input order (photo-first from the loader).
"""
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .schemas import DressShop, FilterState, Listing, Venue

UNCONSTRAINED = ("", "all")

REGIONS: Dict[str, Tuple[str, ...]] = {
    "Miami-Dade & Broward": (
        "Miami", "Coral Gables", "Coconut Grove", "Hialeah", "Homestead",
        "Key Biscayne", "Bal Harbour", "Surfside", "Aventura", "Redland",
        "Fort Lauderdale", "Hollywood", "Pompano Beach", "Dania Beach",
        "Davie", "Plantation", "Weston", "Pembroke Pines", "Sunrise",
    ),
    "Palm Beach County": (
        "Palm Beach", "Boca Raton", "Delray Beach", "Boynton Beach",
        "Jupiter", "Wellington", "Lake Worth", "Lantana",
    ),
    "Florida Keys": (
        "Key West", "Key Largo", "Islamorada", "Marathon", "Big Pine Key",
    ),
    "Treasure Coast": (
        "Stuart", "Port St. Lucie", "Fort Pierce", "Vero Beach", "Hobe Sound",
    ),
}

# (label, inclusive lower bound, exclusive upper bound) on capacity.max
SIZE_BUCKETS: Dict[str, Tuple[int, Optional[int]]] = {
    "Intimate (Under 75)": (0, 75),
    "Mid-Size (75-199)": (75, 200),
    "Large (200+)": (200, None),
}

# bounds on pricing.starting_price
VENUE_PRICE_BUCKETS: Dict[str, Tuple[int, Optional[int]]] = {
    "Under $5,000": (0, 5000),
    "$5,000 - $15,000": (5000, 15000),
    "$15,000 - $30,000": (15000, 30000),
    "Over $30,000": (30000, None),
}

DRESS_PRICE_BUCKETS: Dict[str, Callable[[int, int], bool]] = {
    "budget": lambda lo, hi: hi <= 1000,
    "mid": lambda lo, hi: lo >= 1000 and hi <= 3000,
    "luxury": lambda lo, hi: lo >= 3000,
}


def is_active(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() not in UNCONSTRAINED


def apply_url_override(state: FilterState, url_type: Optional[str]) -> FilterState:
    """A `type` query parameter replaces the widget's category selection."""
    if url_type is None or not url_type.strip():
        return state
    return state.model_copy(update={"category": url_type.strip()})


def _in_bounds(value: int, bounds: Tuple[int, Optional[int]]) -> bool:
    lower, upper = bounds
    return value >= lower and (upper is None or value < upper)


def matches_search(listing: Listing, term: str) -> bool:
    needle = term.strip().lower()
    fields = [listing.name, listing.description, listing.address.city]
    if isinstance(listing, DressShop):
        fields.extend(listing.specialties)
        fields.extend(listing.brands)
    return any(needle in (f or "").lower() for f in fields)


def matches_region(listing: Listing, region: str) -> bool:
    city = listing.address.city.lower()
    keywords = REGIONS.get(region.strip())
    if keywords is None:
        return region.strip().lower() in city
    return any(k.lower() in city for k in keywords)


def matches_category(listing: Listing, category: str) -> bool:
    # raw tags, not the derived venue_type/shop_type
    needle = category.strip().lower()
    return any(needle in tag.lower() for tag in listing.tags)


def matches_size(venue: Venue, size: str) -> bool:
    bounds = SIZE_BUCKETS.get(size.strip())
    return bounds is not None and _in_bounds(venue.capacity.max, bounds)


def matches_venue_price(venue: Venue, price: str) -> bool:
    bounds = VENUE_PRICE_BUCKETS.get(price.strip())
    return bounds is not None and _in_bounds(venue.pricing.starting_price, bounds)


def matches_dress_price(shop: DressShop, price: str) -> bool:
    check = DRESS_PRICE_BUCKETS.get(price.strip().lower())
    return check is not None and check(shop.price_range.min, shop.price_range.max)


def _predicates(state: FilterState, extra) -> List[Callable[[Listing], bool]]:
    preds = []
    if is_active(state.search_term):
        preds.append(lambda l: matches_search(l, state.search_term))
    if is_active(state.region):
        preds.append(lambda l: matches_region(l, state.region))
    if is_active(state.category):
        preds.append(lambda l: matches_category(l, state.category))
    preds.extend(extra)
    return preds


def _apply(listings, preds):
    return [l for l in listings if all(p(l) for p in preds)]


def filter_venues(venues: Sequence[Venue], state: FilterState) -> List[Venue]:
    extra = []
    if is_active(state.size):
        extra.append(lambda v: matches_size(v, state.size))
    if is_active(state.price):
        extra.append(lambda v: matches_venue_price(v, state.price))
    return _apply(venues, _predicates(state, extra))


def filter_dress_shops(shops: Sequence[DressShop], state: FilterState) -> List[DressShop]:
    extra = []
    if is_active(state.tab):
        extra.append(lambda s: s.shop_type == state.tab.strip().lower())
    if is_active(state.price):
        extra.append(lambda s: matches_dress_price(s, state.price))
    return _apply(shops, _predicates(state, extra))


def paginate(items: Sequence, page: int = 1, per_page: int = 12):
    """Return (page_items, total_pages) for a 1-based page number."""
    per_page = max(per_page, 1)
    total_pages = math.ceil(len(items) / per_page)
    page = max(page, 1)
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), total_pages
