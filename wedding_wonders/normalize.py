# wedding_wonders/normalize.py
"""Turn loosely-typed catalog records into `Venue` / `DressShop` models.

Catalog JSON is hand-maintained text, so nothing here raises on missing or
malformed fields: every parser falls back to a documented default.
"""
import random
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .photos import sort_by_photos
from .schemas import (
    Address, Contact, DressShop, ListingImage, Pricing, Range, Venue,
)
from .utils import logger, slugify_compact

# (value, keywords) pairs, checked in order; first match wins
VENUE_TYPE_RULES: List[Tuple[str, Tuple[str, ...]]] = [
    ("beach", ("beachfront", "oceanfront", "beach")),
    ("garden", ("garden", "outdoor")),
    ("ballroom", ("ballroom",)),
    ("historic", ("historic",)),
    ("modern", ("modern",)),
    ("rustic", ("rustic", "barn")),
]
VENUE_TYPES = [value for value, _ in VENUE_TYPE_RULES]
DEFAULT_VENUE_TYPE = VENUE_TYPES[0]

SHOP_TYPES = ["boutique", "department", "designer", "consignment", "vintage", "plus-size"]
SHOP_TYPE_RULES: List[Tuple[str, Tuple[str, ...]]] = [
    ("department", ("department",)),
    ("designer", ("designer",)),
    ("consignment", ("consignment",)),
    ("vintage", ("vintage",)),
    ("plus-size", ("plus-size",)),
]
DEFAULT_SHOP_TYPE = SHOP_TYPES[0]

DEFAULT_CAPACITY = Range(min=50, max=150)
DEFAULT_PRICE_RANGE = Range(min=500, max=3000)
DEFAULT_STARTING_PRICE = 5000
DEFAULT_CITY = "Miami"
DEFAULT_STATE = "FL"
DEFAULT_ZIP = "33101"

DEFAULT_SHOP_HOURS = {
    "Monday": "Closed",
    "Tuesday": "10am-7pm",
    "Wednesday": "10am-7pm",
    "Thursday": "10am-8pm",
    "Friday": "10am-8pm",
    "Saturday": "9am-6pm",
    "Sunday": "11am-5pm",
}
DEFAULT_SHOP_SERVICES = ["Alterations", "Personal Styling", "Accessories"]
DEFAULT_SHOP_BRANDS = ["Various Designer Brands"]

AREA_CODES = ("305", "786", "954", "561")

KNOWN_PHONES: Dict[str, str] = {
    # venues
    "Hialeah Park Racing & Casino": "(786) 483-7460",
    "The Surfcomber Hotel": "(305) 532-7715",
    "MB Hotel": "(305) 532-2800",
    "Sea Watch on the Ocean": "(954) 781-2200",
    "Coastal Yacht Charters": "(954) 761-8777",
    "Vizcaya Museum & Gardens": "(305) 250-9133",
    "Ancient Spanish Monastery": "(305) 945-1461",
    "The Cooper Estate": "(305) 248-4727",
    "Curtiss Mansion": "(305) 379-4040",
    "Thalatta Estate": "(305) 238-5800",
    "Deering Estate": "(305) 235-1668",
    "Fairchild Tropical Botanic Garden": "(305) 667-1651",
    "The Biltmore Hotel": "(855) 311-6903",
    "Four Seasons Resort Palm Beach": "(561) 582-2800",
    "The Breakers": "(561) 655-6611",
    "PGA National Resort & Spa": "(561) 627-2000",
    "Eau Palm Beach Resort & Spa": "(561) 533-6000",
    "Flagler Museum": "(561) 655-2833",
    "Norton Museum of Art": "(561) 832-5196",
    "The St. Regis Bal Harbour Resort": "(305) 993-3300",
    "The Setai Miami Beach": "(305) 520-6000",
    "Fontainebleau Miami Beach": "(305) 538-2000",
    "The Ritz-Carlton Key Biscayne": "(305) 365-4500",
    "Jungle Island": "(305) 400-7000",
    "Eden Roc Miami Beach": "(305) 531-0000",
    "Patch of Heaven Sanctuary": "(305) 246-8920",
    "Redland Koi Gardens": "(305) 248-7750",
    "Schnebly Redland Winery": "(305) 242-1224",
    "Villa Toscana Miami": "(305) 858-8007",
    # dress shops
    "Kleinfeld Bridal": "(305) 555-0199",
    "David's Bridal": "(954) 555-0166",
    "The White Dress Boutique": "(561) 555-0133",
    "Lovely Bride": "(305) 555-0144",
    "Boca Raton Bridal": "(561) 555-0155",
    "Miami Beach Bridal": "(305) 555-0177",
    "Designer Bridal Room": "(954) 555-0188",
}

_INT_RE = re.compile(r"\$\d{1,3}(?:,\d{3})+|\d+")
_DOLLAR_RE = re.compile(r"\$([0-9,]+)")
_STATE_RE = re.compile(r"^[A-Za-z]{2}$")


def parse_range(text: Any, default: Range) -> Range:
    """Parse "50-150 guests" / "150 guests" / "$1,500-$10,000+" into a Range.

    One number n reads as an upper bound: {n // 2, n}. Two or more numbers
    give {min, max} over all of them.
    """
    if not isinstance(text, str):
        return default.model_copy()
    numbers = [int(m.lstrip("$").replace(",", "")) for m in _INT_RE.findall(text)]
    if not numbers:
        return default.model_copy()
    if len(numbers) == 1:
        n = numbers[0]
        return Range(min=n // 2, max=n)
    return Range(min=min(numbers), max=max(numbers))


def parse_price(text: Any, default: int = DEFAULT_STARTING_PRICE) -> int:
    if not isinstance(text, str):
        return default
    m = _DOLLAR_RE.search(text)
    if not m:
        return default
    digits = m.group(1).replace(",", "")
    return int(digits) if digits else default


def derive_category(tags: Any, rules: Sequence[Tuple[str, Iterable[str]]], default: str) -> str:
    if not isinstance(tags, (list, tuple)):
        return default
    lowered = [t.lower() for t in tags if isinstance(t, str)]
    for value, keywords in rules:
        for keyword in keywords:
            kw = keyword.lower()
            if any(kw in tag for tag in lowered):
                return value
    return default


def split_location(text: Any) -> Tuple[str, str]:
    if not isinstance(text, str) or not text.strip():
        return DEFAULT_CITY, DEFAULT_STATE
    city, _, rest = text.partition(",")
    city = city.strip() or DEFAULT_CITY
    rest = rest.strip()
    # "Coral Gables, Miami-Dade" carries a county, not a state
    state = rest.upper() if _STATE_RE.match(rest) else DEFAULT_STATE
    return city, state


def lookup_or_generate_phone(name: Any, rng: Optional[random.Random] = None) -> str:
    if isinstance(name, str) and name in KNOWN_PHONES:
        return KNOWN_PHONES[name]
    rng = rng or random
    area_code = rng.choice(AREA_CODES)
    exchange = rng.randint(100, 999)
    number = rng.randint(1000, 9999)
    return f"({area_code}) {exchange}-{number}"


def email_for(name: Any, fallback: str = "venue") -> str:
    slug = slugify_compact(name if isinstance(name, str) else "") or fallback
    return f"info@{slug}.com"


def _str_list(value: Any, default: Optional[List[str]] = None) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return list(default or [])
    return [v for v in value if isinstance(v, str)]


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def normalize_images(raw_images: Any, name: str) -> List[ListingImage]:
    if not isinstance(raw_images, (list, tuple)):
        return []
    images = []
    for pos, img in enumerate(raw_images):
        if not isinstance(img, dict) or not isinstance(img.get("url"), str):
            continue
        images.append(ListingImage(
            id=str(img.get("id") or f"image-{pos + 1}"),
            url=img["url"],
            alt=_text(img.get("alt"), name),
            is_primary=bool(img.get("isPrimary", False)),
            media_type=img.get("type") if img.get("type") in ("image", "video") else "image",
        ))
    return images


def _address(raw: Dict[str, Any]) -> Address:
    city, state = split_location(raw.get("location"))
    street, zip_code = "", DEFAULT_ZIP
    if isinstance(raw.get("address"), dict):
        street = _text(raw["address"].get("street"), "")
        zip_code = _text(raw["address"].get("zipCode"), DEFAULT_ZIP)
    return Address(street=street, city=city, state=state, zip_code=zip_code)


def _usable(records: Any) -> List[Dict[str, Any]]:
    if not isinstance(records, (list, tuple)):
        return []
    return [r for r in records if isinstance(r, dict) and isinstance(r.get("name"), str) and r["name"].strip()]


def normalize_venue(raw: Dict[str, Any], index: int, rng: Optional[random.Random] = None) -> Venue:
    name = _text(raw.get("name"), f"Venue {index}")
    website = raw.get("website") if isinstance(raw.get("website"), str) else None
    return Venue(
        id=str(index),
        name=name,
        description=_text(raw.get("style") or raw.get("description"), "Beautiful wedding venue"),
        address=_address(raw),
        tags=_str_list(raw.get("tags")),
        images=normalize_images(raw.get("images"), name),
        contact=Contact(email=email_for(name), phone=lookup_or_generate_phone(name, rng), website=website),
        region=raw.get("region") if isinstance(raw.get("region"), str) else None,
        venue_type=derive_category(raw.get("tags"), VENUE_TYPE_RULES, DEFAULT_VENUE_TYPE),
        capacity=parse_range(raw.get("capacity"), DEFAULT_CAPACITY),
        pricing=Pricing(starting_price=parse_price(raw.get("pricing"))),
        amenities=_str_list(raw.get("servicesAmenities") or raw.get("amenities")),
    )


def normalize_dress_shop(raw: Dict[str, Any], index: int, rng: Optional[random.Random] = None) -> DressShop:
    name = _text(raw.get("name"), f"Dress Shop {index}")
    website = raw.get("website") if isinstance(raw.get("website"), str) else None
    hours = raw.get("hours")
    if not isinstance(hours, dict):
        hours = DEFAULT_SHOP_HOURS
    return DressShop(
        id=str(index),
        name=name,
        description=_text(raw.get("description"), "Beautiful wedding dress boutique"),
        address=_address(raw),
        tags=_str_list(raw.get("tags")),
        images=normalize_images(raw.get("images"), name),
        contact=Contact(email=email_for(name, "shop"), phone=lookup_or_generate_phone(name, rng), website=website),
        region=raw.get("region") if isinstance(raw.get("region"), str) else None,
        shop_type=derive_category(raw.get("tags"), SHOP_TYPE_RULES, DEFAULT_SHOP_TYPE),
        price_range=parse_range(raw.get("priceRange"), DEFAULT_PRICE_RANGE),
        specialties=_str_list(raw.get("specialties")),
        brands=_str_list(raw.get("brands"), DEFAULT_SHOP_BRANDS),
        services=_str_list(raw.get("services"), DEFAULT_SHOP_SERVICES),
        hours={str(k): str(v) for k, v in hours.items()},
    )


def _normalize_all(records, build, kind, rng):
    out = []
    for raw in sort_by_photos(_usable(records)):
        try:
            out.append(build(raw, len(out) + 1, rng))
        except Exception as e:
            logger.warning("Skipping %s record %r: %s", kind, raw.get("name"), e)
    logger.info("Normalized %d %s records", len(out), kind)
    return out


def normalize_venues(records: Any, rng: Optional[random.Random] = None) -> List[Venue]:
    return _normalize_all(records, normalize_venue, "venue", rng)


def normalize_dress_shops(records: Any, rng: Optional[random.Random] = None) -> List[DressShop]:
    return _normalize_all(records, normalize_dress_shop, "dress shop", rng)
