# wedding_wonders/photos.py
"""Photo-presence helpers used to order listings.

Listings with real (non-placeholder) photos are surfaced first; within each
group listings are ordered by name.
"""
from typing import Any, List, Sequence
from .utils import collation_key

PLACEHOLDER_MARKER = "placeholder"


def _field(record: Any, name: str):
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def has_uploaded_photos(record: Any) -> bool:
    images = _field(record, "images")
    if not isinstance(images, (list, tuple)) or not images:
        return False
    for img in images:
        url = _field(img, "url")
        if isinstance(url, str) and PLACEHOLDER_MARKER not in url:
            return True
    return False


def _name_key(record: Any):
    name = _field(record, "name")
    return collation_key(name if isinstance(name, str) else "")


def sort_by_photos(records: Sequence[Any]) -> List[Any]:
    with_photos = [r for r in records if has_uploaded_photos(r)]
    without_photos = [r for r in records if not has_uploaded_photos(r)]
    return sorted(with_photos, key=_name_key) + sorted(without_photos, key=_name_key)


def featured_venues(venues: Sequence[Any], with_photos: int = 4, total: int = 6) -> List[Any]:
    photographed = [v for v in venues if has_uploaded_photos(v)]
    others = [v for v in venues if not has_uploaded_photos(v)]
    return (photographed[:with_photos] + others[:total - with_photos])[:total]


def featured_dress_shops(shops: Sequence[Any], count: int = 3) -> List[Any]:
    return list(shops[:count])
