# wedding_wonders/services.py
import random
import string
import time
from datetime import datetime, timezone
from typing import Dict
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from . import crud
from .utils import logger

REVIEW_STATUSES = ("approved", "rejected")
_ID_ALPHABET = string.ascii_lowercase + string.digits


class ClaimConflict(Exception):
    """The listing already has an approved or pending claim."""


def _claim_id():
    suffix = "".join(random.choice(_ID_ALPHABET) for _ in range(9))
    return f"claim_{int(time.time() * 1000)}_{suffix}"


def _conflict(db: Session, listing_id: str, kind: str) -> ClaimConflict:
    noun = "dress shop" if kind == "dress_shop" else "venue"
    existing = crud.find_active_claim(db, listing_id, kind)
    if existing and existing.status == "approved":
        return ClaimConflict(f"This {noun} is already claimed")
    return ClaimConflict(f"This {noun} has a pending claim")


def submit_claim(db: Session, payload: Dict, listing_name: str = None):
    kind = payload.get("listing_kind", "venue")
    if crud.find_active_claim(db, payload["listing_id"], kind):
        raise _conflict(db, payload["listing_id"], kind)
    data = dict(payload)
    data.update(
        id=_claim_id(),
        listing_kind=kind,
        listing_name=listing_name,
        status="pending",
        submitted_at=datetime.now(timezone.utc),
    )
    try:
        claim = crud.create_claim(db, data)
    except IntegrityError:
        # another request stored an active claim after the check above
        db.rollback()
        logger.warning("Concurrent claim on %s %s rejected", kind, payload["listing_id"])
        raise _conflict(db, payload["listing_id"], kind)
    logger.info("Claim %s submitted for %s %s by %s", claim.id, kind, claim.listing_id, claim.user_email)
    return claim


def review_claim(db: Session, claim_id: str, status: str, reviewed_by: str = None, admin_notes: str = None):
    """Approve or reject a pending claim; returns None if there is no pending claim with that id."""
    if status not in REVIEW_STATUSES:
        raise ValueError(f"unsupported review status: {status}")
    claim = crud.get_claim(db, claim_id)
    if not claim or claim.status != "pending":
        return None
    claim = crud.update_claim(db, claim_id, {
        "status": status,
        "reviewed_at": datetime.now(timezone.utc),
        "reviewed_by": reviewed_by,
        "admin_notes": admin_notes,
    })
    logger.info("Claim %s %s by %s", claim_id, status, reviewed_by or "admin")
    return claim


def capture_lead(db: Session, payload: Dict):
    data = dict(payload)
    data["submitted_at"] = datetime.now(timezone.utc)
    lead = crud.create_lead(db, data)
    logger.info("Lead %s recorded for %s", lead.id, lead.venue_name)
    return lead
