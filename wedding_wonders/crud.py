# wedding_wonders/crud.py
"""CRUD helpers for `VenueClaim` and `VenueLead` rows."""
from sqlalchemy.orm import Session
from typing import Dict, Any, Optional
from .models import VenueClaim, VenueLead

ACTIVE_CLAIM_STATUSES = ("pending", "approved")

def create_claim(db: Session, data: Dict[str, Any]) -> VenueClaim:
    obj = VenueClaim(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def get_claim(db: Session, claim_id: str):
    return db.query(VenueClaim).filter(VenueClaim.id == claim_id).first()

def list_claims(db: Session, status: Optional[str] = None):
    q = db.query(VenueClaim)
    if status:
        q = q.filter(VenueClaim.status == status)
    return q.order_by(VenueClaim.submitted_at.desc(), VenueClaim.id).all()

def find_active_claim(db: Session, listing_id: str, listing_kind: str = "venue"):
    return (
        db.query(VenueClaim)
        .filter(
            VenueClaim.listing_id == listing_id,
            VenueClaim.listing_kind == listing_kind,
            VenueClaim.status.in_(ACTIVE_CLAIM_STATUSES),
        )
        .first()
    )

def update_claim(db: Session, claim_id: str, updates: Dict[str, Any]):
    obj = get_claim(db, claim_id)
    if not obj:
        return None
    for k, v in updates.items():
        setattr(obj, k, v)
    db.commit()
    db.refresh(obj)
    return obj

def create_lead(db: Session, data: Dict[str, Any]) -> VenueLead:
    obj = VenueLead(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def list_leads(db: Session, venue_id: Optional[str] = None):
    q = db.query(VenueLead)
    if venue_id:
        q = q.filter(VenueLead.venue_id == venue_id)
    return q.order_by(VenueLead.id).all()
