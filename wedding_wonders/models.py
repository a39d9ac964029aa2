# wedding_wonders/models.py
"""SQLAlchemy ORM models for persisted entities.

`VenueClaim` tracks ownership claims on catalog listings; `VenueLead`
records inquiries sent to venues.
"""
from sqlalchemy import Column, Integer, Text, Date, TIMESTAMP, func, Index
from .db import Base

class VenueClaim(Base):
    __tablename__ = "venue_claims"
    id = Column(Text, primary_key=True)
    listing_id = Column(Text, nullable=False, index=True)
    listing_name = Column(Text)
    listing_kind = Column(Text, nullable=False, default="venue")
    user_id = Column(Text)
    user_email = Column(Text, nullable=False)
    user_name = Column(Text, nullable=False)
    business_name = Column(Text)
    business_type = Column(Text)
    notes = Column(Text)
    status = Column(Text, nullable=False, default="pending")
    submitted_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    reviewed_at = Column(TIMESTAMP(timezone=True))
    reviewed_by = Column(Text)
    admin_notes = Column(Text)

class VenueLead(Base):
    __tablename__ = "venue_leads"
    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Text, index=True)
    venue_name = Column(Text, nullable=False)
    venue_email = Column(Text, nullable=False)
    user_name = Column(Text, nullable=False)
    user_email = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    phone = Column(Text)
    event_type = Column(Text)
    guest_count = Column(Integer)
    budget = Column(Text)
    preferred_date = Column(Date)
    submitted_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

Index("idx_venue_claims_status", VenueClaim.status)
Index("idx_venue_claims_listing", VenueClaim.listing_kind, VenueClaim.listing_id)
# at most one pending or approved claim per listing
Index(
    "uq_venue_claims_active",
    VenueClaim.listing_kind,
    VenueClaim.listing_id,
    unique=True,
    sqlite_where=VenueClaim.status.in_(("pending", "approved")),
    postgresql_where=VenueClaim.status.in_(("pending", "approved")),
)
