# wedding_wonders/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime, date

# --- catalog listings ---

class Range(BaseModel):
    min: int
    max: int

class Address(BaseModel):
    street: str = ""
    city: str = "Miami"
    state: str = "FL"
    zip_code: str = "33101"

class Contact(BaseModel):
    email: str
    phone: str
    website: Optional[str] = None

class ListingImage(BaseModel):
    id: str
    url: str
    alt: str = ""
    is_primary: bool = False
    media_type: str = "image"

class Pricing(BaseModel):
    starting_price: int = 5000
    currency: str = "USD"

class Listing(BaseModel):
    id: str
    name: str
    description: str
    address: Address
    tags: List[str] = []
    images: List[ListingImage] = []
    contact: Contact
    region: Optional[str] = None

class Venue(Listing):
    venue_type: str
    capacity: Range
    pricing: Pricing
    amenities: List[str] = []

class DressShop(Listing):
    shop_type: str
    price_range: Range
    specialties: List[str] = []
    brands: List[str] = []
    services: List[str] = []
    hours: Dict[str, str] = {}

class VenuePage(BaseModel):
    total: int
    page: int
    total_pages: int
    items: List[Venue]

class DressShopPage(BaseModel):
    total: int
    page: int
    total_pages: int
    items: List[DressShop]

# --- filter state ---

class FilterState(BaseModel):
    """Current filter selection; None, "" and "All"/"all" mean unconstrained."""
    search_term: Optional[str] = None
    region: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    price: Optional[str] = None
    tab: Optional[str] = None

# --- claims ---

class ClaimCreate(BaseModel):
    listing_id: str = Field(..., min_length=1)
    listing_kind: str = Field("venue", pattern="^(venue|dress_shop)$")
    user_id: Optional[str] = None
    user_email: str = Field(..., min_length=3)
    user_name: str = Field(..., min_length=1)
    business_name: Optional[str] = None
    business_type: Optional[str] = None
    notes: Optional[str] = None

class ClaimReview(BaseModel):
    status: str = Field(..., pattern="^(approved|rejected)$")
    reviewed_by: Optional[str] = None
    admin_notes: Optional[str] = None

class ClaimOut(BaseModel):
    id: str
    listing_id: str
    listing_name: Optional[str]
    listing_kind: str
    user_id: Optional[str]
    user_email: str
    user_name: str
    business_name: Optional[str]
    business_type: Optional[str]
    notes: Optional[str]
    status: str
    submitted_at: Optional[datetime]
    reviewed_at: Optional[datetime]
    reviewed_by: Optional[str]
    admin_notes: Optional[str]
    class Config:
        from_attributes = True

# --- leads ---

class LeadCreate(BaseModel):
    venue_id: Optional[str] = None
    venue_name: str = Field(..., min_length=1)
    venue_email: str = Field(..., min_length=3)
    user_name: str = Field(..., min_length=1)
    user_email: str = Field(..., min_length=3)
    message: str = Field(..., min_length=1)
    phone: Optional[str] = None
    event_type: Optional[str] = None
    guest_count: Optional[int] = Field(None, ge=1)
    budget: Optional[str] = None
    preferred_date: Optional[date] = None

class LeadOut(LeadCreate):
    id: int
    submitted_at: Optional[datetime]
    class Config:
        from_attributes = True
