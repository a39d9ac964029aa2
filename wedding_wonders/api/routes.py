# wedding_wonders/api/routes.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List
from .. import crud, schemas, services
from ..catalog import Catalog, get_catalog
from ..db import get_db
from ..filters import apply_url_override, filter_dress_shops, filter_venues, paginate
from ..utils import logger

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

# --- venues ---

@router.get("/venues", response_model=schemas.VenuePage)
def venues(
    search: str | None = Query(None),
    region: str | None = Query(None),
    category: str | None = Query(None),
    type: str | None = Query(None),
    size: str | None = Query(None),
    price: str | None = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(12, ge=1, le=100),
    catalog: Catalog = Depends(get_catalog)
):
    state = schemas.FilterState(search_term=search, region=region, category=category, size=size, price=price)
    state = apply_url_override(state, type)
    matched = filter_venues(catalog.venues, state)
    items, total_pages = paginate(matched, page, per_page)
    return {"total": len(matched), "page": page, "total_pages": total_pages, "items": items}


@router.get("/venues/featured", response_model=List[schemas.Venue])
def featured_venues(catalog: Catalog = Depends(get_catalog)):
    return catalog.featured_venues


@router.get("/venues/{venue_id}", response_model=schemas.Venue)
def get_venue(venue_id: str, catalog: Catalog = Depends(get_catalog)):
    venue = catalog.venue(venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue

# --- dress shops ---

@router.get("/dress-shops", response_model=schemas.DressShopPage)
def dress_shops(
    search: str | None = Query(None),
    category: str | None = Query(None),
    type: str | None = Query(None),
    tab: str | None = Query(None),
    price: str | None = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(12, ge=1, le=100),
    catalog: Catalog = Depends(get_catalog)
):
    state = schemas.FilterState(search_term=search, category=category, tab=tab, price=price)
    state = apply_url_override(state, type)
    matched = filter_dress_shops(catalog.dress_shops, state)
    items, total_pages = paginate(matched, page, per_page)
    return {"total": len(matched), "page": page, "total_pages": total_pages, "items": items}


@router.get("/dress-shops/featured", response_model=List[schemas.DressShop])
def featured_dress_shops(catalog: Catalog = Depends(get_catalog)):
    return catalog.featured_dress_shops


@router.get("/dress-shops/{shop_id}", response_model=schemas.DressShop)
def get_dress_shop(shop_id: str, catalog: Catalog = Depends(get_catalog)):
    shop = catalog.dress_shop(shop_id)
    if not shop:
        raise HTTPException(status_code=404, detail="Dress shop not found")
    return shop

# --- claims ---

@router.get("/claims", response_model=List[schemas.ClaimOut])
def list_claims(status: str | None = Query(None), db: Session = Depends(get_db)):
    return crud.list_claims(db, status=status)


@router.post("/claims", response_model=schemas.ClaimOut)
def submit_claim(
    payload: schemas.ClaimCreate,
    db: Session = Depends(get_db),
    catalog: Catalog = Depends(get_catalog)
):
    listing = catalog.listing(payload.listing_id, payload.listing_kind)
    if not listing:
        raise HTTPException(status_code=404, detail="Listing not found")
    try:
        return services.submit_claim(db, payload.model_dump(), listing_name=listing.name)
    except services.ClaimConflict as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/claims/{claim_id}", response_model=schemas.ClaimOut)
def review_claim(claim_id: str, payload: schemas.ClaimReview, db: Session = Depends(get_db)):
    claim = services.review_claim(db, claim_id, payload.status, payload.reviewed_by, payload.admin_notes)
    if not claim:
        raise HTTPException(status_code=404, detail="Claim not found or already processed")
    return claim

# --- leads ---

@router.post("/venue-leads", response_model=schemas.LeadOut)
def capture_lead(payload: schemas.LeadCreate, db: Session = Depends(get_db)):
    try:
        return services.capture_lead(db, payload.model_dump())
    except Exception as e:
        logger.exception("Failed to record lead for %s: %s", payload.venue_name, e)
        raise HTTPException(status_code=500, detail="Failed to record lead")
