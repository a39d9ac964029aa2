# wedding_wonders/main.py
from fastapi import FastAPI
from wedding_wonders.db import Base, engine
from wedding_wonders.api.routes import router as api_router
from wedding_wonders.catalog import get_catalog
from wedding_wonders.utils import logger
import wedding_wonders.models  # noqa: F401 ensure models are imported so tables are known

# create FastAPI instance
app = FastAPI(title="Florida Wedding Wonders")
app.include_router(api_router)


@app.on_event("startup")
def on_startup():
    # Ensure database tables are created on startup
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        # Do not crash the app if migrations are preferred; keep running
        logger.warning("Table creation skipped: %s", e)
    # build the in-memory catalog once, before the first request
    get_catalog()
