# backend/swasth_khet/main.py

# import logger first so handlers are attached before anything logs
from swasth_khet.core.logger import logger

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swasth_khet.core.config import settings
from swasth_khet.core.database import engine, Base
from swasth_khet.core.request_middleware import RequestLoggingMiddleware
from swasth_khet.core.error_middleware import ExceptionLoggingMiddleware

import swasth_khet.models  # noqa: F401  (register tables on Base.metadata)

from swasth_khet.api.farmer import carbon, crops, farms
from swasth_khet.api.marketplace import pricing

# ---------------------------------------------------
# App
# ---------------------------------------------------
app = FastAPI(title="Swasth Khet API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------
# Logging middlewares
# ---------------------------------------------------
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(ExceptionLoggingMiddleware)

# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(farms.router, prefix="/farmer", tags=["farmer-farms"])
app.include_router(crops.router, prefix="/farmer", tags=["farmer-crops"])
app.include_router(carbon.router, prefix="/farmer", tags=["farmer-carbon"])
app.include_router(pricing.router, prefix="/marketplace", tags=["marketplace-pricing"])


@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Swasth Khet backend started")


@app.get("/health")
async def health_check():
    return {"status": "ok"}
