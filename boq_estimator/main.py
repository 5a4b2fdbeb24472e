from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import boq, estimators

logger = logging.getLogger("boq_estimator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Material quantity estimation and bill-of-quantities pricing",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimators.router, prefix="/api")
app.include_router(boq.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "boq-estimator"}


@app.on_event("startup")
def log_startup():
    logger.info("%s started (unknown variant policy: %s)",
                settings.APP_NAME, settings.UNKNOWN_VARIANT_POLICY)
