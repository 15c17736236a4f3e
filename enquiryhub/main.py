"""
Enquiry Hub Backend - FastAPI Application
Main entry point with all routes configured.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from enquiryhub.config import settings
from enquiryhub.database import init_db
from enquiryhub.api import enquiries
from enquiryhub.schemas.common import HealthResponse

# Import models to ensure they are registered with SQLModel
from enquiryhub.models import Enquiry


VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Demo mode never touches the database
    if not settings.DEMO_MODE:
        await init_db()
    yield


app = FastAPI(
    title="Enquiry Hub API",
    description="Enquiry board for companies and their customers",
    version=VERSION,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(enquiries.router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": "Enquiry Hub API is running",
        "version": VERSION,
        "docs": "/docs"
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Detailed health check."""
    return HealthResponse(status="healthy", version=VERSION)
