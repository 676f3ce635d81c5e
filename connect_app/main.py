"""
Connect Activity Generator

A single-page form tool: a teacher enters a year level, subject area
and unit topic, and gets a classroom starter activity (title, prompt,
four discussion questions) back.

To run:
    uvicorn connect_app.main:app --reload --port 8000

The form session lives in process memory, so run a single worker.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from connect_app.routers import activities, form
from connect_app.config import get_settings
from connect_app.services.activity import activity_service
from connect_app.services.session import form_session

settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title="Connect Activity Generator API",
    description="Create engaging classroom starter activities in seconds",
    version="1.0.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware (for development)
if settings.debug:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(form.router, tags=["Form"])
app.include_router(activities.router, tags=["Activities"])


# =============================================================================
# HEALTH & INFO ENDPOINTS
# =============================================================================

@app.get("/")
async def root():
    """Root endpoint - service info."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "debug": settings.debug,
        "endpoints": {
            "form": "/api/form",
            "generate": "/api/form/generate",
            "reset": "/api/form/reset",
            "print": "/api/form/print",
            "screen": "/api/form/screen",
            "activities": "/api/activities",
            "catalog": "/api/catalog",
            "health": "/health",
            "docs": "/docs" if settings.debug else "disabled"
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    generator = await activity_service.generator.health_check()
    return {"status": "healthy", "generator": generator}


# =============================================================================
# FORM SIMULATOR INFO (FOR LOCAL TESTING)
# =============================================================================

@app.get("/simulate")
async def simulate_info():
    """How to drive the form by hand."""
    return {
        "info": "Use PATCH /api/form to fill the fields, then POST /api/form/generate",
        "example": {
            "yearLevel": "Year 8",
            "subjectArea": "Mathematics",
            "unitTopic": "Fractions"
        },
        "steps": {
            "fill_fields": "PATCH /api/form",
            "submit": "POST /api/form/generate",
            "wait_for_result": "GET /api/form?wait=true",
            "show_page": "GET /api/form/screen",
            "print": "GET /api/form/print",
            "create_new": "POST /api/form/reset"
        }
    }


# =============================================================================
# STARTUP & SHUTDOWN
# =============================================================================

@app.on_event("startup")
async def startup():
    """Run on application startup."""
    print("=" * 50)
    print(f"{settings.app_name} Starting...")
    print(f"Debug mode: {settings.debug}")
    print(f"Generation delay: {activity_service.generator.delay}s")
    print("=" * 50)


@app.on_event("shutdown")
async def shutdown():
    """Run on application shutdown."""
    form_session.cancel_pending()
    print(f"{settings.app_name} Shutting down...")
