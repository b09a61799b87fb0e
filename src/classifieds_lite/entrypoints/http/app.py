from fastapi import FastAPI

from classifieds_lite.entrypoints.http.auth import install_caller_context
from classifieds_lite.entrypoints.http.exception_handlers import register_exception_handlers
from classifieds_lite.entrypoints.http.routes.health import router as health_router
from classifieds_lite.entrypoints.http.routes.listings import router as listings_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Classifieds Lite API",
        description="""
        Classified listings API for browsing and posting items for sale.

        ## Features
        - Search listings by city, category, status and title text
        - Newest-first pagination with a hard page ceiling
        - Create listings as an authenticated user

        ## Authentication
        Delegated to the upstream identity provider, which forwards the
        caller subject id in a trusted header. Required for POST /listings.

        ## Error Handling
        All errors return a structured JSON envelope with an error code.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Caller identity from the trusted upstream header
    install_caller_context(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(listings_router)

    return app


app = build_app()
