"""
Main entry point for the App Framework service.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from .app_manager import apps_router, extensions_router
from .services import app_framework_service

# Set up logging
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown."""
    # Startup
    registry = app_framework_service.registry
    logger.info(
        f"Starting App Framework service with {len(registry.apps)} apps "
        f"and {len(registry.extensions)} extensions"
    )
    yield
    # Shutdown
    logger.info("Shutting down App Framework service...")

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="App Framework",
        description="Lists apps and extensions and filters them by state and user privileges",
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(apps_router, prefix="/apps", tags=["Apps"])
    app.include_router(extensions_router, prefix="/extensions", tags=["Extensions"])

    return app

def main():
    """Main entry point for running the application."""
    app = create_app()
    return app

if __name__ == "__main__":
    import uvicorn
    app = main()
    uvicorn.run(app, host="0.0.0.0", port=8000)

# Export the app for uvicorn
app = create_app()
