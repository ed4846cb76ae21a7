"""
Main FastAPI application for the Phonebook API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..seed import create_seeded_store
from ..store import ContactStore

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Phonebook API...", contacts=app.state.store.count())

    yield

    logger.info("Shutting down Phonebook API...")


def create_app(store: ContactStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Contact store to serve. A freshly seeded store is created when omitted.
    """
    app = FastAPI(
        title="Phonebook API",
        description="GraphQL API over an in-memory contact directory",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.store = store if store is not None else create_seeded_store()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "contacts": request.app.state.store.count(),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router()
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phonebook.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
