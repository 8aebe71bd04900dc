"""Application entry point and composition root."""

import logging

from lexico import __version__
from lexico.application.services import CapabilityProbe
from lexico.application.use_cases.document.get_document import GetDocumentUseCase
from lexico.application.use_cases.document.ingest_document import IngestDocumentUseCase
from lexico.config import Settings, get_settings
from lexico.infrastructure.persistence.registry import create_document_store
from lexico.interfaces.api.app import create_app
from lexico.interfaces.api.middleware.cors import CORSMiddleware
from lexico.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from lexico.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from lexico.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_lexico_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    store = create_document_store(settings)

    probe = CapabilityProbe()
    ingest_document = IngestDocumentUseCase(
        unit_of_work_factory=store.uow_factory,
        probe=probe,
    )
    get_document = GetDocumentUseCase(unit_of_work_factory=store.uow_factory)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    logger.info(
        "Lexico v%s: %s document store, max upload %d bytes",
        __version__,
        settings.document_store,
        settings.max_upload_bytes,
    )
    return create_app(
        DocumentsResource(ingest_document, settings.max_upload_bytes),
        DocumentResource(get_document),
        HealthResource(settings.environment, port=settings.port),
        max_upload_bytes=settings.max_upload_bytes,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(store.pools),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    app = create_lexico_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


def main() -> None:
    """CLI entry point."""
    print(f"Lexico v{__version__}")
    run_server()


if __name__ == "__main__":
    main()
