"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
import falcon.media
from falcon.asgi import App

from lexico.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from lexico.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params) -> None:
    """Log unexpected errors (backing-store failures included) and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    health_resource: HealthResource,
    *,
    max_upload_bytes: int,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])

    multipart = falcon.media.MultipartFormHandler()
    multipart.parse_options.max_body_part_buffer_size = max_upload_bytes
    app.req_options.media_handlers[falcon.MEDIA_MULTIPART] = multipart

    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id:int}", document_resource)
    return app
