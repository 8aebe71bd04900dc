"""Document API resources."""

import json

import falcon
import falcon.asgi

from lexico.application.dto.document_dto import (
    DocumentSummaryOutput,
    DocumentUploadInput,
    DocumentUploadOutput,
)
from lexico.application.use_cases.document.get_document import GetDocumentUseCase
from lexico.application.use_cases.document.ingest_document import IngestDocumentUseCase
from lexico.domain.exceptions import NotFound, UnsupportedBackingStore, ValidationError

DEFAULT_FILENAME = "document.txt"


class _UploadTooLarge(Exception):
    """Request body or file part overflowed the configured upload limit."""


def _decode_filename(raw: str | None) -> str:
    """Decode filename to UTF-8, fixing mojibake when UTF-8 bytes were read as Latin-1."""
    if not raw or not raw.strip():
        return ""
    raw = raw.strip()
    try:
        return raw.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return raw


def _get_part_filename(part: object) -> str:
    """Filename of a multipart file part, or DEFAULT_FILENAME when absent."""
    raw = getattr(part, "filename", None) or ""
    return _decode_filename(raw) or DEFAULT_FILENAME


def _parse_user_id(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError("user_id must be an integer")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError("user_id must be an integer") from None


class DocumentsResource:
    """POST /v1/documents - upload a text document (multipart or JSON)."""

    def __init__(self, ingest_document: IngestDocumentUseCase, max_upload_bytes: int) -> None:
        self._ingest_document = ingest_document
        self._max_upload_bytes = max_upload_bytes

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Upload document. Multipart: file, user_id, language_code. JSON: content instead of file."""
        if req.content_length and req.content_length > self._max_upload_bytes:
            resp.status = falcon.HTTP_413
            resp.media = {"error": f"Upload exceeds {self._max_upload_bytes} bytes"}
            return

        content_type = req.content_type or ""
        try:
            if "multipart/form-data" in content_type:
                input_data = await self._read_multipart(req)
            else:
                input_data = await self._read_json(req)
        except _UploadTooLarge:
            resp.status = falcon.HTTP_413
            resp.media = {"error": f"Upload exceeds {self._max_upload_bytes} bytes"}
            return
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            result = await self._ingest_document.execute(input_data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except UnsupportedBackingStore as e:
            resp.status = falcon.HTTP_501
            resp.media = {"error": str(e), "attempted": list(e.attempted)}
            return

        resp.media = _upload_to_dict(result)
        resp.status = falcon.HTTP_200

    async def _read_bounded(self, stream) -> bytes:
        """Read at most max_upload_bytes; Content-Length may be absent (chunked)."""
        data = await stream.read(self._max_upload_bytes + 1)
        if len(data) > self._max_upload_bytes:
            await stream.exhaust()
            raise _UploadTooLarge()
        return bytes(data)

    async def _read_multipart(self, req: falcon.asgi.Request) -> DocumentUploadInput:
        form = await req.get_media()
        data = b""
        filename = DEFAULT_FILENAME
        fields: dict[str, str] = {}
        async for part in form:
            name = (part.name or "").strip()
            if name == "file":
                data = await self._read_bounded(part.stream)
                filename = _get_part_filename(part)
            elif name in ("user_id", "language_code"):
                fields[name] = (await part.get_text()) or ""
        if "user_id" not in fields:
            raise ValueError("user_id required")
        return DocumentUploadInput(
            user_id=_parse_user_id(fields["user_id"]),
            filename=filename,
            data=data,
            language_code=fields.get("language_code"),
        )

    async def _read_json(self, req: falcon.asgi.Request) -> DocumentUploadInput:
        raw = await self._read_bounded(req.stream)
        try:
            body = json.loads(raw)
        except ValueError:
            raise ValueError("Invalid JSON body") from None
        if not isinstance(body, dict):
            raise ValueError("JSON object expected")
        content = body.get("content") or ""
        if not isinstance(content, str):
            raise ValueError("content must be a string")
        language_code = body.get("language_code")
        if language_code is not None and not isinstance(language_code, str):
            raise ValueError("language_code must be a string")
        if "user_id" not in body:
            raise ValueError("user_id required")
        return DocumentUploadInput(
            user_id=_parse_user_id(body["user_id"]),
            filename=str(body.get("filename") or DEFAULT_FILENAME),
            data=content.encode("utf-8"),
            language_code=language_code,
        )


class DocumentResource:
    """GET /v1/documents/{id} - document summary."""

    def __init__(self, get_document: GetDocumentUseCase) -> None:
        self._get_document = get_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: int,
    ) -> None:
        """Get document by id."""
        try:
            result = await self._get_document.execute(document_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found", "id": document_id}
            return
        resp.media = _summary_to_dict(result)
        resp.status = falcon.HTTP_200


def _upload_to_dict(d: DocumentUploadOutput) -> dict:
    return {
        "message": "Document uploaded",
        "document_id": d.document_id,
        "language": d.language,
        "hash": d.content_hash,
    }


def _summary_to_dict(d: DocumentSummaryOutput) -> dict:
    return {
        "id": d.id,
        "filename": d.filename,
        "user_id": d.user_id,
        "language_id": d.language_id,
        "length": d.length,
    }
