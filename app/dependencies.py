# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Each request gets its own ApiClient bound to that request's session, so
# one admin's 401 never signs out another.
# =============================================================================

from typing import Annotated, Callable, Iterator, TypeVar

from fastapi import Depends, Request
from starlette.datastructures import UploadFile

from app.auth.dependencies import SessionProviderDep
from app.config import settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError
from core.services.base import ApiService
from lib.api_client import ApiClient, MultipartPayload

ServiceT = TypeVar("ServiceT", bound=ApiService)


def get_api_client(provider: SessionProviderDep) -> Iterator[ApiClient]:
    """
    Request-scoped authenticated API client.

    Closed once the response has been produced.
    """
    client = ApiClient(provider)
    try:
        yield client
    finally:
        client.close()


ApiClientDep = Annotated[ApiClient, Depends(get_api_client)]


def service(service_cls: type[ServiceT]) -> Callable[[ApiClient], ServiceT]:
    """
    Build a dependency that wraps the request's ApiClient in `service_cls`.

    Usage:
        EventServiceDep = Annotated[EventService, Depends(service(EventService))]
    """
    def dependency(client: ApiClientDep) -> ServiceT:
        return service_cls(client)

    dependency.__name__ = f"get_{service_cls.__name__}"
    return dependency


# =============================================================================
# Multipart Forms
# =============================================================================

def check_image(upload: UploadFile, content: bytes) -> None:
    """
    Validate an uploaded image against ALLOWED_IMAGE_TYPES and MAX_UPLOAD_SIZE_MB.

    Raises:
        InvalidFileTypeError: MIME type not allowed
        FileTooLargeError: File exceeds the size limit
    """
    allowed = settings.allowed_image_types_list
    content_type = (upload.content_type or "").lower()
    if content_type not in allowed:
        raise InvalidFileTypeError(upload.filename or "upload", upload.content_type, allowed)

    if len(content) > settings.max_upload_size_bytes:
        raise FileTooLargeError(
            upload.filename or "upload",
            len(content) / (1024 * 1024),
            settings.MAX_UPLOAD_SIZE_MB,
        )


async def read_multipart_form(request: Request) -> MultipartPayload:
    """
    Turn an incoming multipart form into a MultipartPayload for the backend.

    Plain fields are forwarded as-is (repeated names as a list); files are
    validated as images and forwarded under their original field name.
    """
    payload = MultipartPayload()

    async with request.form() as form:
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                content = await value.read()
                check_image(value, content)
                payload.add_file(
                    name,
                    value.filename or name,
                    content,
                    value.content_type or "application/octet-stream",
                )
            else:
                payload.add_field(name, value)

    return payload


MultipartDep = Annotated[MultipartPayload, Depends(read_multipart_form)]
