"""Uploader module for sending artifacts to Connect endpoints.

Public API:
    upload_artifact(client, url, token, artifact) -> UploadResult
    create_client(timeout) -> httpx.Client
"""

from publisher.uploader.client import (
    buffer_artifact,
    classify_response,
    create_client,
    upload_artifact,
)
from publisher.uploader.types import (
    TOKEN_HEADER_NAME,
    TransferInterruptedError,
    UploadOutcome,
    UploadResult,
)

__all__ = [
    "TOKEN_HEADER_NAME",
    "TransferInterruptedError",
    "UploadOutcome",
    "UploadResult",
    "buffer_artifact",
    "classify_response",
    "create_client",
    "upload_artifact",
]
