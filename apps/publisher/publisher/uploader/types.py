"""Types for the artifact uploader.

UploadResult is the per-artifact outcome of one POST. It exists only for
the duration of a run and is never persisted.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

TOKEN_HEADER_NAME = "X-Connect-Token"
ARTIFACT_FIELD_NAME = "artifact"
ARTIFACT_MEDIA_TYPE = "application/octet-stream"


class UploadOutcome(StrEnum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class UploadResult:
    """Classified response for a single artifact upload.

    body is only populated for client errors (status < 500). Server error
    bodies are never read.
    """

    url: str
    artifact_name: str
    status_code: int
    outcome: UploadOutcome
    body: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.outcome is UploadOutcome.SUCCESS

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "artifact_name": self.artifact_name,
            "status_code": self.status_code,
            "outcome": self.outcome.value,
            "body": self.body,
        }


class TransferInterruptedError(Exception):
    """Raised when buffering or sending an artifact is cut short.

    The underlying OSError / httpx.RequestError is chained as __cause__.
    """

    def __init__(self, url: str, message: str = ""):
        self.url = url
        super().__init__(message or f"Transfer to {url} was interrupted")
