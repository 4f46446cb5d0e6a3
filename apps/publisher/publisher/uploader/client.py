"""Artifact uploader: sends one resolved artifact to a Connect endpoint.

The upload flow:
1. Copy the artifact into an anonymous temporary file and read it back
   fully (no streaming upload).
2. POST a multipart/form-data body with a single "artifact" part to the
   configured URL, authenticated by the X-Connect-Token header.
3. Classify the response. The body is read for client errors only.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Callable

import httpx

from publisher.resolver.types import ResolvedArtifact
from publisher.uploader.types import (
    ARTIFACT_FIELD_NAME,
    ARTIFACT_MEDIA_TYPE,
    TOKEN_HEADER_NAME,
    TransferInterruptedError,
    UploadOutcome,
    UploadResult,
)

logger = logging.getLogger(__name__)

# Timeout for a single upload (seconds)
DEFAULT_TIMEOUT = 30.0


def create_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Return the HTTP client used for a publishing run."""
    return httpx.Client(timeout=timeout, follow_redirects=True)


def buffer_artifact(path: Path) -> bytes:
    """Read an artifact fully into memory through a temporary file.

    The temporary file has no name on disk and is removed when closed,
    whether or not the copy succeeds.
    """
    with tempfile.TemporaryFile(prefix="artifact", suffix="tmp") as tmp:
        with open(path, "rb") as src:
            shutil.copyfileobj(src, tmp)
        tmp.seek(0)
        return tmp.read()


def upload_artifact(
    client: httpx.Client,
    url: str,
    token: str,
    artifact: ResolvedArtifact,
) -> UploadResult:
    """Upload a single artifact and classify the endpoint's reply.

    Raises:
        TransferInterruptedError: If the artifact cannot be read or the
            request fails before a complete reply is read (transport
            errors, redirect loops, undecodable bodies).
    """
    try:
        payload = buffer_artifact(artifact.path)
    except OSError as exc:
        raise TransferInterruptedError(
            url, f"Could not read {artifact.relative_path}: {exc}"
        ) from exc

    logger.debug(
        "POST %s (%s, %d bytes)", url, artifact.relative_path, len(payload)
    )

    files = {ARTIFACT_FIELD_NAME: (artifact.name, payload, ARTIFACT_MEDIA_TYPE)}
    headers = {TOKEN_HEADER_NAME: token}

    try:
        with client.stream("POST", url, headers=headers, files=files) as response:
            result = classify_response(
                url,
                artifact.name,
                response.status_code,
                lambda: _read_text(response),
            )
    except httpx.RequestError as exc:
        raise TransferInterruptedError(url, f"Upload to {url} failed: {exc}") from exc

    logger.debug("Upload result: %s", result.to_dict())
    return result


def classify_response(
    url: str,
    artifact_name: str,
    status_code: int,
    read_body: Callable[[], str],
) -> UploadResult:
    """Classify a response status into an UploadResult.

    2xx is success. Anything else below 500 is a client error and the body
    is read through read_body. 500 and above is a server error and
    read_body is never called.
    """
    if 200 <= status_code < 300:
        outcome = UploadOutcome.SUCCESS
        body = None
    elif status_code < 500:
        outcome = UploadOutcome.CLIENT_ERROR
        body = read_body()
    else:
        outcome = UploadOutcome.SERVER_ERROR
        body = None

    return UploadResult(
        url=url,
        artifact_name=artifact_name,
        status_code=status_code,
        outcome=outcome,
        body=body,
    )


def _read_text(response: httpx.Response) -> str:
    return response.read().decode("utf-8", errors="replace")
