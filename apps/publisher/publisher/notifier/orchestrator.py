"""Publishing orchestrator, the post-build entry point.

Flow per run:
1. Skip everything when the build failed (or worse).
2. Skip everything when no artifacts are configured.
3. For each artifact spec, in order: resolve -> buffer -> POST -> report.

Every per-artifact problem (no match, ambiguous match, rejected upload,
server error, interrupted transfer) is reported on the log sink and the
run moves on to the next spec. The run itself always reports success:
publishing never changes the build's verdict.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import httpx

from publisher.notifier.log_sink import LogSink
from publisher.notifier.types import ArtifactSpec, BuildResult
from publisher.resolver import (
    ArtifactNotFoundError,
    InvalidGlobError,
    MultipleArtifactsError,
    resolve_artifact,
)
from publisher.uploader import (
    TransferInterruptedError,
    UploadOutcome,
    UploadResult,
    create_client,
    upload_artifact,
)
from publisher.uploader.client import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

BANNER_START = "-----* Connect plugin is processing build artifacts *-----"
BANNER_END = "-----* All artifacts processed. *-----"
MSG_FAILED_BUILD = "Cannot send artifacts from failed build."
MSG_NO_ARTIFACTS = "No artifacts configured."
MSG_INTERRUPTED = "Interrupted."


def publish_artifacts(
    build_result: BuildResult,
    workspace: Path,
    token: str,
    specs: Sequence[ArtifactSpec],
    log: LogSink,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bool:
    """Upload every configured artifact of a finished build.

    If client is None, a client is created for this run and closed before
    returning. Always returns True.
    """
    if build_result.is_worse_or_equal_to(BuildResult.FAILURE):
        log.info(MSG_FAILED_BUILD)
        return True

    if not specs:
        log.info(MSG_NO_ARTIFACTS)
        return True

    log.info(BANNER_START)

    owns_client = client is None
    if owns_client:
        client = create_client(timeout)

    workspace = Path(workspace)
    try:
        for spec in specs:
            _publish_one(client, workspace, token, spec, log)
    finally:
        if owns_client:
            client.close()

    log.info(BANNER_END)
    return True


def _publish_one(
    client: httpx.Client,
    workspace: Path,
    token: str,
    spec: ArtifactSpec,
    log: LogSink,
) -> None:
    """Resolve and upload a single spec, reporting the outcome on log."""
    try:
        artifact = resolve_artifact(workspace, spec.name)
        log.info(f"Artifact {artifact.name} being sent to Incapptic Connect.")
        result = upload_artifact(client, spec.url, token, artifact)
    except MultipleArtifactsError as exc:
        logger.debug("Ambiguous pattern %r: %s", spec.name, exc.matches)
        log.error(f"Multiple artifacts found for name [{spec.name}].")
        return
    except ArtifactNotFoundError:
        log.error(f"No artifacts found for name [{spec.name}].")
        return
    except InvalidGlobError as exc:
        logger.debug("Invalid pattern %r: %s", spec.name, exc)
        log.error(f"Invalid artifact pattern [{spec.name}].")
        return
    except TransferInterruptedError as exc:
        logger.warning("Transfer interrupted for %r: %s", spec.name, exc)
        log.error(MSG_INTERRUPTED)
        return

    _report(result, log)


def _report(result: UploadResult, log: LogSink) -> None:
    if result.is_success:
        log.success(f"Artifact {result.artifact_name} sent to Connect")
    elif result.outcome is UploadOutcome.CLIENT_ERROR:
        log.error(
            f"Endpoint {result.url} replied with code {result.status_code} "
            f"and message [{result.body}]."
        )
    else:
        log.error(f"Endpoint {result.url} replied with code {result.status_code}.")
