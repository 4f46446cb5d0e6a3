"""Notifier module: the post-build publishing step.

Public API:
    publish_artifacts(build_result, workspace, token, specs, log) -> bool
    load_publisher_config(path) -> PublisherConfig
"""

from publisher.notifier.log_sink import ConsoleLogSink, LogSink
from publisher.notifier.orchestrator import publish_artifacts
from publisher.notifier.schemas import (
    ArtifactConfig,
    ConfigError,
    PublisherConfig,
    load_publisher_config,
)
from publisher.notifier.types import ArtifactSpec, BuildResult

__all__ = [
    "ArtifactConfig",
    "ArtifactSpec",
    "BuildResult",
    "ConfigError",
    "ConsoleLogSink",
    "LogSink",
    "PublisherConfig",
    "load_publisher_config",
    "publish_artifacts",
]
