"""Resolver module for locating build artifacts by glob pattern.

Public API:
    resolve_artifact(root, pattern) -> ResolvedArtifact
    compile_glob(pattern) -> ArtifactPattern
"""

from publisher.resolver.pattern import ArtifactPattern, compile_glob
from publisher.resolver.types import (
    ArtifactNotFoundError,
    ArtifactResolutionError,
    InvalidGlobError,
    MultipleArtifactsError,
    ResolvedArtifact,
)
from publisher.resolver.walker import find_matches, resolve_artifact

__all__ = [
    "ArtifactNotFoundError",
    "ArtifactPattern",
    "ArtifactResolutionError",
    "InvalidGlobError",
    "MultipleArtifactsError",
    "ResolvedArtifact",
    "compile_glob",
    "find_matches",
    "resolve_artifact",
]
