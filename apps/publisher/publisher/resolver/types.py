"""Types for the artifact resolver."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ResolvedArtifact:
    """A single workspace file matched by an artifact pattern.

    relative_path is always POSIX-style and relative to the workspace root,
    e.g. "build/outputs/app.apk".
    """

    path: Path
    relative_path: str

    @property
    def name(self) -> str:
        return self.path.name


class InvalidGlobError(ValueError):
    """Raised when an artifact pattern cannot be compiled."""


class ArtifactResolutionError(Exception):
    """Base class for patterns that do not resolve to exactly one file."""

    def __init__(self, pattern: str, message: str = ""):
        self.pattern = pattern
        super().__init__(message or f"Could not resolve artifact pattern '{pattern}'")


class ArtifactNotFoundError(ArtifactResolutionError):
    """Raised when a pattern matches no file in the workspace."""

    def __init__(self, pattern: str):
        super().__init__(pattern, f"No file matches '{pattern}'")


class MultipleArtifactsError(ArtifactResolutionError):
    """Raised when a pattern matches more than one file.

    Carries every matched relative path for diagnostics.
    """

    def __init__(self, pattern: str, matches: list[str]):
        self.matches = matches
        super().__init__(
            pattern, f"{len(matches)} files match '{pattern}': {', '.join(matches)}"
        )


@dataclass
class WalkStats:
    """Counters collected while walking a workspace tree."""

    directories: int = 0
    files: int = 0
    skipped: list[str] = field(default_factory=list)
