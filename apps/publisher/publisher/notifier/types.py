"""Types for the publishing step: build outcome and artifact specs."""

from dataclasses import dataclass
from enum import IntEnum


class BuildResult(IntEnum):
    """Outcome of the build that produced the workspace.

    Ordered from best to worst, so "failure or worse" is a plain
    comparison against FAILURE.
    """

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2
    NOT_BUILT = 3
    ABORTED = 4

    def is_worse_or_equal_to(self, other: "BuildResult") -> bool:
        return self >= other

    @classmethod
    def parse(cls, value: str) -> "BuildResult":
        """Parse a result name case-insensitively ("failure", "NOT_BUILT")."""
        key = value.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            names = ", ".join(m.name for m in cls)
            raise ValueError(f"Unknown build result '{value}' (expected one of: {names})")


@dataclass(frozen=True)
class ArtifactSpec:
    """A configured artifact: glob pattern plus destination URL."""

    name: str
    url: str
