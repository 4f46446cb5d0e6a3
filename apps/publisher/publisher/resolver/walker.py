"""Workspace walker. Resolves an artifact pattern to exactly one file.

The whole tree is walked even after the first match so that ambiguous
patterns are reported instead of silently picking one file.

Traversal is iterative. Every directory entered is recorded by
(st_dev, st_ino), so a symlink pointing back up the tree is entered once
and the walk always terminates.
"""

import logging
from pathlib import Path
from typing import Optional

from publisher.resolver.pattern import ArtifactPattern, compile_glob
from publisher.resolver.types import (
    ArtifactNotFoundError,
    MultipleArtifactsError,
    ResolvedArtifact,
    WalkStats,
)

logger = logging.getLogger(__name__)


def resolve_artifact(root: Path, pattern: str) -> ResolvedArtifact:
    """Resolve a glob pattern to the single matching file under root.

    Raises:
        InvalidGlobError: If the pattern cannot be compiled.
        ArtifactNotFoundError: If nothing matches (or root is not a directory).
        MultipleArtifactsError: If more than one file matches.
    """
    compiled = compile_glob(pattern)
    root = Path(root)

    try:
        is_dir = root.is_dir()
    except OSError as exc:
        logger.warning("Workspace %s is not accessible: %s", root, exc)
        raise ArtifactNotFoundError(pattern) from exc
    if not is_dir:
        logger.warning("Workspace %s is not a directory", root)
        raise ArtifactNotFoundError(pattern)

    stats = WalkStats()
    matches = find_matches(root, compiled, stats)

    logger.debug(
        "Pattern %r: %d match(es) in %d files / %d directories",
        pattern, len(matches), stats.files, stats.directories,
    )

    if not matches:
        raise ArtifactNotFoundError(pattern)
    if len(matches) > 1:
        raise MultipleArtifactsError(pattern, [m.relative_path for m in matches])
    return matches[0]


def find_matches(
    root: Path,
    pattern: ArtifactPattern,
    stats: Optional[WalkStats] = None,
) -> list[ResolvedArtifact]:
    """Return every non-directory entry under root matching pattern.

    Children are visited in name order, so the result is deterministic.
    Directories that cannot be listed, and entries that cannot be stat-ed,
    are skipped and recorded in stats.
    """
    if stats is None:
        stats = WalkStats()

    matches: list[ResolvedArtifact] = []
    visited: set[tuple[int, int]] = set()
    stack: list[tuple[Path, str]] = [(Path(root), "")]

    while stack:
        directory, prefix = stack.pop()

        try:
            st = directory.stat()
            children = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.warning("Skipping unreadable directory %s: %s", directory, exc)
            stats.skipped.append(prefix or ".")
            continue

        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug("Directory %s already visited, not following again", directory)
            continue
        visited.add(key)
        stats.directories += 1

        subdirs: list[tuple[Path, str]] = []
        for child in children:
            relative = f"{prefix}/{child.name}" if prefix else child.name
            try:
                is_dir = child.is_dir()
            except OSError as exc:
                logger.warning("Skipping unreadable entry %s: %s", child, exc)
                stats.skipped.append(relative)
                continue
            if is_dir:
                subdirs.append((child, relative))
                continue
            stats.files += 1
            if pattern.matches(relative):
                matches.append(ResolvedArtifact(path=child, relative_path=relative))

        # Reversed so the stack pops subdirectories in name order
        stack.extend(reversed(subdirs))

    return matches
