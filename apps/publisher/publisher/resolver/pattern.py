"""Glob pattern compilation for artifact lookup.

Patterns are matched against POSIX paths relative to the workspace root,
with "/" as the only separator:

  *        any run of characters except "/"
  ?        one character except "/"
  **       any run of characters, "/" included ("**/" = zero or more dirs)
  [a-z]    character class, "[!a-z]" / "[^a-z]" negated, never matches "/"
  {a,b}    alternation (not nested)
  \\x       literal x

A pattern without "/" is matched against the file's base name, so "*.apk"
finds "build/outputs/app.apk". Anything else is matched against the whole
relative path. A leading "./" or "/" is ignored.
"""

import re
from dataclasses import dataclass

from publisher.resolver.types import InvalidGlobError

# Characters with special meaning inside a regex character class
_CLASS_SPECIALS = set("\\^[]&~|")


@dataclass(frozen=True)
class ArtifactPattern:
    """A compiled artifact glob."""

    raw: str
    regex: re.Pattern
    match_basename: bool

    def matches(self, relative_path: str) -> bool:
        target = relative_path
        if self.match_basename:
            target = relative_path.rsplit("/", 1)[-1]
        return self.regex.fullmatch(target) is not None


def compile_glob(pattern: str) -> ArtifactPattern:
    """Compile a glob into an ArtifactPattern.

    Raises:
        InvalidGlobError: If the pattern is empty or malformed.
    """
    normalized = _strip_anchor(pattern)
    if not normalized:
        raise InvalidGlobError(f"Artifact pattern must not be empty (got '{pattern}')")

    try:
        regex = re.compile(translate(normalized))
    except re.error as exc:
        raise InvalidGlobError(f"Invalid artifact pattern '{pattern}': {exc}") from exc

    return ArtifactPattern(
        raw=pattern,
        regex=regex,
        match_basename="/" not in normalized,
    )


def translate(pattern: str) -> str:
    """Translate a glob into a regular expression source string."""
    parts: list[str] = []
    in_group = False
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]

        if c == "*":
            if pattern.startswith("**", i):
                i += 2
                if pattern.startswith("/", i):
                    parts.append("(?:.*/)?")
                    i += 1
                else:
                    parts.append(".*")
                continue
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        elif c == "[":
            end = _class_end(pattern, i)
            if end < 0:
                parts.append(re.escape(c))
            else:
                parts.append(_translate_class(pattern[i + 1:end]))
                i = end
        elif c == "{":
            if in_group:
                raise InvalidGlobError(f"Nested '{{' in pattern '{pattern}'")
            in_group = True
            parts.append("(?:")
        elif c == "}" and in_group:
            in_group = False
            parts.append(")")
        elif c == "," and in_group:
            parts.append("|")
        elif c == "\\":
            if i + 1 >= n:
                raise InvalidGlobError(f"Trailing escape in pattern '{pattern}'")
            i += 1
            parts.append(re.escape(pattern[i]))
        else:
            parts.append(re.escape(c))
        i += 1

    if in_group:
        raise InvalidGlobError(f"Unterminated '{{' in pattern '{pattern}'")

    return "".join(parts)


def _strip_anchor(pattern: str) -> str:
    if pattern.startswith("./"):
        return pattern[2:]
    return pattern.lstrip("/")


def _class_end(pattern: str, start: int) -> int:
    """Return the index of the "]" closing the class opened at start, or -1."""
    j = start + 1
    if j < len(pattern) and pattern[j] in "!^":
        j += 1
    # A "]" right after the opening bracket is a literal member
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    return pattern.find("]", j)


def _translate_class(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]

    escaped = "".join(f"\\{ch}" if ch in _CLASS_SPECIALS else ch for ch in body)

    if negate:
        return f"[^/{escaped}]"
    return f"(?!/)[{escaped}]"
