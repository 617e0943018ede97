from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from rel.core.result import Err, Ok, Result
from rel.plugin.errors import InvalidVersion

Increment = Literal["major", "minor", "patch"]

_INCREMENTS: tuple[Increment, ...] = ("major", "minor", "patch")
_VERSION_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump(self, kind: Increment) -> SemVer:
        match kind:
            case "major":
                return SemVer(self.major + 1, 0, 0)
            case "minor":
                return SemVer(self.major, self.minor + 1, 0)
            case "patch":
                return SemVer(self.major, self.minor, self.patch + 1)


def parse_version(text: str) -> tuple[SemVer, str | None] | None:
    """Parse ``X.Y.Z[-pre][+build]``; returns the core and the prerelease."""
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return (SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3))), m.group("pre"))


def next_version(latest: str | None, increment: str) -> Result[str, InvalidVersion]:
    """Compute the version to release.

    ``increment`` is "major", "minor", "patch" or an explicit version. Without
    a latest version the increment applies to 0.0.0. A prerelease latest
    version is finished by a patch increment (1.0.0-rc.1 -> 1.0.0).
    """
    wanted = increment.strip()
    if wanted.startswith("v"):
        wanted = wanted[1:]

    if parse_version(wanted) is not None:
        return Ok(wanted)
    if wanted not in _INCREMENTS:
        return Err(InvalidVersion(value=increment, latest=latest))

    base = SemVer(0, 0, 0)
    prerelease: str | None = None
    if latest:
        parsed = parse_version(latest)
        if parsed is None:
            return Err(InvalidVersion(value=increment, latest=latest))
        base, prerelease = parsed

    kind: Increment = "major" if wanted == "major" else "minor" if wanted == "minor" else "patch"
    if prerelease is not None and kind == "patch":
        return Ok(str(base))
    return Ok(str(base.bump(kind)))
