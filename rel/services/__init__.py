"""Services that drive the release plugins."""

from rel.services.release import ReleaseService, ResolutionReport
from rel.services.semver import SemVer, next_version, parse_version

__all__ = [
    "ReleaseService",
    "ResolutionReport",
    "SemVer",
    "next_version",
    "parse_version",
]
