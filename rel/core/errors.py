"""Error codes for CLI exit status.

Every failure the CLI reports maps onto one of these codes. The numeric
values are process exit codes and must stay stable:
- 0: Success
- 1: User error (no remote configured, bad version input, bad config)
- 2: Environment error (git missing, changelog command failed)
- 4: Network error (remote configured but unreachable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
