"""Process exit codes for the ghrelease CLI."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing owner/repo/tag, bad arguments)
    - 2: Config error (unreadable or invalid .ghrelease.toml)
    - 4: Network error (GitHub API failure, transport failure)
    - 5: Parse error (latest release tag is not a semantic version)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    NETWORK_ERROR = 4
    PARSE_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
