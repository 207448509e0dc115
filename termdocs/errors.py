"""Exception hierarchy shared by the termdocs pipeline and CLI."""

from __future__ import annotations

from ._constants import REMEDIATION_HINT


class TermdocsError(Exception):
    """Base error carrying a stable code and a process exit status."""

    def __init__(self, code: str, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.code = code
        self.exit_code = exit_code


class SnapshotValidationError(TermdocsError, ValueError):
    """Raised when a code or command block lacks its syntax snapshot.

    This marks a broken content build upstream. It is never recovered from:
    the whole document build fails.
    """

    def __init__(self, block_type: str, field: str, detail: str) -> None:
        message = f"{block_type} block: {detail}. Remediation: {REMEDIATION_HINT}."
        super().__init__("snapshot-invalid", message)
        self.block_type = block_type
        self.field = field


class ConfigError(TermdocsError, ValueError):
    """Raised when the viewer configuration is invalid or incomplete."""

    def __init__(self, message: str) -> None:
        super().__init__("config-invalid", message)


class ContentLoadError(TermdocsError):
    """Raised when a content document cannot be read or decoded."""

    def __init__(self, message: str) -> None:
        super().__init__("content-unreadable", message)


__all__ = [
    "ConfigError",
    "ContentLoadError",
    "SnapshotValidationError",
    "TermdocsError",
]
