"""Errors raised while gating access to a certificate file.

Every error is terminal for the invocation. The CLI prints the message and
exits non-zero; nothing retries.
"""

from __future__ import annotations


class CertGateError(Exception):
    """Base class for every refusal or failure of the gate."""


class GrammarError(CertGateError):
    """A path failed a string check, before or after resolution."""


class LiveRootError(GrammarError):
    """The requested path is outside the live directory."""

    def __init__(self, path: str, live_root: str) -> None:
        self.path = path
        self.live_root = live_root
        super().__init__(f'Path must start with "{live_root}": {path}')


class LiveFilenameError(GrammarError):
    """The requested path does not name ``cert.pem``."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'Path must end with "/cert.pem": {path}')


class ResolutionError(CertGateError):
    """The requested path could not be canonicalized."""

    def __init__(self, path: str, reason: str, live_root: str, archive_root: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot resolve {path}: {reason}. Must be run as a user that can"
            f" read and traverse {live_root} and {archive_root}"
        )


class ArchiveRootError(GrammarError):
    """The resolved path escaped the archive directory."""

    def __init__(self, resolved: str, archive_root: str) -> None:
        self.resolved = resolved
        self.archive_root = archive_root
        super().__init__(f'Resolved path must start with "{archive_root}": {resolved}')


class ArchiveFilenameError(GrammarError):
    """The resolved path is in the archive but is not a certificate generation."""

    def __init__(self, resolved: str) -> None:
        self.resolved = resolved
        super().__init__(f'Resolved path must end with "/cert##.pem": {resolved}')


class CertOpenError(CertGateError):
    def __init__(self, resolved: str, reason: str) -> None:
        self.resolved = resolved
        self.reason = reason
        super().__init__(f"Cannot open {resolved}: {reason}")


class CertStreamError(CertGateError):
    """Reading the file or writing to the output failed part way through.

    Bytes already written are not retracted.
    """

    def __init__(self, resolved: str, reason: str) -> None:
        self.resolved = resolved
        self.reason = reason
        super().__init__(f"Failed while streaming {resolved}: {reason}")
