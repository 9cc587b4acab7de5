"""The certificate gate — path grammar, confinement and streaming."""

from certgate.gate.errors import (
    ArchiveFilenameError,
    ArchiveRootError,
    CertGateError,
    CertOpenError,
    CertStreamError,
    GrammarError,
    LiveFilenameError,
    LiveRootError,
    ResolutionError,
)
from certgate.gate.grammar import (
    final_component,
    has_prefix,
    is_archive_cert_filename,
    is_live_cert_filename,
)
from certgate.gate.resolver import CHUNK_SIZE, read_cert, resolve_cert_path, stream_file

__all__ = [
    "CHUNK_SIZE",
    "ArchiveFilenameError",
    "ArchiveRootError",
    "CertGateError",
    "CertOpenError",
    "CertStreamError",
    "GrammarError",
    "LiveFilenameError",
    "LiveRootError",
    "ResolutionError",
    "final_component",
    "has_prefix",
    "is_archive_cert_filename",
    "is_live_cert_filename",
    "read_cert",
    "resolve_cert_path",
    "stream_file",
]
