"""Confine a requested certificate path to the archive and stream it.

The gate runs in a fixed order and stops at the first failure:

1. requested path starts with the live root
2. requested path names ``cert.pem``
3. path canonicalizes (symlinks and ``..`` followed)
4. canonical path starts with the archive root
5. canonical path names ``cert<digits>.pem``

Only then is the file opened and copied out in fixed-size chunks. Step 4 is
what stops a live symlink from pointing anywhere else on the filesystem.
"""

from __future__ import annotations

import logging
import os
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from certgate.config import CONFINEMENT_ROOTS
from certgate.gate.errors import (
    ArchiveFilenameError,
    ArchiveRootError,
    CertOpenError,
    CertStreamError,
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

if TYPE_CHECKING:
    from certgate.config import ConfinementRoots

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def resolve_cert_path(
    requested: str | os.PathLike[str],
    *,
    roots: ConfinementRoots = CONFINEMENT_ROOTS,
) -> Path:
    """Run the five path checks and return the canonical archive path.

    Raises a ``CertGateError`` subclass naming the first check that failed.
    """
    path = os.fspath(requested)

    if not has_prefix(path, roots.live):
        logger.debug("Rejected %r: outside live root %s", path, roots.live)
        raise LiveRootError(path, roots.live)
    if not is_live_cert_filename(final_component(path)):
        logger.debug("Rejected %r: not a live cert.pem", path)
        raise LiveFilenameError(path)

    try:
        canonical = Path(path).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        # RuntimeError: symlink loop on interpreters before 3.13
        logger.debug("Could not resolve %r: %s", path, exc)
        raise ResolutionError(path, _reason(exc), roots.live, roots.archive) from exc
    real = str(canonical)
    logger.debug("Resolved %s -> %s", path, real)

    if not has_prefix(real, roots.archive):
        logger.debug("Rejected %s: outside archive root %s", real, roots.archive)
        raise ArchiveRootError(real, roots.archive)
    if not is_archive_cert_filename(canonical.name):
        logger.debug("Rejected %s: not an archive certificate name", real)
        raise ArchiveFilenameError(real)

    return canonical


def _open_nofollow(path: Path) -> BinaryIO:
    """Open read-only without following a symlink swapped in after resolution."""
    flags = os.O_RDONLY | getattr(os, "O_CLOEXEC", 0) | getattr(os, "O_NOFOLLOW", 0)
    fd = os.open(path, flags)
    try:
        return os.fdopen(fd, "rb", buffering=0)
    except Exception:
        os.close(fd)
        raise


def stream_file(path: Path, out: BinaryIO, *, chunk_size: int = CHUNK_SIZE) -> int:
    """Copy ``path`` to ``out`` one chunk at a time. Returns bytes written."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    try:
        fh = _open_nofollow(path)
    except OSError as exc:
        raise CertOpenError(str(path), _reason(exc)) from exc

    total = 0
    with fh:
        try:
            for chunk in iter(partial(fh.read, chunk_size), b""):
                out.write(chunk)
                total += len(chunk)
            out.flush()
        except OSError as exc:
            logger.debug("Stream of %s aborted after %d bytes", path, total)
            raise CertStreamError(str(path), _reason(exc)) from exc

    logger.debug("Streamed %d bytes from %s", total, path)
    return total


def read_cert(
    requested: str | os.PathLike[str],
    out: BinaryIO,
    *,
    roots: ConfinementRoots = CONFINEMENT_ROOTS,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Validate ``requested`` and stream the certificate it points at to ``out``."""
    canonical = resolve_cert_path(requested, roots=roots)
    return stream_file(canonical, out, chunk_size=chunk_size)
