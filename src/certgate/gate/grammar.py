"""String checks on certificate paths. No filesystem access."""

from __future__ import annotations

import re

LIVE_CERT_FILENAME = "cert.pem"

# cert.pem, cert1.pem, cert2.pem, ...; ASCII digits only
_ARCHIVE_CERT_RE = re.compile(r"cert[0-9]*\.pem")


def has_prefix(path: str, root: str) -> bool:
    """Exact, case-sensitive prefix test. Does not normalize ``..`` or ``//``."""
    return path.startswith(root)


def final_component(path: str) -> str:
    """Text after the last ``/``; empty when the path ends with a slash."""
    return path.rpartition("/")[2]


def is_live_cert_filename(name: str) -> bool:
    return name == LIVE_CERT_FILENAME


def is_archive_cert_filename(name: str) -> bool:
    """True for ``cert.pem`` and ``cert<digits>.pem``, nothing else."""
    return _ARCHIVE_CERT_RE.fullmatch(name) is not None
