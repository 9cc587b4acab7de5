"""Confinement roots for certgate.

The two roots mirror the Let's Encrypt install layout and are fixed per build:

  /etc/letsencrypt/live/     — stable symlinks, one directory per domain
  /etc/letsencrypt/archive/  — the certificate generations they point at

They are deliberately not read from the environment or a config file. The
caller of this tool is untrusted and must not be able to move them.
"""

from __future__ import annotations

import sys

from pydantic import BaseModel, ConfigDict, Field, field_validator

LIVE_ROOT = "/etc/letsencrypt/live/"
ARCHIVE_ROOT = "/etc/letsencrypt/archive/"
# On macOS /etc is a symlink to /private/etc, so resolved paths carry the prefix.
DARWIN_ARCHIVE_ROOT = "/private/etc/letsencrypt/archive/"


class ConfinementRoots(BaseModel):
    """Live and archive directory prefixes, compared as raw strings."""

    model_config = ConfigDict(frozen=True)

    live: str = Field(description="Prefix every requested path must start with")
    archive: str = Field(description="Prefix every resolved path must start with")

    @field_validator("live", "archive")
    @classmethod
    def validate_root_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Root must be absolute: {v}")
        if not v.endswith("/"):
            raise ValueError(f"Root must keep its trailing slash: {v}")
        return v


def roots_for_platform(platform: str) -> ConfinementRoots:
    """Return the roots for a ``sys.platform`` value."""
    if platform == "darwin":
        return ConfinementRoots(live=LIVE_ROOT, archive=DARWIN_ARCHIVE_ROOT)
    return ConfinementRoots(live=LIVE_ROOT, archive=ARCHIVE_ROOT)


CONFINEMENT_ROOTS = roots_for_platform(sys.platform)
