"""Shared fixtures: a throwaway Let's Encrypt tree under tmp_path."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from certgate.config import ConfinementRoots

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def le_dir(tmp_path: Path) -> Path:
    # Resolve so that a symlinked tmp dir (macOS /var) does not skew prefixes
    base = tmp_path.resolve() / "letsencrypt"
    (base / "live").mkdir(parents=True)
    (base / "archive").mkdir()
    return base


@pytest.fixture()
def roots(le_dir: Path) -> ConfinementRoots:
    return ConfinementRoots(live=f"{le_dir}/live/", archive=f"{le_dir}/archive/")


@pytest.fixture()
def archive_cert(le_dir: Path) -> Callable[..., Path]:
    """Write ``archive/<domain>/<name>`` and return its path."""

    def _make(content: bytes, domain: str = "example.com", name: str = "cert1.pem") -> Path:
        target = le_dir / "archive" / domain / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return target

    return _make


@pytest.fixture()
def live_link(le_dir: Path) -> Callable[..., str]:
    """Create ``live/<domain>/cert.pem`` as a symlink to ``target``."""

    def _make(target: Path | str, domain: str = "example.com") -> str:
        link = le_dir / "live" / domain / "cert.pem"
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, link)
        return str(link)

    return _make
