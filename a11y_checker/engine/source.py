"""Locate the axe-core script: local file, download cache, or CDN."""
from __future__ import annotations

import logging
from pathlib import Path

import requests

from a11y_checker.config.settings import EngineSettings, settings
from a11y_checker.errors import EngineUnavailable

logger = logging.getLogger(__name__)


def cached_axe_path(engine: EngineSettings) -> Path:
    return Path(engine.cache_dir) / f"axe-{engine.axe_version}.min.js"


def _read_source(path: Path) -> str:
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EngineUnavailable(f"Cannot read axe-core script at {path}: {exc}") from exc
    if not source.strip():
        raise EngineUnavailable(f"axe-core script at {path} is empty")
    return source


def download_axe(engine: EngineSettings) -> str:
    """Download the pinned axe-core build and store it in the cache dir.

    Raises:
        EngineUnavailable: If the CDN request fails
    """
    url = engine.cdn_url
    logger.info("Downloading axe-core %s from %s", engine.axe_version, url)
    try:
        response = requests.get(url, timeout=engine.download_timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise EngineUnavailable(f"Unable to download axe-core from {url}: {exc}") from exc

    source = response.text
    if not source.strip():
        raise EngineUnavailable(f"Empty axe-core script downloaded from {url}")

    path = cached_axe_path(engine)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    except OSError as exc:
        # The script is still usable for this run
        logger.warning("Could not cache axe-core at %s: %s", path, exc)
    return source


def load_axe_source(engine: EngineSettings | None = None) -> str:
    """Return the axe-core script source.

    Lookup order:
    - ``engine.source_path`` when configured (never falls back to the CDN)
    - the cached download for ``engine.axe_version``
    - a fresh download from the CDN

    Raises:
        EngineUnavailable: If no usable script can be found
    """
    engine = engine or settings.engine

    if engine.source_path:
        return _read_source(Path(engine.source_path))

    cached = cached_axe_path(engine)
    if cached.exists() and cached.stat().st_size > 0:
        logger.debug("Using cached axe-core at %s", cached)
        return _read_source(cached)

    return download_axe(engine)
