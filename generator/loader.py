"""Fetch, load and save the BitBadges OpenAPI spec.

The upstream document is YAML published from the bitbadgesjs repo; every
fetch is snapshotted to spec/openapi.yaml so generation can be repeated
offline with ``--spec``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import httpx
import yaml

SPEC_URL = os.environ.get(
    "BITBADGES_SPEC_URL",
    "https://raw.githubusercontent.com/BitBadges/bitbadgesjs/main/"
    "packages/bitbadgesjs-sdk/openapi/combined_processed.yaml",
)
SPEC_PATH = Path(__file__).parent.parent / "spec" / "openapi.yaml"

FETCH_TIMEOUT = 30.0


def fetch_spec(url: str = SPEC_URL) -> dict[str, Any]:
    """Download and parse the OpenAPI spec."""
    response = httpx.get(url, timeout=FETCH_TIMEOUT, follow_redirects=True)
    response.raise_for_status()
    return parse_spec(response.text)


def parse_spec(text: str) -> dict[str, Any]:
    """Parse a YAML (or JSON) OpenAPI document."""
    spec = yaml.safe_load(text)
    if not isinstance(spec, dict):
        raise ValueError("OpenAPI document must be a mapping")
    return spec


def load_spec(path: Path | None = None) -> dict[str, Any]:
    """Load the OpenAPI spec from disk."""
    spec_file = path or SPEC_PATH
    with open(spec_file, encoding="utf-8") as f:
        return parse_spec(f.read())


def save_spec(spec: dict[str, Any], path: Path | None = None) -> Path:
    """Write a local YAML snapshot of the OpenAPI document."""
    spec_file = path or SPEC_PATH
    spec_file.parent.mkdir(parents=True, exist_ok=True)
    with open(spec_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(spec, f, sort_keys=False, allow_unicode=True)
    return spec_file


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the paths object."""
    return spec.get("paths") or {}


def get_version(spec: dict[str, Any]) -> str:
    """Document version from info.version."""
    return str((spec.get("info") or {}).get("version", "unknown"))
