"""
PURPOSE: Release metadata for the Strategic Update Relay.

version.json ships inside the strategy_relay package (declared as package
data in pyproject.toml), so it resolves the same way from a source checkout,
an editable install or a wheel.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

VERSION_RESOURCE = "version.json"


@lru_cache(maxsize=1)
def get_version() -> Dict[str, Any]:
    """
    PURPOSE: Load the release metadata bundled with the package.

    CALLED BY: create_app() for the OpenAPI title/version and the root endpoint.

    Returns:
        Dict[str, Any]: version, codename, updated_at and changelog entries.

    Raises:
        FileNotFoundError: If the package was built without version.json.
        json.JSONDecodeError: If version.json is invalid JSON.
    """
    raw = resources.files("strategy_relay").joinpath(VERSION_RESOURCE).read_text(encoding="utf-8")
    return json.loads(raw)
