"""Load the permission catalog from a static JSON file."""

import json
import logging
from pathlib import Path

from wikiguard.domain.entities import Permission
from wikiguard.domain.exceptions import ValidationError
from wikiguard.domain.permission_registry import DEFAULT_PERMISSIONS, PermissionRegistry
from wikiguard.domain.value_objects import PermissionAction

logger = logging.getLogger(__name__)

_FIELDS = ("module", "resource", "action", "description")


def parse_catalog(entries: object) -> list[Permission]:
    """Turn a decoded JSON list of permission objects into Permission records.

    Raises ValidationError on the first malformed entry.
    """
    if not isinstance(entries, list):
        raise ValidationError("Permission catalog must be a JSON list")

    permissions: list[Permission] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValidationError(f"Catalog entry {i} must be an object")
        missing = [f for f in _FIELDS if f not in entry]
        if missing:
            raise ValidationError(f"Catalog entry {i} is missing {', '.join(missing)}")
        module, resource = entry["module"], entry["resource"]
        for key, value in (("module", module), ("resource", resource)):
            if not isinstance(value, str) or not value or ":" in value:
                raise ValidationError(f"Catalog entry {i} has invalid {key}: {value!r}")
        try:
            action = PermissionAction(entry["action"])
        except ValueError:
            raise ValidationError(
                f"Catalog entry {i} has unknown action: {entry['action']!r}"
            ) from None
        description = entry["description"]
        if not isinstance(description, str):
            raise ValidationError(f"Catalog entry {i} description must be a string")
        permissions.append(Permission(module, resource, action, description))
    return permissions


def load_catalog(path: str | Path) -> list[Permission]:
    """Read and parse a catalog file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Permission catalog {path} is not valid JSON: {e}") from e
    permissions = parse_catalog(data)
    logger.info("Loaded %d permissions from %s", len(permissions), path)
    return permissions


def build_registry(catalog_path: str | Path | None = None) -> PermissionRegistry:
    """Registry from ``catalog_path`` if given, else the built-in catalog."""
    if catalog_path:
        return PermissionRegistry(load_catalog(catalog_path))
    return PermissionRegistry(DEFAULT_PERMISSIONS)
