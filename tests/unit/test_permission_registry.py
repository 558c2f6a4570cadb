"""Unit tests for PermissionRegistry."""

import pytest

from wikiguard.domain.entities import Permission
from wikiguard.domain.exceptions import ValidationError
from wikiguard.domain.permission_registry import (
    DEFAULT_PERMISSIONS,
    PermissionRegistry,
    parse_identifier,
)
from wikiguard.domain.value_objects import PermissionAction


def test_identifiers_are_unique() -> None:
    registry = PermissionRegistry()
    ids = registry.list_identifiers()
    assert len(ids) == len(set(ids)) == len(DEFAULT_PERMISSIONS)


def test_every_listed_identifier_is_valid() -> None:
    registry = PermissionRegistry()
    for ident in registry.list_identifiers():
        assert registry.is_valid_identifier(ident)
        assert ident in registry


def test_identifier_of_matches_property() -> None:
    for p in DEFAULT_PERMISSIONS:
        assert PermissionRegistry.identifier_of(p) == p.identifier
        assert parse_identifier(p.identifier) == (p.module, p.resource, p.action.value)


def test_builtin_catalog_contents() -> None:
    registry = PermissionRegistry()
    ids = set(registry.list_identifiers())
    assert {
        "wiki:page:create",
        "wiki:page:read",
        "wiki:page:update",
        "wiki:page:delete",
        "wiki:page:move",
        "system:permissions:update",
        "system:groups:create",
        "assets:asset:read",
    } <= ids
    assert len(registry) == 21


@pytest.mark.parametrize(
    "identifier",
    [
        "",
        "wiki",
        "wiki:page",
        "wiki:page:read:extra",
        "wiki::read",
        ":page:read",
        "wiki:page:",
        "wiki:page:fly",
        "WIKI:PAGE:READ",
        "nosuch:page:read",
        None,
        42,
        ("wiki", "page", "read"),
    ],
)
def test_malformed_or_unknown_identifiers_are_invalid(identifier: object) -> None:
    registry = PermissionRegistry()
    assert registry.is_valid_identifier(identifier) is False
    assert registry.get(identifier) is None  # type: ignore[arg-type]


def test_parse_identifier_rejects_bad_shapes() -> None:
    assert parse_identifier("a:b") is None
    assert parse_identifier("a::c") is None
    assert parse_identifier(None) is None
    assert parse_identifier("a:b:c") == ("a", "b", "c")


def test_get_returns_catalog_entry() -> None:
    registry = PermissionRegistry()
    p = registry.get("wiki:page:move")
    assert p is not None
    assert p.action is PermissionAction.MOVE
    assert p.description == "Move or rename wiki pages"


def test_list_permissions_preserves_declaration_order() -> None:
    registry = PermissionRegistry()
    assert registry.list_permissions() == list(DEFAULT_PERMISSIONS)


def test_introspection() -> None:
    registry = PermissionRegistry()
    assert registry.available_modules() == ["wiki", "system", "assets"]
    assert registry.available_resources() == [
        "page",
        "settings",
        "permissions",
        "users",
        "groups",
        "asset",
    ]
    assert set(registry.available_actions()) == set(PermissionAction)


def test_duplicate_identifier_rejected() -> None:
    p = Permission("wiki", "page", PermissionAction.READ, "Read")
    with pytest.raises(ValidationError, match="wiki:page:read"):
        PermissionRegistry([p, Permission("wiki", "page", PermissionAction.READ, "Again")])


def test_custom_catalog() -> None:
    registry = PermissionRegistry(
        [Permission("forum", "thread", PermissionAction.CREATE, "Start threads")]
    )
    assert registry.list_identifiers() == ["forum:thread:create"]
    assert not registry.is_valid_identifier("wiki:page:read")
