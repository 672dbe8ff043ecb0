"""Tests for smartcar_async.models.permission — Permission and ScopeBuilder."""

from __future__ import annotations

import pytest

from smartcar_async.models.permission import Permission, ScopeBuilder


class TestQueryValue:
    def test_ordered_space_joined(self) -> None:
        scope = (
            ScopeBuilder()
            .add_permission(Permission.READ_ENGINE_OIL)
            .add_permission(Permission.READ_FUEL)
            .add_permission(Permission.READ_VIN)
        )
        assert scope.query_value == "read_engine_oil read_fuel read_vin"

    def test_empty_scope_renders_empty_string(self) -> None:
        assert ScopeBuilder().query_value == ""

    def test_no_leading_or_trailing_space(self) -> None:
        value = ScopeBuilder.with_all_permissions().query_value
        assert value == value.strip()
        assert "  " not in value

    def test_str_matches_query_value(self) -> None:
        scope = ScopeBuilder().add_permission(Permission.READ_ODOMETER)
        assert str(scope) == "read_odometer"


class TestDuplicates:
    def test_adding_twice_is_noop(self) -> None:
        once = ScopeBuilder().add_permission(Permission.READ_VIN)
        twice = once.add_permission(Permission.READ_VIN)
        assert twice.query_value == once.query_value
        assert twice == once

    def test_duplicate_keeps_first_position(self) -> None:
        scope = ScopeBuilder().add_permissions(
            [Permission.READ_VIN, Permission.READ_FUEL, Permission.READ_VIN]
        )
        assert scope.query_value == "read_vin read_fuel"


class TestImmutability:
    def test_add_returns_new_builder(self) -> None:
        base = ScopeBuilder()
        extended = base.add_permission(Permission.READ_LOCATION)
        assert base.permissions == ()
        assert extended.permissions == (Permission.READ_LOCATION,)


class TestAllPermissions:
    def test_contains_every_permission_once(self) -> None:
        scope = ScopeBuilder.with_all_permissions()
        assert scope.permissions == tuple(Permission)
        assert len(set(scope.query_value.split(" "))) == len(Permission)

    def test_declaration_order(self) -> None:
        tokens = ScopeBuilder.with_all_permissions().query_value.split(" ")
        assert tokens[:3] == ["read_engine_oil", "read_battery", "read_charge"]


class TestPermissionMapping:
    def test_round_trip_from_token(self) -> None:
        for permission in Permission:
            assert Permission(permission.value) is permission

    def test_unknown_token_rejected(self) -> None:
        with pytest.raises(ValueError):
            Permission("read_everything")
