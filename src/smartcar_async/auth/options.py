"""Options for the Smartcar Connect authorization URL."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING

from smartcar_async._internal.query import format_flag_query

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclasses.dataclass(frozen=True)
class AuthUrlOptions:
    """Immutable options for :meth:`AuthClient.get_auth_url`.

    Every ``set_*`` method returns a new instance::

        options = AuthUrlOptions().set_force_prompt(True).set_state("csrf-token")

    https://smartcar.com/docs/api/#smartcar-connect
    """

    force_prompt: bool | None = None
    state: str | None = None
    make_bypass: str | None = None
    single_select: bool | None = None
    single_select_by_vin: str | None = None
    flags: Mapping[str, str] | None = None

    def set_force_prompt(self, enabled: bool) -> AuthUrlOptions:
        """Always show the approval dialog (``True``) or only when not yet approved."""
        return dataclasses.replace(self, force_prompt=enabled)

    def set_state(self, state: str) -> AuthUrlOptions:
        """Value echoed back on the redirect URI, typically a CSRF token."""
        return dataclasses.replace(self, state=state)

    def set_make_bypass(self, make: str) -> AuthUrlOptions:
        """Skip the brand selection screen for *make* (e.g. ``"TESLA"``)."""
        return dataclasses.replace(self, make_bypass=make)

    def set_single_select(self, enabled: bool) -> AuthUrlOptions:
        return dataclasses.replace(self, single_select=enabled)

    def set_single_select_by_vin(self, vin: str) -> AuthUrlOptions:
        """Only allow the user to select the vehicle with *vin*."""
        return dataclasses.replace(self, single_select_by_vin=vin)

    def set_flags(self, flags: Mapping[str, str]) -> AuthUrlOptions:
        """Early-access feature flags, rendered as ``key:value`` pairs."""
        return dataclasses.replace(self, flags=MappingProxyType(dict(flags)))

    def to_query(self) -> list[tuple[str, str]]:
        """Return the options as ordered query pairs."""
        query: list[tuple[str, str]] = []
        if self.force_prompt:
            query.append(("approval_prompt", "force"))
        if self.state is not None:
            query.append(("state", self.state))
        if self.make_bypass is not None:
            query.append(("make", self.make_bypass))
        if self.flags:
            query.append(("flag", format_flag_query(self.flags)))
        if self.single_select_by_vin is not None:
            query.append(("single_select_vin", self.single_select_by_vin))
            query.append(("single_select", "true"))
        elif self.single_select is not None:
            query.append(("single_select", "true" if self.single_select else "false"))
        return query
