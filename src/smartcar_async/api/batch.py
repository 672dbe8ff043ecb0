"""Batch request envelope."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_batch_request_body(paths: Sequence[str]) -> dict[str, Any]:
    """Pack relative endpoint *paths* into a batch body, preserving order.

    ``["/odometer", "/vin"]`` → ``{"requests": [{"path": "/odometer"}, {"path": "/vin"}]}``
    """
    return {"requests": [{"path": path} for path in paths]}
