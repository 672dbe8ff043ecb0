"""Webhook signature verification."""

from smartcar_async.webhooks.signature import hash_challenge, verify_payload

__all__ = ["hash_challenge", "verify_payload"]
