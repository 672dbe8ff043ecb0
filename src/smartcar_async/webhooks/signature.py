"""HMAC-SHA256 helpers for Smartcar webhooks.

Smartcar signs every webhook payload with the application management token
(AMT) and sends the hex digest in the ``SC-Signature`` header.  The same
construction answers the verification challenge sent when a webhook is
registered.
"""

from __future__ import annotations

import hashlib
import hmac

from smartcar_async.api.errors import InvalidKeyLengthError


def hash_challenge(secret: str, challenge: str) -> str:
    """Return lowercase hex ``HMAC-SHA256(key=secret, msg=challenge)``."""
    if not secret:
        raise InvalidKeyLengthError("Webhook secret must not be empty")
    return hmac.new(secret.encode(), challenge.encode(), hashlib.sha256).hexdigest()


def verify_payload(secret: str, signature: str, body: str) -> bool:
    """Return True if *signature* is the HMAC of *body* under *secret*.

    The comparison is constant-time.
    """
    expected = hash_challenge(secret, body)
    return hmac.compare_digest(expected.encode(), signature.encode())
