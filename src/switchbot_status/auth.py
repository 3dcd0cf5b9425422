"""
Request signing for the SwitchBot API v1.1.

Every request carries the raw token, a millisecond timestamp, a random nonce
and an HMAC-SHA256 signature over token + timestamp + nonce keyed with the
secret.
"""

import base64
import hashlib
import hmac
import time
import uuid
from typing import Dict, Optional


def sign(token: str, secret: str, timestamp: int, nonce: str) -> str:
    """
    Compute the base64 request signature

    Args:
        token: SwitchBot API token
        secret: SwitchBot API secret
        timestamp: Milliseconds since the Unix epoch
        nonce: Per-request unique value

    Returns:
        Standard base64 encoding of the HMAC-SHA256 digest
    """
    string_to_sign = f"{token}{timestamp}{nonce}"
    digest = hmac.new(
        secret.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def build_headers(token: str, secret: str,
                  timestamp: Optional[int] = None,
                  nonce: Optional[str] = None) -> Dict[str, str]:
    """
    Build the authentication headers for a single request

    Args:
        token: SwitchBot API token
        secret: SwitchBot API secret
        timestamp: Milliseconds since the epoch (defaults to now)
        nonce: Nonce to sign with (defaults to a fresh UUID4)

    Returns:
        Headers dict with token, content type, charset, timestamp, signature and nonce

    Note:
        Headers must be rebuilt for every request, never reused.
    """
    if nonce is None:
        nonce = str(uuid.uuid4())
    if timestamp is None:
        timestamp = time.time_ns() // 1_000_000

    return {
        "Authorization": token,
        "Content-Type": "application/json",
        "charset": "utf-8",
        "t": str(timestamp),
        "sign": sign(token, secret, timestamp, nonce),
        "nonce": nonce,
    }
