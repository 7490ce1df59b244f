"""Ed25519 verification of inbound interaction requests."""

from __future__ import annotations

import logging
import os

from fastapi import HTTPException, Request
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def get_public_key() -> str:
    public_key = os.environ.get("DISCORD_PUBLIC_KEY", "").strip()
    if not public_key:
        raise HTTPException(
            status_code=503,
            detail="Discord public key not configured (DISCORD_PUBLIC_KEY)",
        )
    return public_key


def verify_signature(body: bytes, signature: str | None, timestamp: str | None, public_key: str) -> bool:
    """True when ``signature`` signs ``timestamp + body`` under the hex ``public_key``."""
    if not signature or not timestamp:
        return False
    try:
        VerifyKey(bytes.fromhex(public_key)).verify(timestamp.encode() + body, bytes.fromhex(signature))
    except (BadSignatureError, ValueError):
        return False
    return True


async def verify_discord_request(request: Request) -> bytes:
    """FastAPI dependency: returns the raw body of a correctly signed request, else 401."""
    public_key = get_public_key()
    body = await request.body()
    if not verify_signature(
        body,
        request.headers.get(SIGNATURE_HEADER),
        request.headers.get(TIMESTAMP_HEADER),
        public_key,
    ):
        logger.warning("[signature] Rejected request with missing or bad signature")
        raise HTTPException(status_code=401, detail="Bad request signature")
    return body
