"""
API key authentication.

When ``settings.api_key`` is non-empty, requests must present the same
value in the ``X-API-Key`` header.  An empty setting disables the check
entirely so the demo endpoints stay open by default.  The comparison
is constant-time and the key itself is never logged.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def require_api_key(
    request: Request,
    api_key: Optional[str] = Depends(api_key_header),
) -> None:
    """Dependency that rejects requests without the configured API key."""
    expected = request.app.state.settings.api_key
    if not expected:
        return
    if api_key is None or not hmac.compare_digest(api_key.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejected request to %s: missing or invalid API key", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "APIKey"},
        )
