from __future__ import annotations

from fastapi import Header


def get_current_user_id(x_user_id: str | None = Header(None, alias="X-User-Id")) -> str | None:
    """User id resolved upstream by the identity provider. None when unauthenticated."""
    if x_user_id is None:
        return None
    return x_user_id.strip() or None
