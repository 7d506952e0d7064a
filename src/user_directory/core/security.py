"""Bearer token utilities."""

import base64
import secrets

BEARER_PREFIX = "bearer "


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded token
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header value.

    The scheme is matched case-insensitively and the token is trimmed. Returns
    ``None`` when the header is missing, uses another scheme, or carries no
    token.
    """
    if not authorization or not authorization.strip():
        return None
    if not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def normalize_tokens(tokens: list[str] | tuple[str, ...]) -> frozenset[str]:
    """Trim configured tokens and drop blank entries."""
    return frozenset(token.strip() for token in tokens if token and token.strip())
