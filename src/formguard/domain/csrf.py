"""
CSRF token primitives.

A token is an HMAC of the form's identity, keyed with a secret, so the same
form rendered and bound in two requests yields the same token without
storing it anywhere.
"""

import hashlib
import hmac
import platform


def default_csrf_secret() -> str:
    """Secret derived from this installation and host.

    Stable across processes on the same host. Production setups should
    configure an explicit secret.
    """
    seed = f"{__file__}:{platform.node()}".encode()
    return hashlib.sha256(seed).hexdigest()


def generate_csrf_token(secret: str, intention: str, context: str = "") -> str:
    """Generate a token for a form.

    Args:
        secret: Per-application (or per-form) secret
        intention: What the token protects, usually the form class and name
        context: Per-user value such as a session id

    Returns:
        64 hex characters
    """
    message = f"{intention}:{context}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def is_csrf_token_valid(
    token: object, secret: str, intention: str, context: str = ""
) -> bool:
    if not isinstance(token, str):
        return False
    expected = generate_csrf_token(secret, intention, context)
    return hmac.compare_digest(token.encode(), expected.encode())
