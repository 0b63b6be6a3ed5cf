"""
Persistence token generation.

A persistence token is the secret mirrored from a record into its
remember-me cookie. Rotating it invalidates every cookie issued before.
"""

import secrets


def generate_persistence_token() -> str:
    """
    Creates a new random persistence token.

    Returns:
        128 hexadecimal characters, which can never contain the cookie
        delimiter.
    """
    return secrets.token_hex(64)
