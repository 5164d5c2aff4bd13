"""
Password hashing helpers.

Passwords are hashed with PBKDF2‑HMAC using SHA‑256 and a random
16‑byte salt per password.  The stored string has the form
``<iterations>$<salt hex>$<hash hex>`` so that the work factor can be
raised later without invalidating existing records: verification
always uses the iteration count embedded in the stored value.
"""

import hashlib
import hmac
import os
from typing import Optional

from .config import settings

_SEPARATOR = "$"


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : Optional[int]
        PBKDF2 work factor.  Defaults to
        ``settings.password_hash_iterations``.

    Returns
    -------
    str
        Iteration count, salt and hash joined with ``$``.
    """
    rounds = iterations or settings.password_hash_iterations
    salt = os.urandom(16)
    dk = _derive(password, salt, rounds)
    return _SEPARATOR.join((str(rounds), salt.hex(), dk.hex()))


def verify_password(plain_password: Optional[str], hashed_password: Optional[str]) -> bool:
    """Verify a plain password against a stored hash string.

    Recomputes the PBKDF2 digest with the stored salt and iteration
    count and compares it in constant time.  Missing or malformed
    inputs never match.
    """
    if not plain_password or not isinstance(hashed_password, str) or not hashed_password:
        return False
    try:
        rounds_text, salt_hex, hash_hex = hashed_password.split(_SEPARATOR, 2)
        rounds = int(rounds_text)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        dk = _derive(plain_password, salt, rounds)
    except (ValueError, OverflowError):
        # Hand-edited values, e.g. a zero or out-of-range iteration count.
        return False
    return hmac.compare_digest(dk, stored_hash)
