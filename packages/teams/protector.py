"""Credential protection for basic auth configuration.

Turns a plaintext username/password pair into the form that is safe to
persist or serve back out: the password is replaced by a salted bcrypt
hash and the username is carried through unchanged. A pair with either
field empty is treated as "no credential" and encodes to JSON null.

Stored format (exactly these two keys, or ``null``):

    {"basic_auth_username": "...", "basic_auth_password": "$2b$04$..."}
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

import bcrypt
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from packages.teams.config import get_settings
from packages.teams.errors import EncodingError, HashingError

if TYPE_CHECKING:
    from packages.teams.models import BasicAuth

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

# Modular crypt format written by bcrypt: $2b$<cost>$<22 salt + 31 hash chars>
BCRYPT_HASH_RE = re.compile(r"^\$2[abxy]\$(0[4-9]|[12][0-9]|3[01])\$[./A-Za-z0-9]{53}$")


def bcrypt_cost() -> int:
    """Return the configured bcrypt work factor."""
    return get_settings().bcrypt_cost


def is_bcrypt_hash(value: str) -> bool:
    """Check whether a stored password is already a bcrypt hash."""
    return BCRYPT_HASH_RE.match(value) is not None


def hash_password(password: str, cost: int | None = None) -> str:
    """Hash a password with a fresh salt.

    Passwords longer than MAX_PASSWORD_BYTES are truncated to that many
    bytes before hashing, whichever bcrypt release is installed.

    Raises:
        HashingError: If bcrypt fails or the configured cost is invalid
    """
    if cost is None:
        try:
            cost = bcrypt_cost()
        except ValidationError as e:
            logger.error("Invalid bcrypt cost in settings: %s", e)
            raise HashingError(f"Invalid bcrypt cost: {e}") from e

    secret = password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        logger.warning(
            "Password exceeds %d bytes; only the first %d are hashed",
            MAX_PASSWORD_BYTES,
            MAX_PASSWORD_BYTES,
        )
        secret = secret[:MAX_PASSWORD_BYTES]

    try:
        salt = bcrypt.gensalt(rounds=cost)
        hashed = bcrypt.hashpw(secret, salt)
    except (ValueError, TypeError, MemoryError) as e:
        logger.error("bcrypt hashing failed (cost=%s): %s", cost, e)
        raise HashingError(f"Password hashing failed: {e}") from e
    return hashed.decode("utf-8")


def protect_basic_auth(
    auth: BasicAuth | None, cost: int | None = None
) -> BasicAuth | None:
    """Return a BasicAuth holding the hashed password, or None.

    A credential loaded from storage already holds a bcrypt hash and is
    returned as is. The argument is never modified.
    """
    if auth is None or not auth.is_set:
        return None
    if auth.is_protected:
        return auth

    hashed = hash_password(auth.basic_auth_password, cost)
    logger.debug("Protected basic auth credential for user %s", auth.basic_auth_username)
    return auth.model_copy(update={"basic_auth_password": hashed})


def encrypted_json(auth: BasicAuth | None, cost: int | None = None) -> str:
    """Encode a basic auth pair for storage.

    Returns:
        JSON text of the protected credential, or ``"null"``

    Raises:
        HashingError: If hashing fails
        EncodingError: If serialization fails
    """
    protected = protect_basic_auth(auth, cost)
    try:
        return _basic_auth_adapter().dump_json(protected).decode("utf-8")
    except PydanticSerializationError as e:
        logger.error("Failed to encode basic auth credential: %s", e)
        raise EncodingError(f"Credential encoding failed: {e}") from e


@lru_cache(maxsize=1)
def _basic_auth_adapter() -> TypeAdapter:
    from packages.teams.models import BasicAuth

    return TypeAdapter(Optional[BasicAuth])
