from __future__ import annotations

import re

from passlib.context import CryptContext


pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

PIN_PATTERN = re.compile(r"^\d{4}$")


def is_valid_pin(pin: str) -> bool:
    return bool(PIN_PATTERN.match(pin or ""))


def hash_pin(pin: str) -> str:
    """Store an argon2 hash of the participant's 4-digit PIN."""
    return pwd_context.hash(pin)


def verify_pin(pin: str, stored_hash: str) -> bool:
    return pwd_context.verify(pin, stored_hash)
