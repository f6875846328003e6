"""Password hashing with bcrypt.

bcrypt salts every hash and embeds the cost factor in it. Hashing and
checking are CPU bound, so both run in a worker thread. Passwords are
truncated to 72 bytes, bcrypt's input limit.
"""

import asyncio

import bcrypt

DEFAULT_ROUNDS = 10


def _hash(password: str, rounds: int) -> str:
    pw_bytes = password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _check(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


async def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with a fresh salt."""
    return await asyncio.to_thread(_hash, password, rounds)


async def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored hash. Malformed hashes never match."""
    return await asyncio.to_thread(_check, password, password_hash)
