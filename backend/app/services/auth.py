"""
Password hashing for the user store (bcrypt).
Passwords longer than bcrypt's 72-byte limit are rejected by the request schema, not truncated here.
"""
import bcrypt


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password is required")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("ascii")


def verify_password(password: str, password_hash: str | None) -> bool:
    """False for a wrong password or a stored hash bcrypt cannot read."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))
    except ValueError:
        return False
