"""Password hashing for stored users."""
from passlib.hash import pbkdf2_sha256


def hash_password(password: str) -> str:
    """Return a salted hash suitable for the usuario.senha_hash column."""
    return pbkdf2_sha256.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """True if password matches password_hash."""
    return pbkdf2_sha256.verify(password, password_hash)
