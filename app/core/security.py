from werkzeug.security import check_password_hash, generate_password_hash

MIN_PASSWORD_LENGTH = 6

def hash_password(password: str) -> str:
    """Hash a plain password with werkzeug's default key-derivation method."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return generate_password_hash(password)

def verify_password(password: str, hashed: str) -> bool:
    """Check a plain password against a value produced by hash_password."""
    if not hashed:
        return False
    return check_password_hash(hashed, password)
