"""
Encryption helpers for secrets kept in the local database.
"""

import base64
import os
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

# Salt for key derivation; the password itself comes from ROO_CODE_ENCRYPTION_KEY
DEFAULT_SALT = b"roo_code_secret_store_v1"


def get_encryption_key(password: Optional[str] = None) -> bytes:
    """
    Derive a Fernet key from a password or the ROO_CODE_ENCRYPTION_KEY variable.

    Args:
        password: Optional password to derive key from.

    Returns:
        URL-safe base64-encoded 32-byte key.
    """
    if password is None:
        password = os.environ.get("ROO_CODE_ENCRYPTION_KEY", "default_key_for_local_use")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=DEFAULT_SALT,
        iterations=480000,
    )
    return base64.urlsafe_b64encode(kdf.derive(password.encode()))


def encrypt_secret(secret: str, password: Optional[str] = None) -> str:
    """
    Encrypt a secret (API key) for storage.

    Returns:
        Encrypted value as a base64-encoded string.
    """
    fernet = Fernet(get_encryption_key(password))
    encrypted = fernet.encrypt(secret.encode())
    return base64.urlsafe_b64encode(encrypted).decode()


def decrypt_secret(encrypted: str, password: Optional[str] = None) -> str:
    """
    Decrypt a value produced by encrypt_secret.

    Raises:
        cryptography.fernet.InvalidToken: If the value was encrypted with another key.
    """
    fernet = Fernet(get_encryption_key(password))
    encrypted_bytes = base64.urlsafe_b64decode(encrypted.encode())
    return fernet.decrypt(encrypted_bytes).decode()


def decrypt_secret_safe(encrypted: Optional[str], password: Optional[str] = None) -> Optional[str]:
    """Decrypt a stored secret; returns None when missing or undecryptable."""
    if not encrypted:
        return None
    try:
        return decrypt_secret(encrypted, password)
    except (InvalidToken, ValueError):
        return None
