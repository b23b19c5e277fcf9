"""
Core module initialization.
"""

from roo_code.core.config import get_config, load_config
from roo_code.core.database import Base, get_db, init_db
from roo_code.core.logging import get_logger, setup_logging
from roo_code.core.security import decrypt_secret, encrypt_secret

__all__ = [
    "get_config",
    "load_config",
    "get_db",
    "init_db",
    "Base",
    "get_logger",
    "setup_logging",
    "encrypt_secret",
    "decrypt_secret",
]
