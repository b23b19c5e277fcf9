"""
Models package initialization.
"""

from roo_code.models.secret import StoredSecret
from roo_code.models.settings import Settings

__all__ = [
    "Settings",
    "StoredSecret",
]
