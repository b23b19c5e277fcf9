"""
Secret model: the secure store for provider API keys.
"""

from sqlalchemy import Column, Integer, String, Text

from roo_code.core.database import Base
from roo_code.core.datetime_utils import get_now_with_timezone


class StoredSecret(Base):
    """An encrypted secret addressed by key (e.g. ``openai.apiKey``)."""

    __tablename__ = "secrets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(100), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=False)  # Fernet token, see roo_code.core.security
    updated_at = Column(
        String,
        default=lambda: get_now_with_timezone().isoformat(),
        onupdate=lambda: get_now_with_timezone().isoformat(),
    )

    def __repr__(self) -> str:
        # Never include the value
        return f"<StoredSecret(id={self.id}, key={self.key})>"
