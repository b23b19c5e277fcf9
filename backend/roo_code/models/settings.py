"""
Settings model: the plain (non-secret) configuration store.
"""

from sqlalchemy import JSON, Column, Integer, String

from roo_code.core.database import Base
from roo_code.core.datetime_utils import get_now_with_timezone


class Settings(Base):
    """
    Application settings row.

    One row per configuration type (e.g. "assistant-config"); ``config`` holds
    the key/value pairs of that type as JSON.
    """

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(50), nullable=False, unique=True)
    config = Column(JSON, nullable=False)
    created_at = Column(String, default=lambda: get_now_with_timezone().isoformat())
    updated_at = Column(
        String,
        default=lambda: get_now_with_timezone().isoformat(),
        onupdate=lambda: get_now_with_timezone().isoformat(),
    )

    def __repr__(self) -> str:
        return f"<Settings(id={self.id}, type={self.type})>"
