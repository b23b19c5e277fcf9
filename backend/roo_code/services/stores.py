"""
Host capabilities used by the credential resolver and configuration manager.

The resolver only sees the three protocols below; the FastAPI layer wires in
the database-backed stores and a prompt answered from the request, tests wire
in mocks.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from sqlalchemy.orm import Session

from roo_code.core.logging import get_logger
from roo_code.core.security import decrypt_secret_safe, encrypt_secret
from roo_code.core.settings_db import ASSISTANT_CONFIG_TYPE, ensure_assistant_config
from roo_code.models import Settings, StoredSecret

logger = get_logger()


@runtime_checkable
class ConfigurationStore(Protocol):
    """Plain key/value settings, scoped globally."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


@runtime_checkable
class SecretStore(Protocol):
    """Key/value store for secrets, isolated from plain settings."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


@runtime_checkable
class InputPrompt(Protocol):
    """Interactive text input. Returns None when the user cancels."""

    async def __call__(self, label: str, masked: bool = False) -> Optional[str]:
        ...


class SettingsConfigurationStore:
    """ConfigurationStore over the ``assistant-config`` row of the settings table."""

    def __init__(self, db: Session):
        self._db = db

    def _config(self) -> dict:
        record = self._db.query(Settings).filter(Settings.type == ASSISTANT_CONFIG_TYPE).first()
        return dict(record.config or {}) if record else {}

    def get(self, key: str, default: Any = None) -> Any:
        value = self._config().get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self.delete(key)
            return
        record = ensure_assistant_config(self._db)
        data = dict(record.config or {})
        data[key] = value
        # Assign a new dict so SQLAlchemy sees the JSON column change
        record.config = data
        self._db.commit()

    def delete(self, key: str) -> None:
        record = self._db.query(Settings).filter(Settings.type == ASSISTANT_CONFIG_TYPE).first()
        if not record or key not in (record.config or {}):
            return
        data = dict(record.config)
        data.pop(key)
        record.config = data
        self._db.commit()

    def snapshot(self) -> dict:
        """All stored keys and values."""
        return self._config()


class EncryptedSecretStore:
    """SecretStore over the secrets table; values are Fernet-encrypted at rest."""

    def __init__(self, db: Session, password: Optional[str] = None):
        self._db = db
        self._password = password

    def _row(self, key: str) -> Optional[StoredSecret]:
        return self._db.query(StoredSecret).filter(StoredSecret.key == key).first()

    def get(self, key: str) -> Optional[str]:
        row = self._row(key)
        if row is None:
            return None
        value = decrypt_secret_safe(row.value, self._password)
        if value is None:
            logger.warning("Stored secret %s could not be decrypted (encryption key changed?)", key)
        return value

    def set(self, key: str, value: str) -> None:
        encrypted = encrypt_secret(value, self._password)
        row = self._row(key)
        if row is None:
            self._db.add(StoredSecret(key=key, value=encrypted))
        else:
            row.value = encrypted
        self._db.commit()

    def delete(self, key: str) -> None:
        row = self._row(key)
        if row is not None:
            self._db.delete(row)
            self._db.commit()


class StaticInputPrompt:
    """InputPrompt that answers every question with a preset value.

    Used by the HTTP layer: the host sends the key the user typed in the
    ``X-Api-Key`` header; no header means the prompt was cancelled.
    """

    def __init__(self, answer: Optional[str] = None):
        self._answer = answer
        self.labels: List[str] = []

    async def __call__(self, label: str, masked: bool = False) -> Optional[str]:
        self.labels.append(label)
        return self._answer
