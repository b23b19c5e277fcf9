"""
Database-backed settings.

User-chosen assistant configuration (provider, model, generation parameters,
feature flags and plain-text API keys) is stored in the Settings table under
type=assistant-config. Defaults are not written here; they come from
config.yaml (roo_code.core.config.AssistantConfig) and are applied by
roo_code.services.configuration.ConfigurationManager.
"""

from sqlalchemy.orm import Session

from roo_code.models import Settings

ASSISTANT_CONFIG_TYPE = "assistant-config"


def ensure_assistant_config(db: Session) -> Settings:
    """Ensure the assistant settings row exists (type=assistant-config), empty by default."""
    record = db.query(Settings).filter(Settings.type == ASSISTANT_CONFIG_TYPE).first()
    if not record:
        record = Settings(type=ASSISTANT_CONFIG_TYPE, config={})
        db.add(record)
        db.commit()
        db.refresh(record)
    return record
