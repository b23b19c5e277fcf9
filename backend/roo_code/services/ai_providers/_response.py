"""
Internal helpers for walking provider response bodies.
Do not import from outside ai_providers package.
"""

from typing import Any, Optional, Sequence, Union

from roo_code.services.ai_providers.errors import MalformedResponseError

PathPart = Union[str, int]


def format_path(path: Sequence[PathPart]) -> str:
    """Render a path like ("choices", 0, "message") as choices[0].message."""
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else part
    return rendered


def extract_text(data: Any, path: Sequence[PathPart], provider_name: str) -> str:
    """
    Follow ``path`` through nested dicts/lists and return a non-empty string.

    Raises:
        MalformedResponseError: If any step is missing or the leaf is not non-empty text.
    """
    current = data
    for part in path:
        if isinstance(part, int):
            if not isinstance(current, list) or len(current) <= part:
                raise MalformedResponseError(provider_name, format_path(path))
        elif not isinstance(current, dict) or part not in current:
            raise MalformedResponseError(provider_name, format_path(path))
        current = current[part]

    if not isinstance(current, str):
        raise MalformedResponseError(provider_name, format_path(path), "not text")
    if not current.strip():
        raise MalformedResponseError(provider_name, format_path(path), "empty text")
    return current


def optional_int(container: Any, key: str) -> Optional[int]:
    """Return container[key] when it is an int, else None."""
    if not isinstance(container, dict):
        return None
    value = container.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def reported_model(data: Any, requested: str, key: str = "model") -> str:
    """Model id echoed by the provider, falling back to the requested one."""
    model = data.get(key) if isinstance(data, dict) else None
    return model if isinstance(model, str) and model else requested
