"""
Fetch available model ids from AI providers.

Only OpenRouter (all ids) and OpenAI (ids containing "gpt") expose a models
listing here; other providers yield an empty list without a network call.
Failures are logged and degrade to an empty list.
"""

from typing import List, Optional, Union

from roo_code.core.logging import get_logger
from roo_code.services.ai_providers import (
    AssistantError,
    ProviderId,
    RequestDispatcher,
    UpstreamError,
)

logger = get_logger()


def _http_error_message(status_code: int) -> str:
    """Return a short explanation for HTTP errors on the models endpoint."""
    if status_code == 401:
        return "invalid API key or unauthorized"
    if status_code == 403:
        return "access forbidden"
    if status_code == 429:
        return "rate limited"
    if status_code >= 500:
        return "provider server error"
    return f"request failed (HTTP {status_code})"


async def fetch_models(
    provider: Union[str, ProviderId],
    api_key: Optional[str],
    dispatcher: Optional[RequestDispatcher] = None,
) -> List[str]:
    """
    Fetch model ids for a provider. Never raises.

    Args:
        provider: Provider name or id.
        api_key: Credential; without one the result is empty.
        dispatcher: Optional dispatcher (tests inject one with a mock transport).

    Returns:
        Model ids, possibly empty.
    """
    if isinstance(provider, ProviderId):
        provider = provider.value
    if not api_key:
        logger.debug("fetch_models %s: no API key", provider)
        return []

    dispatcher = dispatcher or RequestDispatcher()
    try:
        models = await dispatcher.list_models(provider, api_key)
    except UpstreamError as e:
        logger.warning(
            "fetch_models %s HTTP error: %s (%s)", provider, e.status_code, _http_error_message(e.status_code)
        )
        return []
    except AssistantError as e:
        logger.warning("fetch_models %s failed: %s", provider, e)
        return []
    except Exception as e:
        logger.exception("fetch_models %s failed: %s", provider, e)
        return []

    logger.debug("fetch_models %s: %d models", provider, len(models))
    return models
