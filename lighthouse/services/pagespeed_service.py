# lighthouse/services/pagespeed_service.py
import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from lighthouse.core.config import settings
from lighthouse.models import AnalysisRequest, PageSpeedResponse

logger = logging.getLogger(__name__)

# httpx logs each request URL at INFO, and the URL carries the API key.
logging.getLogger("httpx").setLevel(logging.WARNING)

async def get_pagespeed_insights(
    request: AnalysisRequest,
    api_key: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[PageSpeedResponse]:
    """
    Asynchronously calls the Google PageSpeed Insights API, once.

    The whole call is bounded by ``request.timeout_ms``. Every failure (timeout,
    network error, non-2xx status, undecodable body) is logged and collapses to None.

    Args:
        request: The validated analysis parameters.
        api_key: PageSpeed API key. Defaults to the configured key; may be empty.
        client: An optional shared client. A short-lived one is used otherwise.

    Returns:
        The parsed response, or None when no data could be retrieved.
    """
    params = {
        "url": request.url,
        "strategy": request.strategy,
        "category": request.category,
        "key": settings.PAGESPEED_API_KEY if api_key is None else api_key,
    }
    timeout = request.timeout_ms / 1000

    logger.debug("GET %s strategy=%s category=%s url=%s",
                 settings.PAGESPEED_API_ENDPOINT, request.strategy, request.category, request.url)

    try:
        if client is not None:
            response = await asyncio.wait_for(_fetch(client, params, timeout), timeout=timeout)
        else:
            async with httpx.AsyncClient() as own_client:
                response = await asyncio.wait_for(_fetch(own_client, params, timeout), timeout=timeout)

        response.raise_for_status()  # any non-2xx status; the body is not inspected here
        return PageSpeedResponse.model_validate(response.json())

    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.error("Request timed out after %s seconds", timeout)
    except httpx.HTTPStatusError as e:
        logger.error("PageSpeed API returned HTTP %d for %s", e.response.status_code, request.url)
    except httpx.RequestError as e:
        logger.error("Network error while calling PageSpeed API: %s", e)
    except (ValueError, ValidationError) as e:
        logger.error("Invalid response from PageSpeed API: %s", e)
    except Exception:
        logger.exception("Unexpected error making PageSpeed request")
    return None

async def _fetch(client: httpx.AsyncClient, params: dict, timeout: float) -> httpx.Response:
    return await client.get(settings.PAGESPEED_API_ENDPOINT, params=params, timeout=timeout)
