# lighthouse/services/report_service.py
import logging
from typing import Optional

import httpx

from lighthouse.models import AnalysisRequest
from lighthouse.services import pagespeed_service, processing_service

logger = logging.getLogger(__name__)

async def get_lighthouse_report(
    request: AnalysisRequest,
    api_key: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Runs one PageSpeed analysis and renders it as text. Never raises.
    """
    logger.info("Running Lighthouse %s analysis (%s) for %s", request.category, request.strategy, request.url)

    data = await pagespeed_service.get_pagespeed_insights(request, api_key=api_key, client=client)
    if data is None:
        return processing_service.format_failure(request.url)

    return processing_service.format_report(data, request)
