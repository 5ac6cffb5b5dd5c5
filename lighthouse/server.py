# lighthouse/server.py
import logging
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from lighthouse.core.config import settings
from lighthouse.models import DEFAULT_TIMEOUT_MS, AnalysisRequest, Category, Strategy
from lighthouse.services import report_service

logger = logging.getLogger(__name__)

mcp = FastMCP("lighthouse")

@mcp.tool(name="get-lighthouse-report", description="Get Lighthouse performance report for a URL")
async def lighthouse_report(
    url: Annotated[str, Field(description="URL of the webpage to analyze", json_schema_extra={"format": "uri"})],
    category: Annotated[Category, Field(description="Lighthouse category to include")] = "performance",
    strategy: Annotated[Strategy, Field(description="Analysis strategy")] = "mobile",
    timeout: Annotated[int, Field(gt=0, description="Timeout in milliseconds (default: 60000)")] = DEFAULT_TIMEOUT_MS,
) -> str:
    # Raises a ValidationError for a malformed URL before anything is sent.
    request = AnalysisRequest(url=url, category=category, strategy=strategy, timeout=timeout)
    return await report_service.get_lighthouse_report(request)

def main() -> None:
    # stdout carries the protocol, so logs go to stderr.
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Lighthouse MCP Server running on stdio")
    mcp.run(transport="stdio")

if __name__ == "__main__":
    main()
