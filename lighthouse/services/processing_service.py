# lighthouse/services/processing_service.py
import math
from typing import Dict, Optional

from lighthouse.models import AnalysisRequest, Audit, PageSpeedResponse

# Order matters: metrics are rendered in this order.
KEY_METRICS = [
    "first-contentful-paint",
    "largest-contentful-paint",
    "total-blocking-time",
    "cumulative-layout-shift",
    "speed-index",
    "interactive",
]

NOT_AVAILABLE = "N/A"

def format_failure(url: str) -> str:
    return f"Failed to retrieve Lighthouse data for {url}"

def format_score(score: Optional[float]) -> str:
    """
    Renders a 0-1 category score on a 0-100 scale, rounding halves away from zero.
    """
    if score is None:
        return NOT_AVAILABLE
    scaled = score * 100
    return str(int(math.copysign(math.floor(abs(scaled) + 0.5), scaled)))

def format_performance_metrics(audits: Optional[Dict[str, Audit]]) -> str:
    """
    Formats the key metrics, one "<title>: <value>" line each.

    Args:
        audits: Audit records keyed by audit id, or None if the report has none.

    Returns:
        The metric lines, or a placeholder sentence when none are available.
    """
    lines = []
    for metric_id in KEY_METRICS:
        audit = (audits or {}).get(metric_id)
        if audit is None:
            continue
        lines.append(f"{audit.title or metric_id}: {audit.display_value or NOT_AVAILABLE}")

    if not lines:
        return "No performance metrics available"
    return "\n".join(lines)

def format_opportunities(audits: Optional[Dict[str, Audit]]) -> str:
    """
    Formats the scored opportunity audits that still have room to improve.

    An unscored opportunity is skipped, as is one with a perfect score.
    """
    if not audits:
        return "No opportunities available"

    lines = []
    for audit_id, audit in audits.items():
        if not audit.is_opportunity or audit.score is None or audit.score >= 1:
            continue
        savings = f" ({audit.display_value})" if audit.display_value else ""
        lines.append(f"{audit.title or audit_id}{savings}")

    if not lines:
        return "No improvement opportunities found"
    return "\n".join(lines)

def format_report(data: PageSpeedResponse, request: AnalysisRequest) -> str:
    """
    Formats a PageSpeed Insights response into the plain-text Lighthouse report.

    Args:
        data: The parsed response from the API.
        request: The parameters the analysis was run with.

    Returns:
        The report text, or a single error line if the API reported an error.
    """
    if data.error is not None:
        return f"Error: {data.error.message or 'Unknown error'}"

    audits = data.audits
    return "\n".join([
        f"Lighthouse {request.category} report for: {request.url}",
        f"Strategy: {request.strategy}",
        f"Score: {format_score(data.category_score(request.category))}/100",
        "",
        "--- Key Metrics ---",
        format_performance_metrics(audits),
        "",
        "--- Opportunities for Improvement ---",
        format_opportunities(audits),
    ])
