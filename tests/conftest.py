"""Shared fixtures for Lighthouse report tests."""

import pytest

from lighthouse.models import AnalysisRequest, PageSpeedResponse


@pytest.fixture
def analysis_request():
    return AnalysisRequest(url="https://example.com")


@pytest.fixture
def pagespeed_payload():
    """A trimmed-down but realistic PageSpeed Insights v5 response."""
    return {
        "id": "https://example.com/",
        "loadingExperience": {
            "metrics": {
                "FIRST_CONTENTFUL_PAINT_MS": {"percentile": 1200, "category": "FAST"},
            },
            "overall_category": "FAST",
        },
        "lighthouseResult": {
            "categories": {
                "performance": {"id": "performance", "title": "Performance", "score": 0.873},
            },
            "audits": {
                "first-contentful-paint": {
                    "id": "first-contentful-paint",
                    "title": "First Contentful Paint",
                    "score": 0.9,
                    "displayValue": "1.2 s",
                    "numericValue": 1203.4,
                },
                "interactive": {
                    "id": "interactive",
                    "title": "Time to Interactive",
                    "score": 0.7,
                    "displayValue": "4.1 s",
                    "numericValue": 4100,
                },
                "render-blocking-resources": {
                    "id": "render-blocking-resources",
                    "title": "Eliminate render-blocking resources",
                    "score": 0.5,
                    "displayValue": "Potential savings of 450 ms",
                    "details": {"type": "opportunity", "overallSavingsMs": 450, "items": []},
                },
                "uses-long-cache-ttl": {
                    "id": "uses-long-cache-ttl",
                    "title": "Serve static assets with an efficient cache policy",
                    "score": 0.4,
                    "displayValue": "12 resources found",
                    "details": {"type": "table", "items": []},
                },
                "unused-css-rules": {
                    "id": "unused-css-rules",
                    "title": "Reduce unused CSS",
                    "score": 1,
                    "details": {"type": "opportunity", "overallSavingsMs": 0},
                },
            },
        },
    }


@pytest.fixture
def pagespeed_response(pagespeed_payload):
    return PageSpeedResponse.model_validate(pagespeed_payload)
