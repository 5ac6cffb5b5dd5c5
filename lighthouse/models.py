# lighthouse/models.py
from typing import Any, Dict, Literal, Optional, Type

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter, ValidationError, field_validator

Strategy = Literal["mobile", "desktop"]
Category = Literal["performance", "accessibility", "best-practices", "seo", "pwa"]

DEFAULT_TIMEOUT_MS = 60000

_url_adapter = TypeAdapter(AnyUrl)

class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(description="URL of the webpage to analyze")
    strategy: Strategy = Field(default="mobile", description="Analysis strategy")
    category: Category = Field(default="performance", description="Lighthouse category to include")
    timeout_ms: PositiveInt = Field(
        default=DEFAULT_TIMEOUT_MS,
        alias="timeout",
        description="Timeout in milliseconds (default: 60000)",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # Validate as an absolute URL but keep the caller's spelling for the report.
        _url_adapter.validate_python(value)
        return value

class ReportResponse(BaseModel):
    report: str

# --- PageSpeed Insights response ---
# Every field is optional: the API does not guarantee any of them.

class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

def _valid_or_none(model: Type[BaseModel], value: Any) -> Optional[BaseModel]:
    if value is None:
        return None
    try:
        return model.model_validate(value)
    except ValidationError:
        return None

def _valid_entries(model: Type[BaseModel], value: Any) -> Optional[Dict[str, Optional[BaseModel]]]:
    """Validates each entry of a keyed mapping on its own; a malformed entry becomes None."""
    if not isinstance(value, dict):
        return None
    return {key: _valid_or_none(model, entry) for key, entry in value.items()}

class PageSpeedError(_ApiModel):
    code: Optional[int] = None
    message: Optional[str] = None

class CategoryResult(_ApiModel):
    id: Optional[str] = None
    title: Optional[str] = None
    score: Optional[float] = None

class AuditDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None

class Audit(_ApiModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    score: Optional[float] = None
    display_value: Optional[str] = Field(default=None, alias="displayValue")
    numeric_value: Optional[float] = Field(default=None, alias="numericValue")
    details: Optional[AuditDetails] = None

    @property
    def is_opportunity(self) -> bool:
        return self.details is not None and self.details.type == "opportunity"

class LighthouseResult(_ApiModel):
    categories: Optional[Dict[str, Optional[CategoryResult]]] = None
    audits: Optional[Dict[str, Optional[Audit]]] = None

    @field_validator("categories", mode="before")
    @classmethod
    def drop_malformed_categories(cls, value: Any):
        return _valid_entries(CategoryResult, value)

    @field_validator("audits", mode="before")
    @classmethod
    def drop_malformed_audits(cls, value: Any):
        return _valid_entries(Audit, value)

class FieldMetric(_ApiModel):
    percentile: Optional[float] = None
    category: Optional[str] = None

class LoadingExperience(_ApiModel):
    metrics: Optional[Dict[str, Optional[FieldMetric]]] = None
    overall_category: Optional[str] = None

class PageSpeedResponse(_ApiModel):
    error: Optional[PageSpeedError] = None
    lighthouse_result: Optional[LighthouseResult] = Field(default=None, alias="lighthouseResult")
    loading_experience: Optional[LoadingExperience] = Field(default=None, alias="loadingExperience")

    @field_validator("lighthouse_result", mode="before")
    @classmethod
    def drop_malformed_result(cls, value: Any):
        return _valid_or_none(LighthouseResult, value)

    @field_validator("loading_experience", mode="before")
    @classmethod
    def drop_malformed_field_data(cls, value: Any):
        return _valid_or_none(LoadingExperience, value)

    @property
    def audits(self) -> Optional[Dict[str, Audit]]:
        """Returns the audits that are present, or None when the report has none."""
        if self.lighthouse_result is None or not self.lighthouse_result.audits:
            return None
        present = {audit_id: audit for audit_id, audit in self.lighthouse_result.audits.items() if audit is not None}
        return present or None

    def category_score(self, category: str) -> Optional[float]:
        if self.lighthouse_result is None or not self.lighthouse_result.categories:
            return None
        result = self.lighthouse_result.categories.get(category)
        return result.score if result is not None else None
