import logging
import time
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from campaignguard.cache import LintCache
from campaignguard.decision.gate import validate_before_publish
from campaignguard.experiments.analyzer import analyze_experiment
from campaignguard.experiments.guardrails import check_guardrails
from campaignguard.experiments.report import generate_experiment_report
from campaignguard.experiments.sample_size import calculate_sample_size
from campaignguard.models.experiment import Experiment
from campaignguard.orchestrator.linter import lint_content
from campaignguard.policies.registry import (
    PolicyPackNotFoundError,
    get_policy_pack,
    get_policy_packs,
)
from campaignguard.reporting.checklist import generate_preflight_checklist
from campaignguard.reporting.report import generate_compliance_report
from campaignguard.settings import compute_settings_hash, get_settings
from campaignguard.telemetry import (
    emit_analysis_telemetry,
    emit_exception_telemetry,
    emit_lint_telemetry,
    init_telemetry,
)

settings = get_settings()

# --- AUDIT LOGGING ---
logging.basicConfig(
    filename=settings.audit_log,
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")

tags_metadata = [
    {
        "name": "Compliance",
        "description": "Ad copy linting against prohibited claims, disclosures and media rules.",
    },
    {
        "name": "Policies",
        "description": "Read-only policy pack catalog.",
    },
    {
        "name": "Experiments",
        "description": "A/B experiment analysis, guardrails and sample sizing.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="CampaignGuard",
    description="""
    **Creative compliance and experiment analysis** for paid social and search campaigns.

    * **Compliance Linter:** deterministic prohibited-claim, disclosure and media checks.
    * **Experiment Analyzer:** variant ranking, guardrails and stop/continue recommendations.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()

lint_cache = LintCache(settings.lint_cache_ttl, max_entries=settings.lint_cache_max_entries)


# --- MIDDLEWARE: AUDIT TRAIL ---
@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class MediaModel(BaseModel):
    type: Literal["image", "video"]
    url: str = ""
    tags: List[str] = []
    duration: Optional[float] = None


class ContentModel(BaseModel):
    headline: Optional[str] = None
    body: Optional[str] = None
    cta: Optional[str] = None
    media: Optional[MediaModel] = None


class LintRequest(BaseModel):
    content: Optional[ContentModel] = None
    platform: str = "all"
    vertical: str = "general"
    region: str = "US"


class BatchLintRequest(BaseModel):
    requests: List[LintRequest]


class ReportRequest(LintRequest):
    policy_packs: List[str] = []


class GuardrailModel(BaseModel):
    metric: str
    operator: Literal["greater_than", "less_than", "between"]
    value: Union[float, Tuple[float, float]]
    action: Literal["pause", "alert", "promote"]


class OutcomeModel(BaseModel):
    variant: str
    metrics: Dict[str, float] = {}
    significance: float = Field(1.0, ge=0, le=1)
    lift: float = 0.0
    decision: Literal["winner", "loser", "continue"] = "continue"


class DesignModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["creative_ab", "geo_holdout", "angle_test"] = "creative_ab"
    min_sample_size: int = Field(0, alias="minSampleSize")
    power: float = 0.8
    significance_level: float = Field(0.05, alias="significanceLevel")
    duration: int = 0


class ExperimentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    project_id: Optional[str] = Field(None, alias="projectId")
    design: DesignModel = DesignModel()
    variants: List[Any] = []
    budgets: List[Dict[str, Any]] = []
    guardrails: List[GuardrailModel] = []
    outcomes: List[OutcomeModel] = []
    status: str = "draft"

    def to_experiment(self) -> Experiment:
        return Experiment.from_dict(self.model_dump(by_alias=True))


class SampleSizeRequest(BaseModel):
    baseline_rate: float
    minimum_detectable_effect: float
    power: float = 0.8
    significance_level: float = 0.05


def _run_lint(request: LintRequest):
    if request.content is None:
        raise HTTPException(status_code=400, detail="Content is required")

    start_time = time.perf_counter()
    result, cache_hit = lint_cache.lint(
        lint_content,
        request.content.model_dump(),
        request.platform,
        request.vertical,
        request.region,
    )
    latency_ms = int((time.perf_counter() - start_time) * 1000)

    emit_lint_telemetry(
        latency_ms=latency_ms,
        score=result.score,
        overall=result.overall.value,
        violation_count=len(result.violations),
        cache_hit=cache_hit,
    )
    return result


# --- ENDPOINTS ---

@app.post("/compliance/lint", tags=["Compliance"])
def lint(request: LintRequest):
    """
    Lint ad copy and media metadata. Returns the compliance result.
    """
    result = _run_lint(request)
    return {
        "result": result.to_dict(),
        "publish": validate_before_publish(result).to_dict(),
        "message": f"Compliance check completed with {len(result.violations)} violations found",
    }


@app.post("/compliance/lint/batch", tags=["Compliance"])
def lint_batch(request: BatchLintRequest):
    return {"results": [_run_lint(r).to_dict() for r in request.requests]}


@app.post("/compliance/report", tags=["Compliance"])
def compliance_report(request: ReportRequest):
    result = _run_lint(request)
    return generate_compliance_report(result, request.policy_packs).to_dict()


@app.get("/compliance/policies", tags=["Policies"])
def list_policies(vertical: Optional[str] = None, region: Optional[str] = None):
    packs = get_policy_packs(vertical, region)
    return {
        "data": [p.to_dict() for p in packs],
        "message": f"Retrieved {len(packs)} policy packs",
    }


@app.get("/compliance/policies/{pack_id}", tags=["Policies"])
def get_policy(pack_id: str):
    try:
        return get_policy_pack(pack_id).to_dict()
    except PolicyPackNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/compliance/checklist", tags=["Compliance"])
def checklist(vertical: str = "general", platform: str = "all"):
    return {"checklist": generate_preflight_checklist(vertical, platform)}


@app.post("/experiments/analyze", tags=["Experiments"])
def analyze(request: ExperimentModel):
    try:
        start_time = time.perf_counter()
        experiment = request.to_experiment()
        analysis = analyze_experiment(experiment)
        latency_ms = int((time.perf_counter() - start_time) * 1000)

        emit_analysis_telemetry(
            latency_ms=latency_ms,
            recommendation=analysis.recommendation.value,
            guardrail_breaches=len(analysis.guardrail_violations),
        )
        return analysis.to_dict()

    except Exception as e:
        emit_exception_telemetry(e)
        audit_logger.error(f"ANALYZER_ERROR: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Experiment analysis failed")


@app.post("/experiments/guardrails", tags=["Experiments"])
def guardrails(request: ExperimentModel):
    violations = check_guardrails(request.to_experiment())
    return {"violations": [v.to_dict() for v in violations]}


@app.post("/experiments/sample-size", tags=["Experiments"])
def sample_size(request: SampleSizeRequest):
    try:
        n = calculate_sample_size(
            request.baseline_rate,
            request.minimum_detectable_effect,
            request.power,
            request.significance_level,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"sampleSize": n}


@app.post("/experiments/report", tags=["Experiments"])
def experiment_report(request: ExperimentModel):
    return generate_experiment_report(request.to_experiment())


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "catalog_version": settings.catalog_version,
        "settings_hash": compute_settings_hash(settings),
        "modules": ["Linter", "Policies", "Experiments", "AuditLog"]
    }
