"""
FastAPI server for the Hotel Campaign Generator
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from hotel_campaigns import CampaignGenerator, WorkflowError
from hotel_campaigns import config
from hotel_campaigns.errors import ConfigurationError

app = FastAPI(title="Hotel Campaign Generator API")

# CORS middleware for the chat UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


class CampaignRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    hotelName: str = Field(min_length=2, max_length=100)
    hotelUrl: HttpUrl
    hotelDetails: Dict[str, Any] = Field(default_factory=dict)


class CampaignMetrics(BaseModel):
    CTR: Optional[float] = None
    ROAS: Optional[float] = None
    currentBid: Optional[float] = None
    currentBudget: Optional[float] = None


class OptimizationRequest(BaseModel):
    metrics: CampaignMetrics


@lru_cache(maxsize=1)
def get_generator() -> CampaignGenerator:
    """Campaign generator shared by all requests, built on first use"""
    return CampaignGenerator.from_env()


def _error_response(error: Exception, message: str) -> JSONResponse:
    retryable = isinstance(error, WorkflowError) and error.retryable
    return JSONResponse(
        status_code=503 if retryable else 500,
        content={
            "status": "error",
            "message": message,
            "retryable": retryable,
            "error": str(error) if config.is_development() else None
        }
    )


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    print(f"✗ Campaign service is not configured: {exc}")
    return _error_response(exc, "Campaign service is not configured")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"status": "error", "errors": [error["msg"] for error in exc.errors()]}
    )


@app.get("/")
async def root():
    return {"message": "Hotel Campaign Generator API", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.post("/api/campaign/generate")
async def generate_campaign(body: CampaignRequest, generator: CampaignGenerator = Depends(get_generator)):
    """Generate keywords, ad copies, audience locations and a daily budget for a hotel"""
    hotel_info = {
        "name": body.hotelName,
        "website": str(body.hotelUrl),
        **body.hotelDetails
    }

    try:
        campaign = await generator.generate_campaign(hotel_info)
    except WorkflowError as e:
        print(f"Campaign generation failed: {e}")
        return _error_response(e, "Campaign generation failed")

    return {"status": "success", "campaign": campaign}


@app.post("/api/campaign/optimize")
async def optimize_campaign(body: OptimizationRequest, generator: CampaignGenerator = Depends(get_generator)):
    """Recommend a bid or budget change from current campaign metrics"""
    metrics = body.metrics.model_dump(exclude_none=True)
    if not metrics:
        return JSONResponse(
            status_code=400,
            content={"status": "error", "errors": ["Campaign metrics are required"]}
        )

    try:
        optimization = await generator.optimize_campaign(metrics)
    except WorkflowError as e:
        print(f"Campaign optimization failed: {e}")
        return _error_response(e, "Campaign optimization failed")

    return {"status": "success", "optimization": optimization}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host="0.0.0.0", port=config.PORT, reload=True)
