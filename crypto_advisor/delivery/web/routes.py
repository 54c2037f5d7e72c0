from fastapi import APIRouter, Depends, Query, Request

from crypto_advisor.recommend.engine import RecommendationEngine
from crypto_advisor.recommend.models import Mode

router = APIRouter()


def get_engine(request: Request) -> RecommendationEngine:
    return request.app.state.engine


@router.get("/health")
async def health(engine: RecommendationEngine = Depends(get_engine)):
    return {"status": "ok", "cached_assets": len(engine.cache)}


@router.get("/api/recommendations")
async def recommendations(
    risk_level: str | None = Query(None, alias="riskLevel"),
    mode: str | None = Query(None),
    engine: RecommendationEngine = Depends(get_engine),
):
    # Validation errors (InvalidInput) are mapped to 400 by the app's handlers
    result = await engine.recommend(risk_level, mode)
    return result.to_response()


@router.get("/api/crypto-recommendations")
async def crypto_recommendations(
    risk_level: str | None = Query(None, alias="riskLevel"),
    engine: RecommendationEngine = Depends(get_engine),
):
    result = await engine.recommend(risk_level, Mode.MOMENTUM)
    return result.to_response()
