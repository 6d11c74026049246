import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_catalog, get_gemini_client, get_storage_client
from config import settings
from models.requests import AIRecommendationRequest, RecommendationRequest
from models.responses import AIRecommendationsResponse, CareerPartitionResponse, CareerSummary
from models.schemas import AIRecommendation, CareerPathDefinition
from services import catalog as catalog_service
from services import reconciler, recommendation_store, rule_recommender

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "storage_configured": bool(settings.supabase_url and settings.supabase_key),
    }


@router.get("/careers", response_model=list[CareerSummary])
async def list_careers(catalog=Depends(get_catalog)):
    return [
        CareerSummary(**career.model_dump(exclude={"roadmap"}))
        for career in catalog
    ]


@router.get("/careers/{career_id}", response_model=CareerPathDefinition)
async def get_career(career_id: str, catalog=Depends(get_catalog)):
    for career in catalog:
        if career.id == career_id:
            return career
    raise HTTPException(status_code=404, detail=f"Unknown career path: {career_id}")


@router.post("/recommendations", response_model=CareerPartitionResponse)
async def recommendations(body: RecommendationRequest, catalog=Depends(get_catalog)):
    recommended, other = rule_recommender.partition(body.user_profile, catalog)
    return CareerPartitionResponse(recommended=recommended, other=other)


@router.post("/ai-recommendations", response_model=AIRecommendationsResponse)
@limiter.limit(settings.rate_limit)
async def ai_recommendations(
    request: Request,
    body: AIRecommendationRequest,
    gemini=Depends(get_gemini_client),
    storage=Depends(get_storage_client),
):
    try:
        profile = body.user_profile
        if profile is None:
            if storage is None:
                raise HTTPException(status_code=400, detail="userProfile is required when storage is not configured")
            profile = await run_in_threadpool(recommendation_store.get_user_profile, storage, body.user_id)
            if profile is None:
                raise HTTPException(status_code=404, detail="User profile not found")

        titles = body.available_courses or catalog_service.catalog_titles()

        if storage is not None:
            cached = await run_in_threadpool(
                recommendation_store.get_stored_recommendations, storage, body.user_id
            )
            if cached:
                # Stored records may predate the caller's course list
                usable = reconciler.complete(profile, cached, titles)
                if usable:
                    logger.info("Serving cached recommendations for %s", body.user_id)
                    return AIRecommendationsResponse(recommendations=usable, from_cache=True)
                logger.info("Cached recommendations for %s not offered, recomputing", body.user_id)

        results, degraded = await reconciler.reconcile(profile, titles, client=gemini)

        # Only model-backed results are cached
        if storage is not None and not degraded:
            await run_in_threadpool(
                recommendation_store.store_recommendations, storage, body.user_id, results
            )

        return AIRecommendationsResponse(recommendations=results, from_cache=False)

    except HTTPException:
        raise
    except Exception as e:
        logger.error("Error in AI recommendations endpoint: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to get AI recommendations"})


@router.get("/users/{user_id}/recommendations", response_model=list[AIRecommendation])
async def stored_recommendations(user_id: str, storage=Depends(get_storage_client)):
    if storage is None:
        raise HTTPException(status_code=503, detail="Recommendation storage is not configured")
    stored = await run_in_threadpool(recommendation_store.get_stored_recommendations, storage, user_id)
    if not stored:
        raise HTTPException(status_code=404, detail="No stored recommendations")
    return stored
