"""Content writer endpoints."""

from fastapi import APIRouter, HTTPException, Depends
from ..schemas.tools import ArticleRequest
from ..models.writer import GeneratedContent
from ..services.writer import generate_article_content
from ..client import StudioClient
from ..errors import UpstreamFailure
from ..api.dependencies import get_studio_client, router_limiter, select_model

router = APIRouter(prefix="/writer", tags=["Writer"])


@router.post("/generate", response_model=GeneratedContent, dependencies=[Depends(router_limiter)])
async def generate_article(request: ArticleRequest, client: StudioClient = Depends(get_studio_client)):
    """
    Generate a complete content package for a topic: title, SEO meta description,
    outline, full article, SEO keywords and hashtags.
    """
    try:
        client = select_model(client, request.model_name, request.model_params)
        return await generate_article_content(
            client,
            request.topic,
            request.audience,
            request.length,
            request.tone,
            request.output_language,
        )
    except HTTPException:
        raise
    except UpstreamFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
