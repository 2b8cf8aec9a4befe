"""Image-edit planning endpoints."""

import base64
import binascii

from fastapi import APIRouter, HTTPException, Depends
from ..schemas.tools import EditingPlanRequest
from ..models.image_editor import EditingPlan
from ..services.image_editor import generate_editing_plan
from ..client import StudioClient
from ..errors import InvalidArgument, UpstreamFailure
from ..api.dependencies import get_studio_client, router_limiter, select_model

router = APIRouter(prefix="/image-editor", tags=["Image Editor"])


@router.post("/plan", response_model=EditingPlan, summary="Plan an Image Edit", dependencies=[Depends(router_limiter)], responses={
    200: {"description": "A step-by-step editing plan with an estimated GPU cost"},
    400: {"description": "Invalid image payload or unavailable model"},
    502: {"description": "The language model failed or returned a malformed plan"},
})
async def plan_image_edit(request: EditingPlanRequest, client: StudioClient = Depends(get_studio_client)):
    """
    Describe how an automated pipeline would perform the requested edit.

    The image is only shown to the model; no image processing happens here.
    """
    try:
        try:
            image_data = base64.b64decode(request.image_base64, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidArgument("image_base64 is not valid base64")

        client = select_model(client, request.model_name, request.model_params)
        return await generate_editing_plan(
            client,
            image_data,
            request.mime_type,
            request.prompt,
            request.output_language,
        )
    except HTTPException:
        raise
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
