"""Writer, image editor and CV builder API schemas."""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field
from ..models.cv import CVData, CVFieldTarget


class ModelSelection(BaseModel):
    """Optional per-request model override."""
    model_name: Optional[str] = Field(None, description="Model to use; defaults to the configured model")
    model_params: Dict[str, Any] = Field(default_factory=dict, description="Additional model parameters")


class ArticleRequest(ModelSelection):
    topic: str = Field(..., min_length=1, description="What the article is about")
    audience: str = Field(..., min_length=1, description="Target audience")
    length: str = Field("Medium (~800 words)", description="Desired length")
    tone: str = Field("Formal", description="Writing tone")
    output_language: str = Field("Vietnamese", description="Language of the generated content")


class EditingPlanRequest(ModelSelection):
    image_base64: str = Field(..., min_length=1, description="Base64-encoded image bytes")
    mime_type: str = Field(..., description="Image MIME type, e.g. image/png")
    prompt: str = Field(..., min_length=1, description="Desired edit, e.g. 'remove background and brighten'")
    output_language: str = Field("Vietnamese", description="Language of the plan descriptions")


class CVGenerationRequest(ModelSelection):
    cv: CVData
    targets: List[CVFieldTarget] = Field(..., min_length=1, description="Fields to (re)write")
    output_language: str = Field("Vietnamese", description="Language of the generated text")


class CVGenerationResponse(BaseModel):
    cv: CVData
    errors: Dict[str, str] = Field(default_factory=dict, description="Error message per failed field key")
