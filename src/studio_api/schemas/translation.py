"""Translation API schemas."""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field
from ..models.translation import GlossaryItem


class TranslationAPIRequest(BaseModel):
    """API request model for translation."""
    text: str = Field(..., description="Text to translate; long texts are split into sentence-aligned segments")
    source_language: str = Field("English", description="Source language name, e.g. 'English'")
    target_language: str = Field("Vietnamese", description="Target language name, e.g. 'Vietnamese'")
    model_name: Optional[str] = Field(None, description="Model to use; defaults to the configured model")
    model_params: Dict[str, Any] = Field(default_factory=dict, description="Additional model parameters")
    char_limit: Optional[int] = Field(None, gt=0, description="Segment size limit; defaults to the configured limit")


class TranslationAPIResponse(BaseModel):
    """API response model for translation."""
    success: bool = Field(..., description="Whether the translation was successful")
    translated_text: str = Field(..., description="Segment translations joined in order")
    glossary: List[GlossaryItem] = Field(default_factory=list, description="Glossary unique by case-insensitive term")
    metadata: Dict[str, Any] = Field(..., description="Processing metadata, including timing and segment information.")


class LanguageInfo(BaseModel):
    code: str
    name: str
