from typing import Dict, List
from pydantic import BaseModel, Field


SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "vi": "Vietnamese",
    "ja": "Japanese",
    "ko": "Korean",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "zh": "Chinese",
}


class GlossaryItem(BaseModel):
    """A domain-specific term found in the source text."""
    term: str = Field(..., description="The original term from the source text.")
    definition: str = Field(..., description="The definition of the term in the target language.")


class TranslationResponse(BaseModel):
    """Structured output requested from the model for one segment."""
    translation: str = Field(..., description="The translated text in the target language.")
    glossary: List[GlossaryItem] = Field(default_factory=list, description="Domain-specific terms and their definitions.")


class TranslationResult(BaseModel):
    """Result for a single segment translation."""
    translated_text: str
    glossary: List[GlossaryItem] = Field(default_factory=list)


class AggregateResult(BaseModel):
    """Merged result across all segments of one translation request."""
    translated_text: str = Field(..., description="Segment translations joined with a single space, in order.")
    glossary: List[GlossaryItem] = Field(default_factory=list, description="Glossary unique by case-insensitive term.")
