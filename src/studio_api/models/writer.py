from typing import List
from pydantic import BaseModel, Field


class GeneratedContent(BaseModel):
    """A complete content package for one article."""
    title: str = Field(..., description="A catchy, attention-grabbing title.")
    meta_description: str = Field(..., description="A concise SEO meta description of about 155-160 characters.")
    outline: List[str] = Field(..., description="A detailed outline of the article.")
    article: str = Field(..., description="The full article, formatted with clear paragraphs.")
    seo_keywords: List[str] = Field(..., description="Relevant SEO keywords.")
    hashtags: List[str] = Field(..., description="Hashtags suitable for social media.")
