"""Prompts for the studio tools: translator, writer, image-edit planner and CV builder."""

from datetime import date
from typing import Optional

from ..models.cv import CVData, WorkExperience


TRANSLATION_PROMPT = """Translate the following text from {source_language} to {target_language}.
Preserve the original meaning and tone.
Also, identify any domain-specific or technical terms in the source text and provide a glossary for them in {target_language}.

Return ONLY a JSON object (no markdown fences or explanations) with this structure:
{{
  "translation": "The translated text in {target_language}.",
  "glossary": [
    {{"term": "The original term from the source text.", "definition": "The definition of the term in {target_language}."}}
  ]
}}
Use an empty list for "glossary" when the text has no domain-specific terms.

Text to translate:
\"\"\"
{source_text}
\"\"\""""


ARTICLE_PROMPT = """You are an expert content marketer. Using the brief below, write complete content in {output_language}.
Topic: "{topic}"
Target audience: "{audience}"
Desired length: "{length}"
Tone: "{tone}"

Return ONLY a JSON object (no markdown fences or explanations) with these fields:
1.  "title": A catchy, attention-grabbing title.
2.  "meta_description": A concise meta description (about 155-160 characters) optimized for SEO.
3.  "outline": A detailed outline of the article, as an array of strings.
4.  "article": The full article, well formatted with clear paragraphs.
5.  "seo_keywords": An array of relevant SEO keywords.
6.  "hashtags": An array of hashtags suitable for social media.
"""


EDITING_PLAN_PROMPT = """Based on the provided image and the following desired edit, create a step-by-step plan for an automated image editing pipeline in {output_language}.
Do not perform the edit yourself.
Return a list of transformations and an estimated total GPU computation time in seconds.
The transformation names should be like function calls (e.g., 'remove_background', 'adjust_brightness').
The parameters should be a string of key-value pairs.

Return ONLY a JSON object (no markdown fences or explanations) with this structure:
{{
  "steps": [
    {{"name": "remove_background", "description": "What this step does.", "parameters": "threshold: 0.5"}}
  ],
  "estimated_compute": {{"gpu_seconds": 2.5}}
}}

Desired Edit: "{edit_request}\""""


CV_SUMMARY_PROMPT = """Based on the following CV details, write a professional and compelling summary of 2-3 sentences in {output_language}.
Job title: {job_title}
Years of experience: {years_of_experience}
Key skills: {skills}
Focus on making a strong impression on recruiters.
Output only the summary text."""


CV_WORK_DESCRIPTION_PROMPT = """Write 3-4 professional, action-oriented CV bullet points describing the responsibilities and achievements for the role of {job_title} at {company} in {output_language}.
Use the STAR method (Situation, Task, Action, Result).
The current description is: "{current_description}". Improve it or create new points.
The output must be a list of bullet points, each starting with a dash."""


def get_translation_prompt(source_text: str, source_language: str, target_language: str) -> str:
    """Build the prompt translating one segment and extracting its glossary."""
    return TRANSLATION_PROMPT.format(
        source_text=source_text,
        source_language=source_language,
        target_language=target_language,
    )


def get_article_prompt(topic: str, audience: str, length: str, tone: str, output_language: str = "Vietnamese") -> str:
    return ARTICLE_PROMPT.format(
        topic=topic,
        audience=audience,
        length=length,
        tone=tone,
        output_language=output_language,
    )


def get_editing_plan_prompt(edit_request: str, output_language: str = "Vietnamese") -> str:
    return EDITING_PLAN_PROMPT.format(edit_request=edit_request, output_language=output_language)


def years_of_experience(cv: CVData, today: Optional[date] = None) -> str:
    """Years since the first job's start year, or "N/A" when it is unknown."""
    if not cv.work_experience:
        return "N/A"
    try:
        start = date.fromisoformat(cv.work_experience[0].start_date)
    except ValueError:
        return "N/A"
    today = today or date.today()
    return str(today.year - start.year)


def get_cv_summary_prompt(cv: CVData, output_language: str = "Vietnamese", today: Optional[date] = None) -> str:
    first_job = cv.work_experience[0].job_title if cv.work_experience else ""
    return CV_SUMMARY_PROMPT.format(
        job_title=first_job or "N/A",
        years_of_experience=years_of_experience(cv, today),
        skills=", ".join(cv.skills) or "N/A",
        output_language=output_language,
    )


def get_cv_work_description_prompt(work: WorkExperience, output_language: str = "Vietnamese") -> str:
    return CV_WORK_DESCRIPTION_PROMPT.format(
        job_title=work.job_title or "N/A",
        company=work.company or "N/A",
        current_description=work.description or "N/A",
        output_language=output_language,
    )
