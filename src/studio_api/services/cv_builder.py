"""
AI-assisted CV writing.

Each requested field is streamed by its own task. Every update carries the key
of the field it belongs to and goes through one queue, so the CV is only ever
changed by ``apply_cv_update`` running on the consumer side, one update at a time.
"""

import asyncio
import logging
from typing import AsyncGenerator, Dict, List, Sequence, Tuple

from ..client import StudioClient
from ..errors import InvalidArgument
from ..models.cv import CVData, CVFieldTarget, CVStreamUpdate
from ..prompts.studio import get_cv_summary_prompt, get_cv_work_description_prompt


logger = logging.getLogger("studio_api.cv_builder")


def validate_targets(cv: CVData, targets: Sequence[CVFieldTarget]) -> None:
    """Reject targets that point at missing work entries or repeat a key."""
    if not targets:
        raise InvalidArgument("At least one CV field target is required")
    seen = set()
    for target in targets:
        if target.field == "work_description":
            if target.index is None:
                raise InvalidArgument("work_description targets require an index")
            if target.index >= len(cv.work_experience):
                raise InvalidArgument(
                    f"Work experience index {target.index} is out of range "
                    f"({len(cv.work_experience)} entries)"
                )
        if target.key in seen:
            raise InvalidArgument(f"Duplicate CV field target: {target.key}")
        seen.add(target.key)


def build_cv_prompt(cv: CVData, target: CVFieldTarget, output_language: str = "Vietnamese") -> str:
    if target.field == "professional_summary":
        return get_cv_summary_prompt(cv, output_language)
    return get_cv_work_description_prompt(cv.work_experience[target.index], output_language)


def apply_cv_update(cv: CVData, update: CVStreamUpdate) -> CVData:
    """Return a new CV with one streamed update applied. ``completed`` and ``error`` leave it unchanged."""
    if update.kind not in ("reset", "chunk"):
        return cv

    if update.field == "professional_summary":
        text = "" if update.kind == "reset" else cv.professional_summary + update.delta
        return cv.model_copy(update={"professional_summary": text})

    if update.index is None or update.index >= len(cv.work_experience):
        return cv
    work = cv.work_experience[update.index]
    text = "" if update.kind == "reset" else work.description + update.delta
    work_experience = list(cv.work_experience)
    work_experience[update.index] = work.model_copy(update={"description": text})
    return cv.model_copy(update={"work_experience": work_experience})


def _update(target: CVFieldTarget, kind: str, delta: str = "", error: str = None) -> CVStreamUpdate:
    return CVStreamUpdate(
        key=target.key,
        field=target.field,
        index=target.index,
        kind=kind,
        delta=delta,
        error=error,
    )


async def stream_cv_updates(
    client: StudioClient,
    cv: CVData,
    targets: Sequence[CVFieldTarget],
    output_language: str = "Vietnamese",
) -> AsyncGenerator[CVStreamUpdate, None]:
    """
    Stream every target concurrently and yield their keyed updates in arrival order.

    Prompts are built from ``cv`` as given, before any field is reset. A failing
    stream yields an ``error`` update for its key; the other streams continue.
    """
    validate_targets(cv, targets)
    queue: asyncio.Queue = asyncio.Queue()

    async def _run(target: CVFieldTarget, prompt: str) -> None:
        await queue.put(_update(target, "reset"))
        try:
            async for chunk in client.stream_text(prompt):
                await queue.put(_update(target, "chunk", delta=chunk))
        except Exception as e:
            logger.error("Error streaming CV field %s: %s", target.key, e)
            await queue.put(_update(target, "error", error=f"Failed to generate content: {e}"))
        else:
            await queue.put(_update(target, "completed"))

    prompts = [build_cv_prompt(cv, target, output_language) for target in targets]
    tasks = [asyncio.create_task(_run(target, prompt)) for target, prompt in zip(targets, prompts)]
    remaining = len(tasks)
    try:
        while remaining:
            update = await queue.get()
            if update.kind in ("completed", "error"):
                remaining -= 1
            yield update
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()


async def build_cv(
    client: StudioClient,
    cv: CVData,
    targets: List[CVFieldTarget],
    output_language: str = "Vietnamese",
) -> Tuple[CVData, Dict[str, str]]:
    """Run all targets to completion and return the rewritten CV with per-key errors."""
    errors: Dict[str, str] = {}
    async for update in stream_cv_updates(client, cv, targets, output_language):
        cv = apply_cv_update(cv, update)
        if update.kind == "error":
            errors[update.key] = update.error
    return cv, errors
