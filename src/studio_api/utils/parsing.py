"""Parsing of structured (JSON) model responses into pydantic models."""

import json
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import ParseError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing a model response: either a value or a ParseError."""

    value: Optional[T] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value


def strip_code_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):]
    elif cleaned.startswith("```"):
        cleaned = cleaned[len("```"):]
    else:
        return cleaned
    if cleaned.rstrip().endswith("```"):
        cleaned = cleaned.rstrip()[:-len("```")]
    return cleaned.strip()


def parse_structured_response(raw: str, schema: Type[T]) -> ParseResult[T]:
    """
    Decode a raw model response and validate it against a pydantic schema.

    Args:
        raw: Text returned by the model
        schema: Pydantic model the JSON object must satisfy

    Returns:
        ParseResult holding the validated instance, or the ParseError describing
        why the response was rejected
    """
    if raw is None or not raw.strip():
        return ParseResult(error=ParseError("Empty response from model", raw=raw))

    cleaned = strip_code_fences(raw)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return ParseResult(error=ParseError(f"Response is not valid JSON: {e}", raw=raw))

    if not isinstance(data, dict):
        return ParseResult(error=ParseError(
            f"Expected a JSON object, got {type(data).__name__}", raw=raw
        ))

    try:
        return ParseResult(value=schema.model_validate(data))
    except ValidationError as e:
        return ParseResult(error=ParseError(
            f"Response does not match {schema.__name__}: {e}", raw=raw
        ))
