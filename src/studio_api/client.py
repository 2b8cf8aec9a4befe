"""Injectable handle the services use to talk to the language model."""

from typing import Any, AsyncIterator, Dict, List, Optional, Union

from langchain_core.messages import HumanMessage

from .models.model_router import ModelRouter

MessageContent = Union[str, List[Dict[str, Any]]]


def message_text(message: Any) -> str:
    """Return the text of a LangChain message or chunk whose content may be a list of parts."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return "" if content is None else str(content)


class StudioClient:
    """A model name bound to a router, passed explicitly to whatever needs the model."""

    def __init__(self, router: ModelRouter, model_name: str, model_params: Optional[Dict[str, Any]] = None):
        self.router = router
        self.model_name = model_name
        self.model_params = dict(model_params or {})

    def with_model(self, model_name: Optional[str] = None, **model_params) -> "StudioClient":
        """Return a handle for another model (or other parameters) sharing this router."""
        return StudioClient(
            self.router,
            model_name or self.model_name,
            {**self.model_params, **model_params},
        )

    async def generate_json(self, content: MessageContent) -> str:
        """Run one JSON-mode call and return the raw response text."""
        model = self.router.get_model(self.model_name, json_mode=True, **self.model_params)
        response = await model.ainvoke([HumanMessage(content=content)])
        return message_text(response)

    async def stream_text(self, prompt: str) -> AsyncIterator[str]:
        """Stream a plain-text answer chunk by chunk."""
        model = self.router.get_model(self.model_name, **self.model_params)
        async for chunk in model.astream([HumanMessage(content=prompt)]):
            text = message_text(chunk)
            if text:
                yield text
