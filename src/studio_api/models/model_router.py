"""Dynamic model routing for the studio API."""

from typing import Any, Dict
from enum import Enum

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.language_models import BaseChatModel

from ..config import Settings


class SupportedModel(Enum):
    """Enumeration of supported models."""
    # Google
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_PRO = "gemini-2.5-pro"
    # Anthropic - use exact model IDs
    CLAUDE_SONNET_4_5_20250929 = "claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_4_5_20251001 = "claude-haiku-4-5-20251001"
    # OpenAI
    GPT4O = "gpt-4o"
    GPT4O_MINI = "gpt-4o-mini"


GEMINI_MODELS = [SupportedModel.GEMINI_2_5_FLASH.value, SupportedModel.GEMINI_2_5_PRO.value]
ANTHROPIC_MODELS = [
    SupportedModel.CLAUDE_SONNET_4_5_20250929.value,
    SupportedModel.CLAUDE_HAIKU_4_5_20251001.value,
]
OPENAI_MODELS = [SupportedModel.GPT4O.value, SupportedModel.GPT4O_MINI.value]


class ModelRouter:
    """Router for selecting and initializing language models from explicit settings."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._model_cache: Dict[str, Any] = {}

    def get_model(self, model_name: str, json_mode: bool = False, **kwargs) -> BaseChatModel:
        """
        Get a language model instance based on the model name.

        Args:
            model_name: Name of the model to use
            json_mode: Ask the provider to answer with a JSON body
            **kwargs: Additional model configuration parameters

        Returns:
            Initialized language model instance

        Raises:
            ValueError: If model is not supported or API key is missing
        """
        cache_key = f"{model_name}_{json_mode}_{hash(str(sorted(kwargs.items())))}"
        if cache_key in self._model_cache:
            return self._model_cache[cache_key]

        model = self._create_model(model_name, json_mode, **kwargs)
        self._model_cache[cache_key] = model
        return model

    def _create_model(self, model_name: str, json_mode: bool, **kwargs) -> BaseChatModel:
        """Create a new model instance."""
        model_name = model_name.lower()

        default_configs = {
            "temperature": kwargs.get("temperature", 0.3),
            "max_tokens": kwargs.get("max_tokens", 8000),
        }

        if model_name in GEMINI_MODELS:
            return self._create_gemini_model(model_name, default_configs, json_mode, **kwargs)
        elif model_name in ANTHROPIC_MODELS:
            return self._create_anthropic_model(model_name, default_configs, **kwargs)
        elif model_name in OPENAI_MODELS:
            return self._create_openai_model(model_name, default_configs, json_mode, **kwargs)
        else:
            raise ValueError(f"Unsupported model: {model_name}")

    def _create_gemini_model(self, model_name: str, default_configs: dict, json_mode: bool, **kwargs) -> ChatGoogleGenerativeAI:
        """Create a Google Gemini model instance."""
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.gemini_api_key
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required for Gemini models")

        extra = {k: v for k, v in kwargs.items() if k not in ["temperature", "max_tokens"]}
        if json_mode:
            extra["response_mime_type"] = "application/json"

        return ChatGoogleGenerativeAI(
            google_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_output_tokens=default_configs["max_tokens"],
            **extra
        )

    def _create_anthropic_model(self, model_name: str, default_configs: dict, **kwargs) -> ChatAnthropic:
        """Create an Anthropic (Claude) model instance."""
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.anthropic_api_key
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY is required for Claude models")

        # Claude has no JSON response mode; prompts ask for raw JSON instead
        return ChatAnthropic(
            anthropic_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_tokens=default_configs["max_tokens"],
            **{k: v for k, v in kwargs.items() if k not in ["temperature", "max_tokens"]}
        )

    def _create_openai_model(self, model_name: str, default_configs: dict, json_mode: bool, **kwargs):
        """Create an OpenAI model instance."""
        user_api_key = kwargs.pop("api_key", None)
        api_key = user_api_key or self.settings.openai_api_key
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required for OpenAI models")

        model = ChatOpenAI(
            openai_api_key=api_key,
            model=model_name,
            temperature=default_configs["temperature"],
            max_tokens=default_configs["max_tokens"],
            **{k: v for k, v in kwargs.items() if k not in ["temperature", "max_tokens"]}
        )
        if json_mode:
            return model.bind(response_format={"type": "json_object"})
        return model

    def get_available_models(self) -> Dict[str, Dict[str, Any]]:
        """
        Get information about available models based on configured API keys.

        Returns:
            Dictionary of available models and their capabilities
        """
        available = {}

        if self.settings.gemini_api_key:
            available.update({
                "gemini-2.5-flash": {
                    "provider": "Google",
                    "description": "Gemini 2.5 Flash - Fast, default for every tool",
                    "capabilities": ["text", "vision", "json", "streaming"],
                    "context_window": 1048576
                },
                "gemini-2.5-pro": {
                    "provider": "Google",
                    "description": "Gemini 2.5 Pro - Higher quality, slower",
                    "capabilities": ["text", "vision", "json", "streaming", "reasoning"],
                    "context_window": 1048576
                }
            })

        if self.settings.anthropic_api_key:
            available.update({
                "claude-sonnet-4-5-20250929": {
                    "provider": "Anthropic",
                    "description": "Claude Sonnet 4.5 (2025-09-29)",
                    "capabilities": ["text", "vision", "streaming", "reasoning"],
                    "context_window": 200000
                },
                "claude-haiku-4-5-20251001": {
                    "provider": "Anthropic",
                    "description": "Claude Haiku 4.5 (2025-10-01)",
                    "capabilities": ["text", "vision", "streaming"],
                    "context_window": 200000
                }
            })

        if self.settings.openai_api_key:
            available.update({
                "gpt-4o": {
                    "provider": "OpenAI",
                    "description": "GPT-4o - Multimodal with JSON mode",
                    "capabilities": ["text", "vision", "json", "streaming"],
                    "context_window": 128000
                },
                "gpt-4o-mini": {
                    "provider": "OpenAI",
                    "description": "GPT-4o mini - Fast and inexpensive",
                    "capabilities": ["text", "vision", "json", "streaming"],
                    "context_window": 128000
                }
            })

        return available

    def validate_model_availability(self, model_name: str) -> bool:
        """
        Check if a model is available based on API key configuration.

        Args:
            model_name: Name of the model to check

        Returns:
            True if model is available, False otherwise
        """
        return model_name.lower() in self.get_available_models()
