"""
Model client factory

Creates the appropriate client instance based on the model name.
"""

from __future__ import annotations

from tech_screen_tagging.harness_config import HarnessConfig, load_config
from tech_screen_tagging.infrastructure.model_clients.base import ModelClient
from tech_screen_tagging.infrastructure.model_clients.claude import ClaudeClient
from tech_screen_tagging.infrastructure.model_clients.lmstudio import LMStudioClient
from tech_screen_tagging.infrastructure.model_clients.vertex_ai import VertexAIClient


def create_client(model_name: str, config: HarnessConfig | None = None) -> ModelClient:
    """
    Create the appropriate client based on the model name

    Args:
        model_name: Model name
        config: HarnessConfig (loads from env if not provided)

    Returns:
        ModelClient: The appropriate client instance
    """
    if config is None:
        config = load_config()

    retries = config.tagger.max_retries
    retry_delay = config.tagger.retry_delay_seconds

    if model_name.startswith("lmstudio/"):
        return LMStudioClient(
            model_name,
            base_url=config.lmstudio.base_url,
            api_key=config.lmstudio.api_key,
            max_retries=retries,
            retry_delay_seconds=retry_delay,
        )
    elif model_name.startswith("claude"):
        return ClaudeClient(model_name, max_retries=retries, retry_delay_seconds=retry_delay)
    else:
        return VertexAIClient(
            model_name,
            project_id=config.vertex.project_id,
            location=config.vertex.location,
            timeout_seconds=config.evaluation.timeout_seconds,
            max_retries=retries,
            retry_delay_seconds=retry_delay,
        )
