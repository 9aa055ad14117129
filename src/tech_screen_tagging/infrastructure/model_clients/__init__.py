"""
Model client package

Provides a unified async interface to each LLM provider.
"""

from tech_screen_tagging.infrastructure.model_clients.base import ModelClient
from tech_screen_tagging.infrastructure.model_clients.factory import create_client
from tech_screen_tagging.domain.value_objects import ModelResponse

__all__ = ["ModelClient", "ModelResponse", "create_client"]
