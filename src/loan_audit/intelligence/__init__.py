"""Document intelligence collaborator (external model) integration."""

from .bedrock_client import DocumentIntelligenceClient
from .prompts import SYSTEM_PROMPT, build_user_prompt

__all__ = [
    "DocumentIntelligenceClient",
    "SYSTEM_PROMPT",
    "build_user_prompt",
]
