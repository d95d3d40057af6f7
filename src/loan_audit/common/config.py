"""Configuration for the document intelligence collaborator.

Settings are plain values. The environment is only read by
``Settings.from_env()``, which callers invoke at the edge (CLI) and then
pass the instance into the collaborator's constructor.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL_ID = "us.anthropic.claude-3-5-sonnet-20241022-v2:0"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class Settings:
    """Settings for the Bedrock-backed analysis call."""

    # Bedrock Configuration
    model_id: str = DEFAULT_MODEL_ID
    aws_region: str = DEFAULT_REGION

    # Generation Configuration
    max_tokens: int = 8192
    temperature: float = 0.1

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Create Settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            model_id=env.get("BEDROCK_MODEL_ID", DEFAULT_MODEL_ID),
            aws_region=env.get("AWS_REGION", DEFAULT_REGION),
            max_tokens=int(env.get("MAX_TOKENS", "8192")),
            temperature=float(env.get("TEMPERATURE", "0.1")),
        )

    def validate(self) -> None:
        """Validate settings are usable."""
        if not self.model_id:
            raise ValueError("BEDROCK_MODEL_ID must not be empty")
        if self.max_tokens <= 0:
            raise ValueError("MAX_TOKENS must be positive")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError("TEMPERATURE must be between 0 and 1")
