"""Document intelligence collaborator backed by Amazon Bedrock.

Sends the agreement text to a Claude model on Bedrock and hands the
returned JSON to the Result Normalizer. Configuration is injected through
``Settings``; the Bedrock client can be injected for tests.
"""

import json
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..analysis.normalizer import decode_payload, normalize
from ..common.aws_clients import get_bedrock_client
from ..common.config import Settings
from ..common.exceptions import IntelligenceError, SchemaViolation
from ..common.models import AnalysisResult
from ..common.safe_log import safe_log
from .prompts import SYSTEM_PROMPT, build_user_prompt

ANTHROPIC_VERSION = "bedrock-2023-05-31"


class DocumentIntelligenceClient:
    """Produces structured analysis payloads for loan agreement text."""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        settings.validate()
        self.settings = settings
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = get_bedrock_client(self.settings.aws_region)
        return self._client

    def build_request(self, document_text: str) -> dict[str, Any]:
        """Build the invoke_model body, prefilling the assistant turn with '{'."""
        return {
            "anthropic_version": ANTHROPIC_VERSION,
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [
                {"role": "user", "content": build_user_prompt(document_text)},
                {"role": "assistant", "content": "{"},
            ],
        }

    def fetch_payload(self, document_text: str) -> Any:
        """Call the model and return the decoded (not yet validated) payload."""
        if not document_text or not document_text.strip():
            raise IntelligenceError("Document text is empty", model_id=self.settings.model_id)

        body = self.build_request(document_text)
        safe_log("Invoking analysis model", model=self.settings.model_id, chars=len(document_text))

        try:
            response = self.client.invoke_model(
                modelId=self.settings.model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(body),
            )
            response_body_raw = response["body"].read()
        except (BotoCoreError, ClientError) as e:
            raise IntelligenceError(
                f"Bedrock API call failed: {e}", model_id=self.settings.model_id, cause=e
            )

        if not response_body_raw:
            raise IntelligenceError("Bedrock returned empty response body", model_id=self.settings.model_id)

        try:
            response_body = json.loads(response_body_raw)
        except json.JSONDecodeError as e:
            raise IntelligenceError(
                f"Failed to parse Bedrock response JSON: {e}", model_id=self.settings.model_id, cause=e
            )

        if "error" in response_body:
            error = response_body["error"]
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            raise IntelligenceError(f"Bedrock error: {message}", model_id=self.settings.model_id)

        if not response_body.get("content"):
            raise IntelligenceError("Bedrock response missing 'content' field", model_id=self.settings.model_id)

        usage = response_body.get("usage", {})
        safe_log(
            "Analysis model responded",
            input_tokens=usage.get("input_tokens", 0),
            output_tokens=usage.get("output_tokens", 0),
        )

        # Prepend the '{' used as assistant prefill
        content = "{" + response_body["content"][0].get("text", "")
        try:
            return decode_payload(content)
        except SchemaViolation as e:
            raise IntelligenceError(
                "Failed to parse analysis payload", model_id=self.settings.model_id, cause=e
            )

    def analyze(self, document_text: str) -> AnalysisResult:
        """Analyze agreement text into a normalized AnalysisResult.

        Raises:
            IntelligenceError: If the model call or its decoding fails
            SchemaViolation: If the payload does not satisfy the schema contract
        """
        return normalize(self.fetch_payload(document_text), document_text)
