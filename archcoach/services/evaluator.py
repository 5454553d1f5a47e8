"""
Architecture evaluator.

Builds the evaluation prompt from the static configuration and the
(requirement-injected) design payload, asks the model for a verdict and
parses it. Failures degrade to a scored-zero envelope instead of an HTTP error.
"""

import json
import logging
from typing import Any, Dict

from archcoach.errors import ParseError, UpstreamError
from archcoach.services.component_catalog import EvaluationConfig
from archcoach.services.model_gateway import ModelGateway
from archcoach.services.requirement_injector import inject_requirements

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_PARTIAL = "partial_success"
STATUS_ERROR = "error"

DESIGN_DATA_LABEL = "\nUser Design Data:\n"


def strip_code_fences(raw: str) -> str:
    """Remove Markdown ```json / ``` markers and surrounding whitespace."""
    return raw.replace("```json", "").replace("```", "").strip()


def parse_verdict_strict(raw: str) -> Dict[str, Any]:
    """
    Parse a model reply into a verdict object.

    Raises:
        ParseError: If the cleaned text is not a JSON object
    """
    cleaned = strip_code_fences(raw)
    try:
        verdict = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ParseError(f"Verdict is not valid JSON: {e}", raw_text=cleaned) from e
    if not isinstance(verdict, dict):
        raise ParseError("Verdict is not a JSON object", raw_text=cleaned)
    return verdict


def parse_verdict(raw: str) -> Dict[str, Any]:
    """
    Parse a model reply, degrading to a partial-success envelope.

    The verdict content is not validated beyond a successful parse.
    """
    try:
        verdict = parse_verdict_strict(raw)
    except ParseError as e:
        logger.warning(f"Falling back to partial_success: {e}")
        return {"score": 0, "feedback": e.raw_text, "status": STATUS_PARTIAL}
    verdict.setdefault("status", STATUS_SUCCESS)
    return verdict


def error_envelope() -> Dict[str, Any]:
    return {"score": 0, "feedback": "Error", "status": STATUS_ERROR}


class ArchitectureEvaluator:
    """Scores a learner's diagram against its scenario requirements."""

    def __init__(self, gateway: ModelGateway, config: EvaluationConfig):
        self.gateway = gateway
        self.config = config

    def build_prompt(self, payload: Dict[str, Any]) -> str:
        """Rendered instructions, label and the payload as JSON."""
        design_json = json.dumps(payload, ensure_ascii=False)
        return f"{self.config.system_prompt}{DESIGN_DATA_LABEL}{design_json}"

    async def evaluate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Evaluate a design payload.

        Args:
            payload: Request body with scenario, nodes and edges

        Returns:
            Verdict dict with a status of success, partial_success or error
        """
        prompt = self.build_prompt(inject_requirements(payload))
        try:
            raw = await self.gateway.generate(prompt)
        except UpstreamError as e:
            logger.error(f"Evaluation failed upstream: {e}")
            return error_envelope()
        return parse_verdict(raw)
