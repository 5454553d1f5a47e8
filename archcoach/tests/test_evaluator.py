"""
Tests for the ArchitectureEvaluator.
Tests prompt assembly, verdict parsing and degraded responses.
"""

import json
import pytest

from archcoach.errors import ParseError, UpstreamError
from archcoach.services.evaluator import (
    DESIGN_DATA_LABEL,
    ArchitectureEvaluator,
    parse_verdict,
    parse_verdict_strict,
    strip_code_fences,
)


class TestParseVerdict:
    """Tests for verdict parsing."""

    def test_fenced_json_is_parsed(self):
        """Markdown fences around the JSON are removed."""
        raw = '```json\n{"score": 72, "feedback": "### OK", "improvement": "Add a cache"}\n```\n'

        verdict = parse_verdict(raw)

        assert verdict == {
            "score": 72,
            "feedback": "### OK",
            "improvement": "Add a cache",
            "status": "success",
        }

    def test_plain_json_is_parsed(self):
        """Unfenced JSON works too."""
        assert parse_verdict('{"score": 10}')["score"] == 10

    def test_invalid_json_degrades_to_partial_success(self):
        """Unparsable text is kept as feedback with score 0."""
        raw = "```json\nThe design looks fine overall.\n```"

        verdict = parse_verdict(raw)

        assert verdict == {
            "score": 0,
            "feedback": "The design looks fine overall.",
            "status": "partial_success",
        }

    def test_non_object_json_degrades(self):
        """A bare JSON value is not a verdict."""
        verdict = parse_verdict("[1, 2, 3]")

        assert verdict["status"] == "partial_success"
        assert verdict["feedback"] == "[1, 2, 3]"

    def test_strict_parse_raises(self):
        """The strict parser reports the cleaned text."""
        with pytest.raises(ParseError) as exc_info:
            parse_verdict_strict("```not json```")

        assert exc_info.value.raw_text == "not json"

    def test_strip_code_fences(self):
        """All fence markers are removed, not just the outer ones."""
        assert strip_code_fences("  ```json{}```  ") == "{}"


class TestArchitectureEvaluator:
    """Tests for ArchitectureEvaluator.evaluate."""

    @pytest.fixture
    def evaluator(self, mock_gateway, evaluation_config):
        return ArchitectureEvaluator(mock_gateway, evaluation_config)

    def test_prompt_layout(self, evaluator, evaluation_config):
        """Rendered instructions, label, then the payload JSON."""
        prompt = evaluator.build_prompt({"nodes": [], "edges": []})

        assert prompt == f'{evaluation_config.system_prompt}{DESIGN_DATA_LABEL}{{"nodes": [], "edges": []}}'

    @pytest.mark.asyncio
    async def test_prompt_uses_injected_requirements(self, evaluator, mock_gateway, design_payload):
        """The model sees canonical requirements, never the client's."""
        mock_gateway.generate.return_value = '{"score": 80, "feedback": "f", "improvement": "i"}'

        await evaluator.evaluate(design_payload)

        prompt = mock_gateway.generate.await_args.args[0]
        sent = json.loads(prompt.split(DESIGN_DATA_LABEL, 1)[1])
        assert sent["scenario"]["requirements"]["users"] == "50〜100人程度"
        assert '"1B"' not in prompt
        assert '- "Load Balancer"' in prompt

    @pytest.mark.asyncio
    async def test_success(self, evaluator, mock_gateway, design_payload):
        """A well-formed reply is returned as the verdict."""
        mock_gateway.generate.return_value = '```json\n{"score": 55, "feedback": "f", "improvement": "i"}\n```'

        verdict = await evaluator.evaluate(design_payload)

        assert verdict["score"] == 55
        assert verdict["status"] == "success"

    @pytest.mark.asyncio
    async def test_partial_success(self, evaluator, mock_gateway, design_payload):
        """Unparsable replies still reach the learner."""
        mock_gateway.generate.return_value = "スコア: 60点\n良い設計です"

        verdict = await evaluator.evaluate(design_payload)

        assert verdict == {"score": 0, "feedback": "スコア: 60点\n良い設計です", "status": "partial_success"}

    @pytest.mark.asyncio
    async def test_upstream_error_envelope(self, evaluator, mock_gateway, design_payload):
        """Upstream failures become the minimal error envelope."""
        mock_gateway.generate.side_effect = UpstreamError("Claude API error: 529", status_code=529)

        verdict = await evaluator.evaluate(design_payload)

        assert verdict == {"score": 0, "feedback": "Error", "status": "error"}
        assert mock_gateway.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_dangling_edges_are_tolerated(self, evaluator, mock_gateway):
        """Edges to unknown nodes are passed through without validation."""
        mock_gateway.generate.return_value = '{"score": 30}'
        payload = {"scenario": {"id": "sns_app"}, "nodes": [], "edges": [{"source": "a", "target": "b"}]}

        verdict = await evaluator.evaluate(payload)

        assert verdict["status"] == "success"
        assert '"source": "a"' in mock_gateway.generate.await_args.args[0]
