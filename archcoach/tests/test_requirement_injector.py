"""
Tests for server-side requirement injection on custom scenarios.
"""

import copy
import pytest

from archcoach.services.requirement_injector import inject_requirements
from archcoach.services.scenario_catalog import (
    DIFFICULTY_SPECS,
    FALLBACK_DIFFICULTY_SPEC,
    Difficulty,
)


def _custom_payload(**scenario_fields):
    scenario = {
        "id": "custom",
        "isCustom": True,
        "requirements": {"users": "1B", "traffic": "tiny", "budget": "unlimited", "availability": "none"},
    }
    scenario.update(scenario_fields)
    return {"scenario": scenario, "nodes": [], "edges": []}


class TestInjectRequirements:
    """Tests for inject_requirements."""

    @pytest.mark.parametrize("tag", ["small", "medium", "large"])
    def test_client_requirements_are_replaced(self, tag):
        """Client values are discarded in favour of the canonical spec."""
        result = inject_requirements(_custom_payload(difficulty=tag))

        assert result["scenario"]["requirements"] == DIFFICULTY_SPECS[Difficulty(tag)].to_dict()

    def test_small_example(self, design_payload):
        """The '1B users' claim never survives injection."""
        result = inject_requirements(design_payload)

        assert result["scenario"]["requirements"]["users"] == "50〜100人程度"
        assert "1B" not in str(result["scenario"]["requirements"])

    @pytest.mark.parametrize("tag", ["unknown", "mediun", "XL", ""])
    def test_unrecognized_difficulty_uses_fallback(self, tag):
        """Unrecognized tags are normalized to the fallback spec."""
        result = inject_requirements(_custom_payload(difficulty=tag))

        assert result["scenario"]["requirements"] == FALLBACK_DIFFICULTY_SPEC.to_dict()

    def test_missing_difficulty_uses_fallback(self):
        """No difficulty at all is treated like an unrecognized one."""
        result = inject_requirements(_custom_payload())

        assert result["scenario"]["requirements"] == FALLBACK_DIFFICULTY_SPEC.to_dict()

    def test_null_difficulty_uses_fallback(self):
        """An explicit null difficulty gets the fallback spec."""
        result = inject_requirements(_custom_payload(difficulty=None))

        assert result["scenario"]["requirements"] == FALLBACK_DIFFICULTY_SPEC.to_dict()

    def test_requirements_added_when_absent(self):
        """A custom payload without requirements still gets the canonical spec."""
        payload = _custom_payload(difficulty="large")
        del payload["scenario"]["requirements"]

        result = inject_requirements(payload)

        assert result["scenario"]["requirements"] == DIFFICULTY_SPECS[Difficulty.LARGE].to_dict()

    def test_input_is_not_mutated(self, design_payload):
        """The caller's payload is left untouched."""
        original = copy.deepcopy(design_payload)

        inject_requirements(design_payload)

        assert design_payload == original

    def test_fixed_scenario_passes_through(self):
        """Non-custom scenarios keep their own requirements."""
        payload = {
            "scenario": {"id": "sns_app", "requirements": {"users": "1 Million DAU (Global)"}},
            "nodes": [],
            "edges": [],
        }

        assert inject_requirements(payload) == payload

    @pytest.mark.parametrize("flag", [False, "true", 1, None])
    def test_only_literal_true_is_custom(self, flag):
        """isCustom must be the boolean true to trigger injection."""
        payload = _custom_payload(difficulty="small", isCustom=flag)

        result = inject_requirements(payload)

        assert result["scenario"]["requirements"]["users"] == "1B"

    def test_payload_without_scenario(self):
        """Payloads without a scenario object are returned unchanged."""
        assert inject_requirements({"nodes": [], "edges": []}) == {"nodes": [], "edges": []}
        assert inject_requirements({"scenario": "custom"}) == {"scenario": "custom"}
