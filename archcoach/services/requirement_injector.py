"""
Requirement injector for custom-scenario evaluations.

The editor sends placeholder requirements for custom scenarios ("ヒアリングで特定").
Before evaluation they are replaced with the canonical spec for the declared
difficulty, so a client cannot inflate its score with invented numbers.
"""

import copy
import logging
from typing import Any, Dict

from archcoach.services.scenario_catalog import get_difficulty_spec

logger = logging.getLogger(__name__)


def inject_requirements(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of an evaluate payload with server-canonical requirements.

    Only scenarios with isCustom == true are touched. A missing, null or
    unrecognized difficulty gets the fallback spec.

    Args:
        payload: Evaluate request body (scenario + nodes + edges)

    Returns:
        Deep copy of payload; the input is never mutated
    """
    result = copy.deepcopy(payload)
    scenario = result.get("scenario")
    if not isinstance(scenario, dict) or scenario.get("isCustom") is not True:
        return result

    difficulty = scenario.get("difficulty")
    logger.info(f"Custom scenario detected, injecting specs for difficulty={difficulty!r}")
    scenario["requirements"] = get_difficulty_spec(difficulty).to_dict()
    return result
