"""
Architecture evaluation API.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from archcoach.api.deps import get_architecture_evaluator
from archcoach.middleware.rate_limiter import limiter, evaluate_limit
from archcoach.services.evaluator import ArchitectureEvaluator

router = APIRouter()


@router.post("")
@limiter.limit(evaluate_limit)
async def evaluate_architecture(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    evaluator: ArchitectureEvaluator = Depends(get_architecture_evaluator),
):
    """
    Score a diagram against its scenario.

    The body is the editor's design data: {"scenario": {...}, "nodes": [...],
    "edges": [...]}. Custom-scenario requirements are replaced server-side.
    Always answers 200; failures are signalled through "status".
    """
    return await evaluator.evaluate(payload)
