"""
FastAPI dependencies wiring services to requests.
"""

from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends, Request

from archcoach.config import get_settings
from archcoach.database import get_session_factory
from archcoach.services.component_catalog import EvaluationConfig
from archcoach.services.conversation import ConversationOrchestrator
from archcoach.services.evaluator import ArchitectureEvaluator
from archcoach.services.model_gateway import ModelGateway
from archcoach.services.project_store import ProjectStore


@lru_cache()
def get_model_gateway() -> ModelGateway:
    """
    Shared gateway, built on first use.

    Raises:
        ConfigurationError: If ANTHROPIC_API_KEY is not set
    """
    return ModelGateway(get_settings())


def get_evaluation_config(request: Request) -> EvaluationConfig:
    """Evaluation configuration loaded by the application lifespan."""
    return request.app.state.evaluation_config


def get_conversation_orchestrator(
    gateway: ModelGateway = Depends(get_model_gateway),
) -> ConversationOrchestrator:
    return ConversationOrchestrator(gateway)


def get_architecture_evaluator(
    gateway: ModelGateway = Depends(get_model_gateway),
    config: EvaluationConfig = Depends(get_evaluation_config),
) -> ArchitectureEvaluator:
    return ArchitectureEvaluator(gateway, config)


def get_project_store() -> Generator[Optional[ProjectStore], None, None]:
    """
    Provide a project store bound to a request-scoped session.

    Yields None when persistence is disabled.
    """
    if not get_settings().persistence_enabled:
        yield None
        return

    db = get_session_factory()()
    try:
        yield ProjectStore(db)
    finally:
        db.close()
