"""
Business logic services for the coaching backend.
"""

from archcoach.services.model_gateway import ModelGateway
from archcoach.services.persona import PersonaPromptBuilder, PartnerRole
from archcoach.services.conversation import ConversationOrchestrator
from archcoach.services.requirement_injector import inject_requirements
from archcoach.services.component_catalog import EvaluationConfig, load_evaluation_config
from archcoach.services.evaluator import ArchitectureEvaluator
from archcoach.services.project_store import ProjectStore

__all__ = [
    "ModelGateway",
    "PersonaPromptBuilder",
    "PartnerRole",
    "ConversationOrchestrator",
    "inject_requirements",
    "EvaluationConfig",
    "load_evaluation_config",
    "ArchitectureEvaluator",
    "ProjectStore",
]
