"""
Stakeholder chat API.

The learner interviews a simulated stakeholder who holds hidden requirements.
The client resubmits the whole transcript with every call.
"""

import logging

from fastapi import APIRouter, Depends, Request

from archcoach.api.deps import get_conversation_orchestrator
from archcoach.errors import UpstreamError
from archcoach.middleware.rate_limiter import limiter, chat_limit
from archcoach.schemas.chat import ChatRequest, ChatResponse
from archcoach.services.conversation import ConversationOrchestrator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ChatResponse)
@limiter.limit(chat_limit)
async def chat_with_stakeholder(
    request: Request,
    chat_request: ChatRequest,
    orchestrator: ConversationOrchestrator = Depends(get_conversation_orchestrator),
):
    """
    Get the persona's next reply.

    Upstream failures are reported in the body (status "error"), never as
    an HTTP error code.
    """
    try:
        reply = await orchestrator.reply(chat_request)
    except UpstreamError as e:
        logger.error(f"Chat error for scenario {chat_request.scenario_id}: {e}")
        return ChatResponse(reply="Error", status="error")

    return ChatResponse(reply=reply, status="success")
