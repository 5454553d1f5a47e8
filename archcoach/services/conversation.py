"""
Conversation orchestrator.

Replays the client-submitted transcript into a single prompt for the persona
and asks the model for the next Client line. Nothing is kept between requests.
"""

import logging
from typing import List, Sequence

from archcoach.schemas.chat import ChatRequest, ChatRole, ChatTurn
from archcoach.services.model_gateway import ModelGateway
from archcoach.services.persona import PersonaPromptBuilder

logger = logging.getLogger(__name__)

HISTORY_SEPARATOR = "\n\n--- 会話履歴 ---\n"
ARCHITECT_LABEL = "Architect"
CLIENT_LABEL = "Client"
REPLY_CUE = f"{CLIENT_LABEL}: "


def render_transcript(messages: Sequence[ChatTurn], consumed_turns: int = 0) -> List[str]:
    """
    Render the transcript as speaker-labelled lines.

    Turns before consumed_turns are skipped. System turns anywhere else are
    dropped, never shown to the model as dialogue.
    """
    lines = []
    for turn in messages[consumed_turns:]:
        if turn.role == ChatRole.SYSTEM:
            continue
        speaker = ARCHITECT_LABEL if turn.role == ChatRole.USER else CLIENT_LABEL
        lines.append(f"{speaker}: {turn.content}")
    return lines


def build_prompt(instruction: str, messages: Sequence[ChatTurn], consumed_turns: int = 0) -> str:
    """Instruction, separator, rendered history and the trailing reply cue."""
    history = "".join(f"{line}\n" for line in render_transcript(messages, consumed_turns))
    return f"{instruction}{HISTORY_SEPARATOR}{history}{REPLY_CUE}"


class ConversationOrchestrator:
    """Produces the persona's next reply for a chat request."""

    def __init__(self, gateway: ModelGateway, persona_builder: PersonaPromptBuilder = None):
        self.gateway = gateway
        self.persona_builder = persona_builder or PersonaPromptBuilder()

    def prepare(self, request: ChatRequest) -> str:
        """Build the full prompt for a request without calling the model."""
        persona = self.persona_builder.build(
            request.scenario_id,
            request.partner_role,
            request.messages,
        )
        return build_prompt(persona.instruction, request.messages, persona.consumed_turns)

    async def reply(self, request: ChatRequest) -> str:
        """
        Get the persona's next reply.

        Raises:
            UpstreamError: If the model call fails
        """
        logger.info(
            f"Chat request for scenario={request.scenario_id} role={request.partner_role} "
            f"turns={len(request.messages)}"
        )
        prompt = self.prepare(request)
        return await self.gateway.generate(prompt)
