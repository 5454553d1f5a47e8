"""
Persona prompt builder.

Combines a scenario's hidden context with a partner-role overlay into the
single instruction the stakeholder persona speaks from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence

from archcoach.schemas.chat import ChatRole, ChatTurn
from archcoach.services.scenario_catalog import ScenarioId, get_hidden_context

CUSTOM_FALLBACK_INSTRUCTION = "あなたはシステムアーキテクチャのクライアントです。"

IN_CHARACTER_DIRECTIVE = """{hidden_context}

ユーザー（システムアーキテクト）からの質問に対して、上記の立場・要件に基づいて回答してください。
回答は簡潔に、かつ自然な会話口調で行ってください。
あなたは発注者であり、アーキテクチャの正解（使うべきコンポーネントや構成）をあなたから提示してはいけません。"""


class PartnerRole(str, Enum):
    """Behavioral stance of the simulated stakeholder."""
    CEO = "ceo"
    CTO = "cto"
    CFO = "cfo"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: str) -> "PartnerRole":
        """Unknown roles get the generic stance."""
        try:
            return cls(value)
        except ValueError:
            return cls.GENERIC


ROLE_OVERLAYS: Dict[PartnerRole, str] = {
    PartnerRole.CFO: """
【あなたの役割: 財務担当 (CFO)】
- 何よりもコストを気にします。月額費用や初期費用を必ず確認してください。
- 高額なマネージドサービスや冗長構成が提案されたら「本当に必要なのか」と費用対効果を問いただしてください。
- 技術的な詳細には深入りせず、お金とリスクの観点で判断してください。""",
    PartnerRole.CTO: """
【あなたの役割: 技術責任者 (CTO)】
- 品質と堅牢性を最重視します。単一障害点(SPOF)は絶対に許しません。
- 提案に対しては「障害時にどうなるのか」「スケールはどうするのか」を厳しく質問してください。
- 技術用語を使って具体的に議論して構いませんが、正解の構成は自分から言わないでください。""",
    PartnerRole.CEO: """
【あなたの役割: 非技術系CEO】
- 夢やビジョンを熱く語りますが、要件はふわっとしています。技術のことはわかりません。
- ユーザー数・トラフィック・予算・可用性などの具体的な数値は、直接聞かれても最初は答えないでください。
  「たくさん使ってほしい」「なるべく安く」のように曖昧にはぐらかしてください。
- アーキテクトが同じ点を具体的に掘り下げて再度質問してきた場合にのみ、数値のヒントを少しずつ出してください。""",
    PartnerRole.GENERIC: """
【あなたの役割: 発注担当者】
- 一般的なビジネス担当者として、丁寧に受け答えしてください。
- 聞かれたことには答えますが、聞かれていない要件は自分から話さないでください。""",
}


@dataclass(frozen=True)
class PersonaInstruction:
    """
    The persona's instruction and how many leading transcript turns it used up.

    consumed_turns is 1 when a custom scenario's opening system turn became
    the instruction, otherwise 0.
    """
    instruction: str
    consumed_turns: int = 0


class PersonaPromptBuilder:
    """Builds the persona instruction from scenario, role and transcript head."""

    def build_base(self, scenario_id: str, messages: Sequence[ChatTurn]) -> PersonaInstruction:
        """
        Build the scenario part of the instruction, without the role overlay.

        Args:
            scenario_id: Scenario identifier from the request
            messages: Full transcript as resubmitted by the client

        Returns:
            Base instruction and the number of consumed leading turns
        """
        if scenario_id == ScenarioId.CUSTOM.value:
            if messages and messages[0].role == ChatRole.SYSTEM:
                # An empty briefing is still consumed
                return PersonaInstruction(
                    messages[0].content or CUSTOM_FALLBACK_INSTRUCTION,
                    consumed_turns=1,
                )
            return PersonaInstruction(CUSTOM_FALLBACK_INSTRUCTION)

        hidden_context = get_hidden_context(scenario_id)
        return PersonaInstruction(IN_CHARACTER_DIRECTIVE.format(hidden_context=hidden_context))

    def build(
        self,
        scenario_id: str,
        partner_role: str,
        messages: Sequence[ChatTurn],
    ) -> PersonaInstruction:
        """Build the full instruction: scenario base followed by the role overlay."""
        base = self.build_base(scenario_id, messages)
        overlay = ROLE_OVERLAYS[PartnerRole.parse(partner_role)]
        return PersonaInstruction(
            instruction=f"{base.instruction}\n{overlay}",
            consumed_turns=base.consumed_turns,
        )
