"""
Scenario catalog: the static tables behind every interview.

Holds the fixed scenarios with their hidden stakeholder context and the
canonical requirement specs for each custom-scenario difficulty. All tables
are read-only and keyed by enums, so adding a scenario is a data change.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from archcoach.schemas.chat import ChatRole, ChatTurn


class ScenarioId(str, Enum):
    """Known scenario identifiers."""
    INTERNAL_TOOL = "internal_tool"
    SNS_APP = "sns_app"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str) -> Optional["ScenarioId"]:
        try:
            return cls(value)
        except ValueError:
            return None


class Difficulty(str, Enum):
    """Scale tiers for custom scenarios."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class DifficultySpec:
    """Server-authoritative requirements for a custom scenario tier."""
    users: str
    traffic: str
    budget: str
    availability: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Scenario:
    """
    A fixed interview situation.

    Attributes:
        id: Scenario identifier
        title: Title shown on the selection screen
        description: One-line description shown to the learner
        requirements: Display requirements (users, traffic, availability, budget)
        hidden_context: What the persona knows but must not state outright
    """
    id: ScenarioId
    title: str
    description: str
    requirements: Dict[str, str]
    hidden_context: str


GENERIC_CUSTOMER_CONTEXT = "あなたは一般的なシステムの顧客です。"

SCENARIOS: Dict[ScenarioId, Scenario] = {
    ScenarioId.INTERNAL_TOOL: Scenario(
        id=ScenarioId.INTERNAL_TOOL,
        title="社内勤怠管理システム",
        description="社員50名が毎朝9時に打刻するためのシンプルなシステム。",
        requirements={
            "users": "50 users (Internal)",
            "traffic": "Very Low (Peak at 9:00 AM only)",
            "availability": "Moderate (Can allow short downtimes at night)",
            "budget": "Low (Avoid over-engineering)",
        },
        hidden_context=(
            "あなたは「社内勤怠管理ツール」の発注担当者（総務部）です。\n"
            "ITには詳しくありません。\n"
            "【裏要件】\n"
            "- 予算はとにかく安く済ませたい。\n"
            "- 朝9時に社員50人が一斉にアクセスするが、それ以外は誰も使わない。\n"
            "- データは消えると困るが、数分止まるくらいなら許容できる。"
        ),
    ),
    ScenarioId.SNS_APP: Scenario(
        id=ScenarioId.SNS_APP,
        title="画像投稿SNS (Twitter Clone)",
        description="ユーザーが写真を投稿し、タイムラインで見ることができるアプリ。",
        requirements={
            "users": "1 Million DAU (Global)",
            "traffic": "High (Read heavy, Write heavy)",
            "availability": "Critical (24/7 uptime required)",
            "budget": "High (Performance is priority)",
        },
        hidden_context=(
            "あなたは「次世代SNSアプリ」のスタートアップCEOです。\n"
            "野心的で、急成長を想定しています。\n"
            "【裏要件】\n"
            "- 世界中からアクセスがある想定。\n"
            "- とにかく「サクサク動く」ことが最重要。\n"
            "- 24時間365日止まってはいけない。"
        ),
    ),
}

DIFFICULTY_SPECS: Dict[Difficulty, DifficultySpec] = {
    Difficulty.SMALL: DifficultySpec(
        users="50〜100人程度",
        traffic="運用コストをかけられないため、メンテナンスフリーな構成を好む",
        budget="月額5,000円以内 (可能な限り安く)",
        availability="Best Effort (夜間停止可)",
    ),
    Difficulty.MEDIUM: DifficultySpec(
        users="10万DAU, ピーク時秒間100リクエスト",
        traffic="急激なアクセス増に耐えられるスケーラビリティが必須",
        budget="月額50万円〜100万円",
        availability="High (Multi-AZ推奨)",
    ),
    Difficulty.LARGE: DifficultySpec(
        users="1000万ユーザー, グローバル展開",
        traffic="単一障害点(SPOF)の完全排除と、データロス発生時の法的リスク回避",
        budget="無制限（可用性とレイテンシが最優先）",
        availability="Critical (24/7)",
    ),
}

# Applied to any difficulty tag outside small/medium/large
FALLBACK_DIFFICULTY_SPEC = DifficultySpec(
    users="10万DAU",
    traffic="Standard",
    budget="Standard",
    availability="High",
)

# Briefing wording for the custom-scenario opening transcript
CUSTOM_SCALE_LABELS: Dict[Difficulty, str] = {
    Difficulty.SMALL: "小規模（個人開発・社内ツール）",
    Difficulty.MEDIUM: "中規模（急成長スタートアップ）",
    Difficulty.LARGE: "大規模（ミッションクリティカル）",
}

CUSTOM_SCENARIO_ENTRY = {
    "id": ScenarioId.CUSTOM.value,
    "title": "カスタムシナリオ",
    "description": "作りたいシステムを自由に定義し、クライアント役のAIとの会話で要件を探ります。",
    "requirements": {
        "users": "ヒアリングで特定",
        "traffic": "ヒアリングで特定",
        "availability": "ヒアリングで特定",
        "budget": "ヒアリングで特定",
    },
    "is_custom": True,
}

CUSTOM_BRIEFING_TEMPLATE = """---
Role: System Client
Task: Simulate a client for system architecture design.
Scenario:
  Title: "{title}"
  Description: "{description}"
  Scale: "{scale}"
Hidden_Context:
  Users: "{users}"
  Budget: "{budget}"
  Critical_Constraint: "{constraint}"
  Domain_Specific_Constraint: "Please invent one technical constraint specific to '{title}' (e.g., real-time requirement, legacy system integration)."
Behavior_Rules:
  - Act as a non-technical stakeholder initially.
  - Reveal "Hidden_Context" information ONLY when the user asks specifically about relevant topics (e.g., "How many users?", "What is the budget?").
  - If the user presents a design without uncovering the "Critical_Constraint", point out the flaw in the evaluation phase, not during the chat.
  - Be professional but demanding.
Evaluation_Criteria:
  - Did the user ask about the scale/users?
  - Did the user ask about the budget?
  - Does the proposed architecture solve the Critical_Constraint?
---
Please start the conversation by acknowledging the request for "{title}" and waiting for the user to interview you."""

CUSTOM_GREETING_TEMPLATE = (
    "ご依頼ありがとうございます。「{title}」のシステム構築ですね。\n\n"
    "今回のプロジェクトについて、どのような点から詳細を詰めていきましょうか？"
)


def get_scenario(scenario_id: str) -> Optional[Scenario]:
    """Look up a fixed scenario. Returns None for custom and unknown ids."""
    key = ScenarioId.parse(scenario_id)
    if key is None:
        return None
    return SCENARIOS.get(key)


def get_hidden_context(scenario_id: str) -> str:
    """
    Get the hidden stakeholder context for a fixed scenario.

    Unknown identifiers get the generic customer persona.
    """
    scenario = get_scenario(scenario_id)
    if scenario is None:
        return GENERIC_CUSTOMER_CONTEXT
    return scenario.hidden_context


def get_difficulty_spec(difficulty: Any) -> DifficultySpec:
    """
    Get the canonical requirements for a difficulty tag.

    Args:
        difficulty: Tag as sent by the client (any type)

    Returns:
        The matching spec, or FALLBACK_DIFFICULTY_SPEC for anything unrecognized
    """
    try:
        return DIFFICULTY_SPECS[Difficulty(difficulty)]
    except ValueError:
        return FALLBACK_DIFFICULTY_SPEC


def list_scenarios() -> List[Dict[str, Any]]:
    """Scenarios for the selection screen, custom entry last."""
    entries = [
        {
            "id": scenario.id.value,
            "title": scenario.title,
            "description": scenario.description,
            "requirements": dict(scenario.requirements),
            "is_custom": False,
        }
        for scenario in SCENARIOS.values()
    ]
    entries.append(dict(CUSTOM_SCENARIO_ENTRY))
    return entries


def build_custom_opening(title: str, description: str, difficulty: str) -> List[ChatTurn]:
    """
    Build the opening transcript for a custom scenario.

    The first turn is the hidden briefing (role "system"); the persona
    consumes it as its instruction on every chat call. The second turn is the
    persona's greeting.
    """
    try:
        tier = Difficulty(difficulty)
    except ValueError:
        tier = Difficulty.MEDIUM
    spec = DIFFICULTY_SPECS[tier]

    briefing = CUSTOM_BRIEFING_TEMPLATE.format(
        title=title,
        description=description,
        scale=CUSTOM_SCALE_LABELS[tier],
        users=spec.users,
        budget=spec.budget,
        constraint=spec.traffic,
    )
    return [
        ChatTurn(role=ChatRole.SYSTEM, content=briefing),
        ChatTurn(role=ChatRole.ASSISTANT, content=CUSTOM_GREETING_TEMPLATE.format(title=title)),
    ]
