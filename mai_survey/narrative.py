from __future__ import annotations

from typing import List, Mapping

from .constants import (
    DEFAULT_CONTACT,
    DIMENSION_BY_NAME,
    NAME_SEPARATOR,
    NARRATIVE_HIGH_THRESHOLD,
    NARRATIVE_LOW_THRESHOLD,
    NARRATIVE_PLACEHOLDER,
)

FEEDBACK_TEMPLATE: List[str] = [
    "你完成了这份 52 道题的元认知意识测评。这不仅是一份问卷，更像是一面镜子，让你看到自己在学习中的思考方式与自我调节能力。"
    "每一次选择，都反映出你对学习策略、专注程度、以及思考习惯的真实感受。迈出这一步，说明你已经在探索自我成长的路上，踏出了非常关键的一步。",
    "本次测评显示，你在「{high}」方面表现突出，说明你已经具备良好的学习流程管理与策略运用能力。"
    "请继续保持这些优势，它们是你稳定学习和持久成长的基石。",
    "同时，测评也提示你在「{low}」方面还有提升空间。这些并不是弱点，而是可被激活的潜力。"
    "如果你愿意尝试新的策略、培养反思习惯，这些能力完全可以通过练习快速提升。",
    "元认知就像我们内在的指南针，帮助我们看清方向、制定路径，并调整节奏。"
    "愿你在未来的每一次学习旅程中，都能带着觉察前行，温柔而坚定地陪伴自己。",
    "📩 想了解你的具体成长路径和行动建议？欢迎联系【{contact}】，获取1对1报告解读与指导。",
]


def _display_names(names: List[str]) -> str:
    if not names:
        return NARRATIVE_PLACEHOLDER
    return NAME_SEPARATOR.join(
        DIMENSION_BY_NAME[name].zh if name in DIMENSION_BY_NAME else name for name in names
    )


def high_dimensions(normalized_scores: Mapping[str, float]) -> List[str]:
    return [name for name, value in normalized_scores.items() if value >= NARRATIVE_HIGH_THRESHOLD]


def low_dimensions(normalized_scores: Mapping[str, float]) -> List[str]:
    return [name for name, value in normalized_scores.items() if value <= NARRATIVE_LOW_THRESHOLD]


def generate_feedback(normalized_scores: Mapping[str, float], contact: str = DEFAULT_CONTACT) -> str:
    """
    Build the five-paragraph personalised narrative.

    Dimensions scoring >= 8 are praised and those <= 5 flagged for growth;
    anything in between appears in neither list. An empty list is replaced by "部分维度".
    """
    high = _display_names(high_dimensions(normalized_scores))
    low = _display_names(low_dimensions(normalized_scores))
    paragraphs = [
        text.format(high=high, low=low, contact=contact or DEFAULT_CONTACT)
        for text in FEEDBACK_TEMPLATE
    ]
    return "\n\n".join(paragraphs)


def feedback_paragraphs(text: str) -> List[str]:
    return [line for line in text.split("\n") if line.strip()]
