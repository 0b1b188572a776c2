# [CHANGE] Centralized MAI instrument tables and shared UI labels.
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Item:
    id: int
    text: str
    zh: str


@dataclass(frozen=True)
class Dimension:
    name: str
    zh: str
    desc: str
    items: Tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Level:
    min: float
    max: float
    label: str
    remark: str


# Schraw & Dennison (1994), 52 true/false items.
ITEMS: List[Item] = [
    Item(1, "I ask myself periodically if I am meeting my goals.", "我会定期问自己是否在实现目标。"),
    Item(2, "I consider several alternatives to a problem before I answer.", "在回答问题之前，我会考虑几种不同的解决方案。"),
    Item(3, "I try to use strategies that have worked in the past.", "我会尝试使用过去有效的学习策略。"),
    Item(4, "I pace myself while learning in order to have enough time.", "学习时我会控制节奏，以保证有足够的时间。"),
    Item(5, "I understand my intellectual strengths and weaknesses.", "我了解自己在智力上的优势和不足。"),
    Item(6, "I think about what I really need to learn before I begin a task.", "开始任务前，我会思考自己真正需要学习什么。"),
    Item(7, "I know how well I did once I finish a test.", "考试结束后，我知道自己考得怎么样。"),
    Item(8, "I set specific goals before I begin a task.", "开始任务前，我会设定具体的目标。"),
    Item(9, "I slow down when I encounter important information.", "遇到重要信息时，我会放慢速度。"),
    Item(10, "I know what kind of information is most important to learn.", "我知道哪类信息是最需要学习的。"),
    Item(11, "I ask myself if I have considered all options when solving a problem.", "解决问题时，我会问自己是否考虑了所有选项。"),
    Item(12, "I am good at organizing information.", "我擅长整理信息。"),
    Item(13, "I consciously focus my attention on important information.", "我会有意识地把注意力集中在重要信息上。"),
    Item(14, "I have a specific purpose for each strategy I use.", "我使用的每一种策略都有明确的目的。"),
    Item(15, "I learn best when I know something about the topic.", "当我对某个主题有所了解时，我学得最好。"),
    Item(16, "I know what the teacher expects me to learn.", "我知道老师希望我学到什么。"),
    Item(17, "I am good at remembering information.", "我擅长记住信息。"),
    Item(18, "I use different learning strategies depending on the situation.", "我会根据不同情境使用不同的学习策略。"),
    Item(19, "I ask myself if there was an easier way to do things after I finish a task.", "完成任务后，我会问自己是否有更简单的方法。"),
    Item(20, "I have control over how well I learn.", "我能掌控自己的学习效果。"),
    Item(21, "I periodically review to help me understand important relationships.", "我会定期复习，帮助自己理解重要的联系。"),
    Item(22, "I ask myself questions about the material before I begin.", "开始学习前，我会就学习材料向自己提问。"),
    Item(23, "I think of several ways to solve a problem and choose the best one.", "我会想出几种解决问题的方法，并选择最好的一种。"),
    Item(24, "I summarize what I've learned after I finish.", "学完之后，我会总结自己学到的内容。"),
    Item(25, "I ask others for help when I don't understand something.", "遇到不懂的地方，我会向别人求助。"),
    Item(26, "I can motivate myself to learn when I need to.", "需要的时候，我能激励自己去学习。"),
    Item(27, "I am aware of what strategies I use when I study.", "我清楚自己学习时使用了哪些策略。"),
    Item(28, "I find myself analyzing the usefulness of strategies while I study.", "学习时，我会分析所用策略是否有效。"),
    Item(29, "I use my intellectual strengths to compensate for my weaknesses.", "我会利用自己的优势来弥补不足。"),
    Item(30, "I focus on the meaning and significance of new information.", "我会关注新信息的含义和重要性。"),
    Item(31, "I create my own examples to make information more meaningful.", "我会自己举例，让信息更有意义。"),
    Item(32, "I am a good judge of how well I understand something.", "我能准确判断自己对某件事理解得怎么样。"),
    Item(33, "I find myself using helpful learning strategies automatically.", "我发现自己会自然而然地使用有效的学习策略。"),
    Item(34, "I find myself pausing regularly to check my comprehension.", "我会经常停下来检查自己是否理解。"),
    Item(35, "I know when each strategy I use will be most effective.", "我知道每种策略在什么时候最有效。"),
    Item(36, "I ask myself how well I accomplish my goals once I'm finished.", "完成后，我会问自己目标完成得如何。"),
    Item(37, "I draw pictures or diagrams to help me understand while learning.", "学习时，我会画图或图表来帮助理解。"),
    Item(38, "I ask myself if I have considered all options after I solve a problem.", "解决问题后，我会问自己是否考虑了所有选项。"),
    Item(39, "I try to translate new information into my own words.", "我会尝试用自己的话来表达新信息。"),
    Item(40, "I change strategies when I fail to understand.", "理解不了的时候，我会换一种策略。"),
    Item(41, "I use the organizational structure of the text to help me learn.", "我会利用文章的结构来帮助学习。"),
    Item(42, "I read instructions carefully before I begin a task.", "开始任务前，我会仔细阅读说明。"),
    Item(43, "I ask myself if what I'm reading is related to what I already know.", "我会问自己正在读的内容是否与已有知识相关。"),
    Item(44, "I reevaluate my assumptions when I get confused.", "感到困惑时，我会重新审视自己的假设。"),
    Item(45, "I organize my time to best accomplish my goals.", "我会合理安排时间，以最好地完成目标。"),
    Item(46, "I learn more when I am interested in the topic.", "当我对主题感兴趣时，我学得更多。"),
    Item(47, "I try to break studying down into smaller steps.", "我会把学习任务分解成更小的步骤。"),
    Item(48, "I focus on overall meaning rather than specifics.", "我更关注整体意义，而不是细节。"),
    Item(49, "I ask myself questions about how well I am doing while I am learning something new.", "学习新知识时，我会问自己学得怎么样。"),
    Item(50, "I ask myself if I learned as much as I could have once I finish a task.", "完成任务后，我会问自己是否已经尽可能多地学到了东西。"),
    Item(51, "I stop and go back over new information that is not clear.", "遇到不清楚的新信息时，我会停下来回头再看。"),
    Item(52, "I stop and reread when I get confused.", "感到困惑时，我会停下来重新阅读。"),
]

ITEM_COUNT: int = len(ITEMS)


DIMENSIONS: List[Dimension] = [
    Dimension("Knowledge about Cognition", "认知的知识", "是否了解自己的学习风格与偏好", (5, 15, 20, 26, 33)),
    Dimension("Procedural Knowledge", "程序性知识", "是否掌握具体的学习方法", (13, 17, 27, 31, 39)),
    Dimension("Conditional Knowledge", "条件性知识", "是否知道在什么情境下使用哪些策略", (3, 18, 30, 34, 36)),
    Dimension("Planning", "计划能力", "是否能提前设定学习目标并合理安排时间", (4, 8, 16, 44, 49)),
    Dimension("Information Management", "信息管理策略", "是否能筛选、分类、整理学习内容", (10, 12, 28, 40, 41, 47)),
    Dimension("Comprehension Monitoring", "理解监控", "是否会检查自己有没有听懂", (9, 14, 23, 32, 35, 46)),
    Dimension("Debugging", "调试策略", "遇到问题时是否会调整学习方式", (6, 21, 25, 38, 42, 43)),
    Dimension(
        "Evaluation",
        "评估能力",
        "是否会在学习后反思效果",
        (1, 2, 7, 11, 19, 22, 24, 29, 37, 45, 48, 50, 51, 52),
    ),
]

DIMENSION_MAP: Dict[str, Tuple[int, ...]] = {dim.name: dim.items for dim in DIMENSIONS}
DIMENSION_BY_NAME: Dict[str, Dimension] = {dim.name: dim for dim in DIMENSIONS}

# Radar chart groups.
KNOWLEDGE_DIMENSIONS: List[str] = [
    "Knowledge about Cognition",
    "Procedural Knowledge",
    "Conditional Knowledge",
]
REGULATION_DIMENSIONS: List[str] = [
    "Planning",
    "Information Management",
    "Comprehension Monitoring",
    "Debugging",
    "Evaluation",
]


# Highest range first; classification returns the first inclusive match.
SCORE_LEVELS: List[Level] = [
    Level(8.0, 10.0, "高水平", "已具备成熟的元认知意识，能灵活运用策略。"),
    Level(6.0, 7.9, "中高水平", "基础扎实，建议持续练习提升使用频率和情境灵活度。"),
    Level(4.0, 5.9, "中等水平", "具备意识但使用不够稳定，建议结合实际任务刻意练习。"),
    Level(2.0, 3.9, "较低水平", "意识不强，可能较少主动使用该类策略，建议引导提升。"),
    Level(0.0, 1.9, "低水平", "几乎未表现出该能力，建议重点干预与持续跟踪提升。"),
]

NARRATIVE_HIGH_THRESHOLD: float = 8.0
NARRATIVE_LOW_THRESHOLD: float = 5.0
NARRATIVE_PLACEHOLDER: str = "部分维度"
NAME_SEPARATOR: str = "、"


# [CHANGE] Respondent form fields in export order.
RESPONDENT_FIELDS: List[Tuple[str, str]] = [
    ("name", "姓名"),
    ("age", "年龄"),
    ("school", "学校"),
    ("grade", "年级"),
]
RESPONDENT_AGE_MIN: int = 1
RESPONDENT_AGE_MAX: int = 120


# UI labels
APP_TITLE: str = "MAI 元认知意识测评"
ANSWER_TRUE: int = 1
ANSWER_FALSE: int = 0
ANSWER_LABELS: Dict[int, str] = {
    ANSWER_TRUE: "True（是）",
    ANSWER_FALSE: "False（否）",
}
ANSWER_OPTIONS: List[int] = [ANSWER_TRUE, ANSWER_FALSE]
QUESTIONS_PER_PAGE: int = 10
DEFAULT_EXPORT_NAME: str = "mai-result"
DEFAULT_CONTACT: str = "哈佛小金老师"


def instrument_problems() -> List[str]:
    """
    Check that the dimension item sets partition the item ids.

    Returns a list of readable problems; an empty list means the tables are consistent.
    """
    problems: List[str] = []
    item_ids = [item.id for item in ITEMS]
    expected = set(range(1, ITEM_COUNT + 1))
    if sorted(item_ids) != sorted(expected):
        problems.append(f"item ids are not 1..{ITEM_COUNT}")

    owner: Dict[int, str] = {}
    for dim in DIMENSIONS:
        for item_id in dim.items:
            if item_id not in expected:
                problems.append(f"{dim.name}: unknown item {item_id}")
            elif item_id in owner:
                problems.append(f"item {item_id} in both {owner[item_id]} and {dim.name}")
            else:
                owner[item_id] = dim.name

    missing = sorted(expected - set(owner))
    if missing:
        problems.append(f"items without a dimension: {missing}")
    return problems
