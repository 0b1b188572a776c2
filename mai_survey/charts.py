from __future__ import annotations

import functools
import logging
import math
from typing import List, Mapping

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib import font_manager  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from .constants import DIMENSION_BY_NAME, KNOWLEDGE_DIMENSIONS, REGULATION_DIMENSIONS  # noqa: E402

logger = logging.getLogger(__name__)

CJK_FONTS: List[str] = [
    "Noto Sans CJK SC",
    "Source Han Sans SC",
    "SimHei",
    "Microsoft YaHei",
    "PingFang SC",
    "WenQuanYi Zen Hei",
]

# Glyph fallbacks for the Chinese axis labels; matplotlib skips fonts it cannot find.
plt.rcParams["font.sans-serif"] = [*CJK_FONTS, "DejaVu Sans"]
plt.rcParams["axes.unicode_minus"] = False

SCALE_MAX = 10
SCALE_STEP = 2
LINE_COLOR = "#6366f1"


def available_cjk_fonts() -> List[str]:
    installed = {entry.name for entry in font_manager.fontManager.ttflist}
    return [name for name in CJK_FONTS if name in installed]


@functools.lru_cache(maxsize=None)
def check_cjk_fonts() -> bool:
    """Warn once per process when no CJK font is installed; labels would render as boxes."""
    found = available_cjk_fonts()
    if not found:
        logger.warning(
            "no CJK font found (tried %s); Chinese chart labels will not render. "
            "Install one, e.g. fonts-noto-cjk",
            ", ".join(CJK_FONTS),
        )
    return bool(found)


def radar_figure(normalized_scores: Mapping[str, float], dimension_names: List[str], title: str) -> Figure:
    """
    Radar (spider) chart of normalized scores for the given dimensions, radial axis fixed to 0-10.
    """
    check_cjk_fonts()
    labels = [DIMENSION_BY_NAME[name].zh for name in dimension_names]
    values = [float(normalized_scores.get(name, 0.0)) for name in dimension_names]
    num_vars = len(labels)

    angles = [n / float(num_vars) * 2 * math.pi for n in range(num_vars)]
    angles += angles[:1]
    values += values[:1]

    fig, ax = plt.subplots(figsize=(5, 5), subplot_kw=dict(polar=True))
    ax.plot(angles, values, color=LINE_COLOR, linewidth=2, linestyle="solid", label=title)
    ax.fill(angles, values, color=LINE_COLOR, alpha=0.2)

    # First axis at the top, clockwise.
    ax.set_theta_offset(math.pi / 2)
    ax.set_theta_direction(-1)

    ax.set_xticks(angles[:-1])
    ax.set_xticklabels(labels)
    ax.set_ylim(0, SCALE_MAX)
    ax.set_yticks(list(range(0, SCALE_MAX + 1, SCALE_STEP)))
    ax.set_title(title, pad=20)
    fig.tight_layout()
    return fig


def knowledge_radar(normalized_scores: Mapping[str, float]) -> Figure:
    return radar_figure(normalized_scores, KNOWLEDGE_DIMENSIONS, "知识类维度")


def regulation_radar(normalized_scores: Mapping[str, float]) -> Figure:
    return radar_figure(normalized_scores, REGULATION_DIMENSIONS, "策略类维度")
