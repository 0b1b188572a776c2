# tests/test_charts.py
import logging

import matplotlib.pyplot as plt

from mai_survey import charts
from mai_survey.charts import knowledge_radar, regulation_radar
from mai_survey.constants import DIMENSION_BY_NAME, KNOWLEDGE_DIMENSIONS, REGULATION_DIMENSIONS


def test_knowledge_radar_axes():
    scores = {name: 6.0 for name in KNOWLEDGE_DIMENSIONS}
    fig = knowledge_radar(scores)
    ax = fig.axes[0]
    assert [t.get_text() for t in ax.get_xticklabels()] == [DIMENSION_BY_NAME[n].zh for n in KNOWLEDGE_DIMENSIONS]
    assert ax.get_ylim() == (0.0, 10.0)
    assert list(ax.get_yticks())[-1] == 10
    plt.close(fig)


def test_regulation_radar_closes_the_polygon():
    scores = {name: float(i) for i, name in enumerate(REGULATION_DIMENSIONS, start=1)}
    fig = regulation_radar(scores)
    line = fig.axes[0].get_lines()[0]
    values = list(line.get_ydata())
    assert values == [1.0, 2.0, 3.0, 4.0, 5.0, 1.0]
    plt.close(fig)


def test_missing_cjk_font_logs_warning(monkeypatch, caplog):
    monkeypatch.setattr(charts, "available_cjk_fonts", lambda: [])
    charts.check_cjk_fonts.cache_clear()
    try:
        with caplog.at_level(logging.WARNING, logger="mai_survey.charts"):
            assert charts.check_cjk_fonts() is False
        assert "no CJK font found" in caplog.text
    finally:
        charts.check_cjk_fonts.cache_clear()


def test_installed_cjk_font_is_silent(monkeypatch, caplog):
    monkeypatch.setattr(charts, "available_cjk_fonts", lambda: ["Noto Sans CJK SC"])
    charts.check_cjk_fonts.cache_clear()
    try:
        with caplog.at_level(logging.WARNING, logger="mai_survey.charts"):
            assert charts.check_cjk_fonts() is True
        assert "no CJK font found" not in caplog.text
    finally:
        charts.check_cjk_fonts.cache_clear()
