# tests/test_export.py
from mai_survey.constants import DIMENSIONS
from mai_survey.export import (
    COLS,
    RespondentInfo,
    export_filename,
    export_row,
    format_value,
    score_table,
    to_csv_text,
)
from mai_survey.scoring import score

from conftest import make_answers

INFO = RespondentInfo(name="张三", age=15, school="实验中学", grade="初三")


def test_header_and_row_have_72_columns(all_true):
    result = score(all_true)
    record = export_row(INFO, all_true, result.raw_scores, result.normalized_scores)
    assert len(record.header) == len(record.row) == 72
    assert record.header == COLS


def test_header_layout():
    assert COLS[:4] == ["姓名", "年龄", "学校", "年级"]
    assert COLS[4] == "Q1"
    assert COLS[55] == "Q52"
    assert COLS[56] == "认知的知识原始得分"
    assert COLS[64] == "认知的知识标准化得分"
    assert COLS[-1] == "评估能力标准化得分"


def test_row_values():
    answers = make_answers(0, {1: 1, 4: 1, 8: 1, 44: 1, 3: None})
    result = score(answers)
    record = export_row(INFO, answers, result.raw_scores, result.normalized_scores)
    row = dict(zip(record.header, record.row))
    assert row["姓名"] == "张三"
    assert row["年龄"] == "15"
    assert row["Q1"] == "1"
    assert row["Q2"] == "0"
    assert row["Q3"] == ""
    assert row["计划能力原始得分"] == "3"
    assert row["计划能力标准化得分"] == "6"
    assert row["评估能力标准化得分"] == "0.7"
    assert row["认知的知识标准化得分"] == "0"


def test_format_value():
    assert format_value(None) == ""
    assert format_value(10.0) == "10"
    assert format_value(6.7) == "6.7"
    assert format_value(3) == "3"
    assert format_value(True) == "1"
    assert format_value("初三") == "初三"


def test_csv_text_is_plain_comma_join():
    info = RespondentInfo(name="Li, Ming", age=16, school='"No.1"', grade="高一")
    answers = make_answers(1)
    result = score(answers)
    text = to_csv_text(export_row(info, answers, result.raw_scores, result.normalized_scores))
    header, row = text.split("\n")
    assert header.startswith("姓名,年龄,学校,年级,Q1,")
    # no quoting: the embedded comma adds a column
    assert row.startswith('Li, Ming,16,"No.1",高一,1,')
    assert len(row.split(",")) == 73


def test_export_filename_falls_back_to_default():
    assert export_filename(INFO) == "张三.csv"
    assert export_filename(RespondentInfo(name="  ", age=1, school="a", grade="b")) == "mai-result.csv"
    assert export_filename(None, default="result") == "result.csv"


def test_score_table_rows(all_true):
    result = score(all_true)
    table = score_table(result.raw_scores, result.normalized_scores)
    assert list(table.columns) == ["维度", "原始得分", "标准化得分", "等级", "等级说明", "解释"]
    assert len(table) == len(DIMENSIONS)
    assert set(table["等级"]) == {"高水平"}
    assert table.iloc[-1]["原始得分"] == 14
