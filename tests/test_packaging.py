# tests/test_packaging.py
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_project_readme_is_the_user_readme():
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert 'readme = "README.md"' in pyproject
    readme = (ROOT / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# mai-survey")
    assert "streamlit run mai_survey/main.py" in readme
