# MAI metacognitive awareness survey (Streamlit)
from __future__ import annotations

import html
import logging
from datetime import datetime
from typing import Dict, Optional

import matplotlib.pyplot as plt
import streamlit as st

from mai_survey.charts import knowledge_radar, regulation_radar
from mai_survey.constants import ITEM_COUNT, RESPONDENT_FIELDS, instrument_problems
from mai_survey.export import export_filename, export_row, score_table, to_csv_text
from mai_survey.flow import Phase, SurveyState
from mai_survey.narrative import feedback_paragraphs, generate_feedback
from mai_survey.scoring import ScoreResult
from mai_survey.utils.log import setup_logging
from mai_survey.utils.settings import Settings, get_settings
from mai_survey.utils.ui_helpers import render_true_false, reset_widget_keys

logger = logging.getLogger("mai_survey.app")

# --------------------------------------------------------------------------------------
# Streamlit page config & global styling
# --------------------------------------------------------------------------------------

SETTINGS: Settings = get_settings()
setup_logging(SETTINGS.log_level)

st.set_page_config(
    page_title=SETTINGS.app_title,
    layout="centered",
    initial_sidebar_state="collapsed",
)

COMPACT_CSS = """
 <style>
   :root { --fs-base: 16px; --lh-base: 1.65; --accent: #4f46e5; }
   #MainMenu, footer, [data-testid="stToolbar"] { display: none !important; }
   [data-testid="stSidebar"], section[data-testid="stSidebar"] { display: none !important; }
   html, body, [data-testid="stAppViewContainer"] {
     font-size: var(--fs-base);
     line-height: var(--lh-base);
   }
   .mai-header {
     background: var(--accent);
     color: #fff;
     padding: 1.1rem 1.4rem;
     border-radius: 0.6rem;
     margin-bottom: 1.2rem;
   }
   .mai-header h1 { font-size: 1.5rem; margin: 0; color: #fff; }
   .question-en { color: #6b7280; font-size: 0.9rem; margin-top: -0.4rem; }
   .summary-card {
     border: 1px solid #e5e7eb;
     border-radius: 0.6rem;
     padding: 1rem 1.25rem;
     margin-bottom: 1rem;
   }
   .summary-card h2 { color: var(--accent); font-size: 1.25rem; margin-top: 0; }
   .mai-footer { text-align: center; color: #9ca3af; font-size: 0.75rem; margin-top: 2rem; }
 </style>
"""
st.markdown(COMPACT_CSS, unsafe_allow_html=True)


# --------------------------------------------------------------------------------------
# JS helpers
# --------------------------------------------------------------------------------------


def scroll_top_js(nonce: Optional[int] = None) -> None:
    nonce = nonce or st.session_state.get("_scroll_nonce", 0)
    st.session_state["_scroll_nonce"] = nonce + 1
    script = """
        <script id="goTop-{nonce}">
        (function(){{
          function goTop(){{
            try {{
              var pdoc = window.parent && window.parent.document;
              var sect = pdoc && pdoc.querySelector && pdoc.querySelector('section.main');
              if (sect && sect.scrollTo) sect.scrollTo({{top:0,left:0,behavior:'instant'}});
            }} catch(e) {{}}
            try {{ window.scrollTo({{top:0,left:0,behavior:'instant'}}); }} catch(e) {{}}
          }}
          goTop();
          setTimeout(goTop, 80);
        }})();
        </script>
    """.replace(
        "{nonce}", str(nonce)
    )
    st.markdown(script, unsafe_allow_html=True)


# --------------------------------------------------------------------------------------
# Session bootstrap
# --------------------------------------------------------------------------------------


def ensure_session_state() -> None:
    ss = st.session_state
    if "survey" not in ss:
        ss.survey = SurveyState(per_page=SETTINGS.questions_per_page)
    if "instrument_checked" not in ss:
        for problem in instrument_problems():
            logger.warning("instrument table problem: %s", problem)
        ss.instrument_checked = True
    if "form_errors" not in ss:
        ss.form_errors = []


def rerun() -> None:
    scroll_top_js()
    st.rerun()


def render_header() -> None:
    st.markdown(
        f"<div class='mai-header'><h1>{SETTINGS.app_title}</h1></div>",
        unsafe_allow_html=True,
    )


def render_footer() -> None:
    st.markdown(
        f"<div class='mai-footer'>© {datetime.now().year} MAI Survey</div>",
        unsafe_allow_html=True,
    )


# --------------------------------------------------------------------------------------
# Screens
# --------------------------------------------------------------------------------------


def render_questions(survey: SurveyState) -> None:
    start, end = survey.page_range()

    progress_slot = st.empty()
    st.markdown(
        f"<div style='display:flex;justify-content:space-between;color:#6b7280;font-size:0.9rem;'>"
        f"<span>第 {start + 1}–{end} 题，共 {ITEM_COUNT} 题</span>"
        f"<span>页面 {survey.page + 1} / {survey.page_count}</span></div>",
        unsafe_allow_html=True,
    )

    for item in survey.page_items():
        with st.container(border=True):
            selected = render_true_false(
                item.id,
                f"{item.id}. {item.zh}",
                current=survey.answers[item.id - 1],
            )
            st.markdown(f"<div class='question-en'>{item.text}</div>", unsafe_allow_html=True)
        survey.answer(item.id, selected)

    # Progress reflects this run's answers, so draw it after the radios.
    progress_slot.progress(survey.progress, text=f"已作答 {survey.answered_count} / {ITEM_COUNT}")

    complete = survey.page_complete()
    col_prev, col_next = st.columns(2)
    with col_prev:
        if survey.page > 0 and st.button("上一页", use_container_width=True, key="mai_prev"):
            survey.prev_page()
            rerun()
    with col_next:
        next_label = "去填写信息" if survey.is_last_page else "下一页"
        if st.button(
            next_label,
            use_container_width=True,
            type="primary",
            disabled=not complete,
            key="mai_next",
        ):
            if survey.next_page():
                rerun()
            else:
                st.warning("请先回答本页的所有题目。")
    if not complete:
        st.caption("本页题目全部作答后才能继续。")


def render_info(survey: SurveyState) -> None:
    st.subheader("填写个人信息")
    values: Dict[str, str] = {}
    with st.form("respondent_info"):
        for key, label in RESPONDENT_FIELDS:
            values[key] = st.text_input(
                label,
                value=survey.fields.get(key, ""),
                key=f"info_{key}",
                placeholder="例：15" if key == "age" else "",
            )
        col_prev, col_submit = st.columns(2)
        with col_prev:
            go_back = st.form_submit_button("上一页", use_container_width=True)
        with col_submit:
            submitted = st.form_submit_button("查看结果", use_container_width=True, type="primary")

    if go_back:
        survey.fields = {key: values.get(key, "") for key, _ in RESPONDENT_FIELDS}
        st.session_state.form_errors = []
        survey.prev_page()
        rerun()
    if submitted:
        errors = survey.submit(values)
        st.session_state.form_errors = errors
        if not errors:
            rerun()
    for message in st.session_state.form_errors:
        st.error(message)


def _log_export(filename: str) -> None:
    logger.info("csv export downloaded: %s", filename)


def render_results(survey: SurveyState) -> None:
    info = survey.info
    result: ScoreResult = survey.result()

    st.markdown(
        f"""
        <div class="summary-card">
          <h2>{html.escape(info.name)} 的测评结果</h2>
          <div>年龄：{info.age}</div>
          <div>学校：{html.escape(info.school)}</div>
          <div>年级：{html.escape(info.grade)}</div>
        </div>
        """.strip(),
        unsafe_allow_html=True,
    )

    st.subheader("各维度得分")
    st.dataframe(
        score_table(result.raw_scores, result.normalized_scores),
        hide_index=True,
        use_container_width=True,
    )

    col_left, col_right = st.columns(2)
    with col_left:
        st.markdown("**雷达图：认知知识类**")
        fig = knowledge_radar(result.normalized_scores)
        st.pyplot(fig)
        plt.close(fig)
    with col_right:
        st.markdown("**雷达图：自我调节策略类**")
        fig = regulation_radar(result.normalized_scores)
        st.pyplot(fig)
        plt.close(fig)

    st.subheader("个性化评语")
    text = generate_feedback(result.normalized_scores, contact=SETTINGS.contact_name)
    for paragraph in feedback_paragraphs(text):
        st.write(paragraph)

    record = export_row(info, survey.answers, result.raw_scores, result.normalized_scores)
    filename = export_filename(info, default=SETTINGS.export_default_name)
    col_export, col_restart = st.columns(2)
    with col_export:
        st.download_button(
            "导出 CSV",
            data=to_csv_text(record).encode("utf-8"),
            file_name=filename,
            mime="text/csv",
            use_container_width=True,
            on_click=_log_export,
            args=(filename,),
        )
    with col_restart:
        if st.button("重新开始", use_container_width=True, key="mai_restart"):
            reset_widget_keys(range(1, ITEM_COUNT + 1))
            for key, _ in RESPONDENT_FIELDS:
                st.session_state.pop(f"info_{key}", None)
            st.session_state.form_errors = []
            survey.restart()
            rerun()


# --------------------------------------------------------------------------------------
# App entrypoint
# --------------------------------------------------------------------------------------

ensure_session_state()
render_header()

survey: SurveyState = st.session_state.survey
if survey.phase is Phase.QUESTIONS:
    render_questions(survey)
elif survey.phase is Phase.INFO:
    render_info(survey)
else:
    render_results(survey)

render_footer()