# src/app.py
import matplotlib.pyplot as plt
import streamlit as st

from src.config import app_config, log_config, parser_config
from src.game_log_parser import GameLogParser
from src.logger import get_logger, setup_logger
from src.tally_view import build_stats_table, draw_games_chart, format_errors


@st.cache_resource(show_spinner=False)
def init_logging():
    # once per server process; Streamlit reruns this script on every edit
    return setup_logger(log_level=log_config.LEVEL, log_file=log_config.FILE)


init_logging()
logger = get_logger(__name__)

LOG_KEY = "game_log"


@st.cache_data(show_spinner=False, max_entries=app_config.PARSE_CACHE_ENTRIES)
def run_parse(raw_text: str):
    return GameLogParser(verbose=parser_config.VERBOSE).parse(raw_text)


def reset_log():
    logger.info("reset requested; clearing game log")
    st.session_state[LOG_KEY] = ""


# -----------------------------
# Streamlit setup
# -----------------------------
st.set_page_config(page_title=app_config.PAGE_TITLE, layout="wide")
st.title(app_config.PAGE_TITLE)

st.sidebar.header("Log format")
st.sidebar.markdown(
    "One game per line: players of team 1, the score, players of team 2.\n\n"
    "Leading numbers like `12.` are ignored."
)
st.sidebar.code(app_config.PLACEHOLDER_TEXT, language=None)

# session_state keeps the text across reruns, so a reload starts pre-filled
if LOG_KEY not in st.session_state:
    st.session_state[LOG_KEY] = ""

left, right = st.columns([3, 2])

with left:
    st.subheader("Game log")
    raw_text = st.text_area(
        "Paste one game per line",
        key=LOG_KEY,
        height=app_config.TEXT_AREA_HEIGHT,
        placeholder=app_config.PLACEHOLDER_TEXT,
    )
    st.button("Reset", on_click=reset_log)

# every rerun parses the current snapshot to completion before rendering
result = run_parse(raw_text)

with left:
    if result.has_errors:
        st.error(format_errors(result))

# -----------------------------
# Player counts
# -----------------------------
with right:
    st.subheader("Games played")
    table = build_stats_table(result)
    st.dataframe(table, use_container_width=True, hide_index=True)

    if not table.attrs.get("placeholder"):
        st.caption(f"{len(result.matches)} games, {len(result.tally)} players")

with st.expander("Chart: games per player"):
    fig = draw_games_chart(table, max_players=app_config.CHART_MAX_PLAYERS)
    st.pyplot(fig, clear_figure=True)
    plt.close(fig)
