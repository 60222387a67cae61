import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from src.game_log_parser import parse_game_log
from src.tally_view import NO_DATA_TEXT, build_stats_table, draw_games_chart, format_errors


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


# ---------- table ----------
def test_table_sorted_by_games_desc():
    result = parse_game_log("A B 1-0 C\nC 2-0 D\nC 3-0 B")
    table = build_stats_table(result)
    assert table["player"].tolist() == ["C", "B", "A", "D"]
    assert table["games"].tolist() == [3, 2, 1, 1]
    assert table.attrs["placeholder"] is False


def test_table_ties_keep_first_seen_order():
    result = parse_game_log("Zed Amy 1-0 Bob Cal")
    table = build_stats_table(result)
    assert table["player"].tolist() == ["Zed", "Amy", "Bob", "Cal"]


def test_table_ties_after_sort_keep_first_seen_order():
    # Bob, Cal and Dan all reach 2; first-seen order decides
    result = parse_game_log("Amy Bob 1-0 Cal Dan\nDan 2-1 Bob\nAmy 3-0 Eve\nAmy 1-0 Cal")
    table = build_stats_table(result)
    assert table["player"].tolist() == ["Amy", "Bob", "Cal", "Dan", "Eve"]
    assert table["games"].tolist() == [3, 2, 2, 2, 1]


def test_empty_tally_gives_placeholder_row():
    table = build_stats_table(parse_game_log("nothing here\n\n"))
    assert len(table) == 1
    assert table.loc[0, "player"] == NO_DATA_TEXT
    assert table.attrs["placeholder"] is True


# ---------- error panel ----------
def test_format_errors_one_per_line():
    result = parse_game_log("A 1-0 B\nbad\n\n7-7")
    assert format_errors(result) == (
        "Line 2: Invalid format. Could not find a score (e.g., 21-15).\n"
        "Line 4: Missing players on one or both teams."
    )


def test_format_errors_empty_when_clean():
    assert format_errors(parse_game_log("A 1-0 B")) == ""


# ---------- chart ----------
def test_chart_has_one_bar_per_player():
    table = build_stats_table(parse_game_log("A B 1-0 C\nA 2-0 C"))
    fig = draw_games_chart(table)
    ax = fig.axes[0]
    assert len(ax.patches) == 3
    assert [t.get_text() for t in ax.get_yticklabels()] == ["A", "C", "B"]


def test_chart_caps_players():
    table = build_stats_table(parse_game_log("A B C D 1-0 E F"))
    fig = draw_games_chart(table, max_players=4)
    ax = fig.axes[0]
    assert len(ax.patches) == 4
    assert "top 4 of 6" in ax.get_title()


def test_chart_placeholder():
    table = build_stats_table(parse_game_log(""))
    fig = draw_games_chart(table, title="Games")
    ax = fig.axes[0]
    assert len(ax.patches) == 0
    assert ax.get_title() == "Games"
    assert any(t.get_text() == NO_DATA_TEXT for t in ax.texts)
