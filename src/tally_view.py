from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from src.game_log_parser import ParseResult

NO_DATA_TEXT = "No player data to display."


# -----------------------------
# Table / error panel
# -----------------------------
def build_stats_table(result: ParseResult) -> pd.DataFrame:
    """
    One row per player: (player, games), most games first.
    Ties keep the order players were first seen in the log (stable sort).
    Empty tally -> a single placeholder row, flagged in df.attrs["placeholder"].
    """
    if not result.tally:
        df = pd.DataFrame([{"player": NO_DATA_TEXT, "games": None}])
        df.attrs["placeholder"] = True
        return df

    df = pd.DataFrame(list(result.tally.items()), columns=["player", "games"])
    df = df.sort_values("games", ascending=False, kind="mergesort").reset_index(drop=True)
    df["games"] = df["games"].astype(int)
    df.attrs["placeholder"] = False
    return df


def format_errors(result: ParseResult) -> str:
    # "" means the error panel stays hidden
    return "\n".join(str(e) for e in result.errors)


# -----------------------------
# Chart
# -----------------------------
def draw_games_chart(table: pd.DataFrame, title: str = "Games played", max_players: Optional[int] = None):
    """
    Horizontal bars in table order (top row at the top).
    Placeholder tables get an empty axis with a caption instead of bars.
    """
    if table.attrs.get("placeholder") or table.empty:
        fig, ax = plt.subplots(figsize=(8, 2))
        ax.axis("off")
        ax.text(0.5, 0.5, NO_DATA_TEXT, ha="center", va="center", fontsize=10)
        ax.set_title(title)
        return fig

    shown = table.head(max_players) if max_players else table
    names = shown["player"].astype(str).tolist()
    games = shown["games"].astype(int).to_numpy()

    y = np.arange(len(names))
    fig, ax = plt.subplots(figsize=(8, max(2.0, 0.35 * len(names) + 1)))
    ax.barh(y, games, color=(0.2, 0.4, 0.9, 0.8), edgecolor="black", linewidth=0.5)
    ax.set_yticks(y)
    ax.set_yticklabels(names, fontsize=8)
    ax.invert_yaxis()
    ax.set_xlabel("games")
    ax.set_xlim(0, games.max() * 1.15)

    for yi, g in zip(y, games):
        ax.text(g, yi, f" {g}", va="center", fontsize=8)

    if len(shown) < len(table):
        title = f"{title} (top {len(shown)} of {len(table)})"
    ax.set_title(title)
    return fig
