import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from src.logger import get_logger

logger = get_logger(__name__)


# -------------------------
# Regex patterns
# -------------------------
# whitespace as browsers define it for \s and trim(); Python's \s and str.strip()
# also count \x1c-\x1f and \x85, which are name characters here
WHITESPACE = (
    "\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WS = f"[{WHITESPACE}]"

RE_ORDINAL_PREFIX = re.compile(rf"^{WS}*[0-9]+\.{WS}*")

# zero-width chars, LRM/RLM, bidi embeddings/overrides, word joiner..invisible ops, BOM
RE_INVISIBLE = re.compile("[\u200B-\u200F\u202A-\u202E\u2060-\u206F\uFEFF]")

RE_SCORE = re.compile(rf"(?P<left>[0-9]{{1,2}}){WS}*-{WS}*(?P<right>[0-9]{{1,2}})")

RE_WHITESPACE = re.compile(f"{WS}+")
RE_EDGE_WHITESPACE = re.compile(rf"^{WS}+|{WS}+\Z")


# -------------------------
# Result types
# -------------------------
class ParseErrorKind(Enum):
    MISSING_SCORE = "Invalid format. Could not find a score (e.g., 21-15)."
    MISSING_PLAYERS = "Missing players on one or both teams."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    line_number: int
    kind: ParseErrorKind

    @property
    def message(self) -> str:
        return self.kind.message

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class ParsedMatch:
    line_number: int
    team1: Tuple[str, ...]
    team2: Tuple[str, ...]
    score: str

    @property
    def players(self) -> Tuple[str, ...]:
        return self.team1 + self.team2


@dataclass
class ParseResult:
    """
    Output of one parse pass.
    tally keeps first-insertion order (plain dict), which the table view relies on
    for stable tie-breaks.
    """
    tally: Dict[str, int] = field(default_factory=dict)
    errors: List[ParseError] = field(default_factory=list)
    matches: List[ParsedMatch] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def total_appearances(self) -> int:
        return sum(self.tally.values())


# -------------------------
# Line helpers
# -------------------------
def trim(text: str) -> str:
    return RE_EDGE_WHITESPACE.sub("", text)


def clean_line(raw_line: str) -> str:
    """
    Strips a leading ordinal marker ("12. "), invisible formatting characters
    and surrounding whitespace. Returns "" for lines that should be skipped.
    """
    if not isinstance(raw_line, str):
        return ""
    line = RE_ORDINAL_PREFIX.sub("", raw_line, count=1)
    line = RE_INVISIBLE.sub("", line)
    return trim(line)


def find_score(line: str) -> Optional[re.Match]:
    # leftmost match only; later score-like text stays in team2
    return RE_SCORE.search(line)


def split_teams(line: str, score_match: re.Match) -> Tuple[str, str]:
    team1_text = trim(line[:score_match.start()])
    team2_text = trim(line[score_match.end():])
    return team1_text, team2_text


def tokenize_players(team_text: str) -> List[str]:
    return [name for name in RE_WHITESPACE.split(team_text) if name]


class GameLogParser:
    """
    Turns a free-form game log (one match per line, "names  score  names")
    into per-player game counts. Bad lines are collected as errors, never raised.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = bool(verbose)

    def _trace(self, msg: str, *args):
        if self.verbose:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)

    # ---------- single line ----------
    def parse_line(self, raw_line: str, line_number: int):
        """
        Returns a ParsedMatch, a ParseError, or None when the line is blank after cleaning.
        """
        line = clean_line(raw_line)
        if not line:
            self._trace("line %d: blank, skipped", line_number)
            return None

        m = find_score(line)
        if not m:
            self._trace("line %d: no score in %r", line_number, line)
            return ParseError(line_number, ParseErrorKind.MISSING_SCORE)

        team1_text, team2_text = split_teams(line, m)
        if not team1_text or not team2_text:
            self._trace("line %d: empty team around score %r", line_number, m.group(0))
            return ParseError(line_number, ParseErrorKind.MISSING_PLAYERS)

        return ParsedMatch(
            line_number=line_number,
            team1=tuple(tokenize_players(team1_text)),
            team2=tuple(tokenize_players(team2_text)),
            score=m.group(0),
        )

    # ---------- parse ----------
    def parse(self, raw_text: str) -> ParseResult:
        result = ParseResult()
        if not raw_text:
            return result

        lines = raw_text.split("\n")
        for i, raw_line in enumerate(lines):
            outcome = self.parse_line(raw_line, i + 1)
            if outcome is None:
                continue
            if isinstance(outcome, ParseError):
                result.errors.append(outcome)
                continue

            result.matches.append(outcome)
            for player in outcome.players:
                result.tally[player] = result.tally.get(player, 0) + 1

        logger.info(
            "parsed %d lines: %d matches, %d players, %d errors",
            len(lines), len(result.matches), len(result.tally), len(result.errors),
        )
        return result


def parse_game_log(raw_text: str) -> ParseResult:
    return GameLogParser().parse(raw_text)
