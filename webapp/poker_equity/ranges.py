"""
Range Expander

Turns range notation such as "QQ+, AKs, ATo+" or a 13x13 grid selection into
the concrete two-card combinations it denotes.

Notation (case-insensitive, tokens separated by commas and/or whitespace):
- Pairs: "99" is one pair rank, "99+" adds every pair above it up to AA.
- Non-pairs: "AK" is suited + offsuit (16 combos), "AKs" suited (4),
  "AKo" offsuit (12). A trailing "+" slides the low rank up towards, but
  not including, the high rank: "ATo+" = ATo, AJo, AQo, AKo.

Bad tokens never abort a parse; they are returned in the unrecognized list.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from .cards import RANKS, card_id, rank_of, suit_of

logger = logging.getLogger(__name__)

Combo = Tuple[int, int]

_TOKEN_SPLIT = re.compile(r'[\s,]+')

PAIR = 'p'
SUITED = 's'
OFFSUIT = 'o'

# Named opening ranges offered as one-click range inputs
RANGE_PRESETS = {
    'utg-tight': 'AA, KK, QQ, JJ, TT, AKs, AKo',
    'utg-standard': '99+, AJs+, AQo+, KQs',
    'co-open': '77+, ATs+, AJo+, KQs, KJs+, QJs',
    'btn-wide': '55+, A8s+, ATo+, KTs+, KJo+, QTs+, JTs, T9s',
    'btn-very-wide': '22+, A2s+, A5o+, K9s+, KJo+, Q9s+, J9s+, T8s+, 97s+, 86s+, 75s+',
    '3bet-tight': 'JJ+, AKs, AKo',
    'any-two': ('22+, A2s+, A2o+, K2s+, K2o+, Q2s+, Q2o+, J2s+, J2o+, T2s+, T2o+, '
                '92s+, 92o+, 82s+, 82o+, 72s+, 72o+, 62s+, 62o+, 52s+, 52o+, 42s+, 42o+, 32s, 32o'),
}


class ParsedRange(NamedTuple):
    combos: List[Combo]
    unrecognized: List[str]


@dataclass(frozen=True)
class GridCell:
    """One cell of the 13x13 starting-hand grid."""
    hi: int
    lo: int
    kind: str  # 'p' | 's' | 'o'

    @property
    def label(self):
        if self.kind == PAIR:
            return RANKS[self.hi] * 2
        return RANKS[self.hi] + RANKS[self.lo] + self.kind

    @property
    def combo_count(self):
        return {PAIR: 6, SUITED: 4, OFFSUIT: 12}[self.kind]

    def to_dict(self):
        return {'hi': self.hi, 'lo': self.lo, 'kind': self.kind, 'label': self.label}


def add_combo(c1, c2, out):
    """Add a combination to a set, lower card id first."""
    out.add((c1, c2) if c1 < c2 else (c2, c1))


def filter_combos(combos, blockers):
    """Drop every combination that contains a blocked card."""
    blocked = set(blockers)
    return [combo for combo in combos if combo[0] not in blocked and combo[1] not in blocked]


def _add_pair(rank, out):
    for s1 in range(4):
        for s2 in range(s1 + 1, 4):
            add_combo(card_id(rank, s1), card_id(rank, s2), out)


def _add_suited(hi, lo, out):
    for s in range(4):
        add_combo(card_id(hi, s), card_id(lo, s), out)


def _add_offsuit(hi, lo, out):
    for s1 in range(4):
        for s2 in range(4):
            if s1 != s2:
                add_combo(card_id(hi, s1), card_id(lo, s2), out)


def expand_token(token, out):
    """
    Expand a single upper-cased token into out.

    Raises:
        ValueError: If the token is not valid range notation
    """
    plus = token.endswith('+')
    body = token[:-1] if plus else token
    suited = body.endswith('S')
    offsuit = body.endswith('O')
    if suited or offsuit:
        body = body[:-1]

    if len(body) != 2:
        raise ValueError(f"bad token: {token}")
    r1 = RANKS.find(body[0])
    r2 = RANKS.find(body[1])
    if r1 < 0 or r2 < 0:
        raise ValueError(f"bad rank in token: {token}")

    hi, lo = max(r1, r2), min(r1, r2)
    if hi == lo:
        for rank in range(lo, (12 if plus else lo) + 1):
            _add_pair(rank, out)
        return

    for low_rank in range(lo, (hi - 1 if plus else lo) + 1):
        if not offsuit:
            _add_suited(hi, low_rank, out)
        if not suited:
            _add_offsuit(hi, low_rank, out)


def parse_range(text):
    """
    Parse range notation into concrete combinations.

    Args:
        text (str): Range string like "AA, KK, AKs, ATo+"

    Returns:
        ParsedRange: (combos, unrecognized)
            - combos: sorted list of (low_card, high_card) tuples, no duplicates
            - unrecognized: tokens that could not be parsed, in input order

    Raises:
        ValueError: If text is neither a string nor None
    """
    if text is not None and not isinstance(text, str):
        raise ValueError(f"Range must be a string, got {type(text).__name__}")
    if not text or not text.strip():
        return ParsedRange([], [])

    combos = set()
    unrecognized = []
    for token in _TOKEN_SPLIT.split(text.upper()):
        if not token:
            continue
        try:
            expand_token(token, combos)
        except ValueError:
            unrecognized.append(token)

    if unrecognized:
        logger.debug(f"[RANGE] Unrecognized tokens: {unrecognized}")
    return ParsedRange(sorted(combos), unrecognized)


def preset_range(name):
    """
    Look up and expand a named preset from RANGE_PRESETS.

    Raises:
        ValueError: If no preset has that name
    """
    if not isinstance(name, str) or name not in RANGE_PRESETS:
        raise ValueError(f"Unknown range preset: {name!r}")
    return parse_range(RANGE_PRESETS[name])


def hand_class(combo):
    """Canonical class label of a combination: 'AKs', 'QQ' or 'T9o'."""
    return cell_for_combo(combo).label


def cell_for_combo(combo):
    c1, c2 = combo
    r1, r2 = rank_of(c1), rank_of(c2)
    hi, lo = max(r1, r2), min(r1, r2)
    if hi == lo:
        kind = PAIR
    elif suit_of(c1) == suit_of(c2):
        kind = SUITED
    else:
        kind = OFFSUIT
    return GridCell(hi, lo, kind)


def grid_cells():
    """
    All 169 grid cells in display order, Aces first.

    Row/column index i maps to rank 12 - i. The diagonal holds pairs, cells
    above it are suited and cells below it offsuit.
    """
    cells = []
    for row in range(13):
        for col in range(13):
            r1, r2 = 12 - row, 12 - col
            hi, lo = max(r1, r2), min(r1, r2)
            if row == col:
                kind = PAIR
            elif row > col:
                kind = OFFSUIT
            else:
                kind = SUITED
            cells.append(GridCell(hi, lo, kind))
    return cells


def parse_cell(label):
    """
    Convert a grid label ('AKs', 'QQ', 'T9o') to a GridCell.

    Raises:
        ValueError: If the label is not a single grid cell
    """
    text = label.strip().upper()
    if len(text) == 2 and text[0] == text[1] and text[0] in RANKS:
        rank = RANKS.index(text[0])
        return GridCell(rank, rank, PAIR)
    if len(text) == 3 and text[2] in ('S', 'O') and text[0] in RANKS and text[1] in RANKS:
        r1, r2 = RANKS.index(text[0]), RANKS.index(text[1])
        if r1 != r2:
            return GridCell(max(r1, r2), min(r1, r2), text[2].lower())
    raise ValueError(f"Invalid grid cell: {label!r}")


def combos_from_grid(cells):
    """
    Expand a grid selection into combinations.

    Args:
        cells (iterable): GridCell objects or labels like 'AKs'

    Returns:
        list: Sorted (low_card, high_card) tuples

    Raises:
        ValueError: On an invalid label or an entry that is not a label or GridCell
    """
    out = set()
    for cell in cells:
        if isinstance(cell, str):
            cell = parse_cell(cell)
        elif not isinstance(cell, GridCell):
            raise ValueError(f"Grid cell must be a label like 'AKs', got {type(cell).__name__}")
        if cell.kind == PAIR:
            _add_pair(cell.hi, out)
        elif cell.kind == SUITED:
            _add_suited(cell.hi, cell.lo, out)
        else:
            _add_offsuit(cell.hi, cell.lo, out)
    return sorted(out)


def grid_from_combos(combos):
    """Set of grid cells touched by the given combinations."""
    return {cell_for_combo(combo) for combo in combos}
