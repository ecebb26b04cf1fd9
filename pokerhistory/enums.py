"""Enumerations used in Open Hand History documents.

Each member's value is the exact string that appears in the JSON format.
Construct a member from that string with ``EnumName(text)``. An unknown
string raises ``ValueError``.
"""

from __future__ import annotations

from enum import StrEnum


class SpeedType(StrEnum):
    """How quickly tournament blind levels rise."""

    NORMAL = "Normal"
    SEMI_TURBO = "Semi-Turbo"
    TURBO = "Turbo"
    SUPER_TURBO = "Super-Turbo"
    HYPER_TURBO = "Hyper-Turbo"
    ULTRA_TURBO = "Ultra-Turbo"


class TournamentType(StrEnum):
    """Single-table or multi-table tournament."""

    SINGLE_TABLE_TOURNAMENT = "STT"
    MULTI_TABLE_TOURNAMENT = "MTT"


class TournamentFlag(StrEnum):
    """Special properties of a tournament."""

    SIT_N_GO = "SNG"
    """Sit 'N Go tournament."""
    DOUBLE_OR_NOTHING = "DON"
    """Half of the players win double the buy-in."""
    BOUNTY = "Bounty"
    """Prizes are paid for knocking out specific players."""
    SHOOTOUT = "Shootout"
    """Staged play where each table plays down to one player."""
    REBUY = "Rebuy"
    """Players may rebuy chips during set periods."""
    MATRIX = "Matrix"
    """One buy-in split across several games with aggregate prizes."""
    PUSH_OR_FOLD = "Push_Or_Fold"
    """Every hand is either a fold or an all-in."""
    SATELLITE = "Satellite"
    """The prize includes entry into another tournament."""
    STEPS = "Steps"
    """Step-by-step progression to higher value tournaments."""
    DEEP = "Deep"
    """Starting stacks are deeper than usual."""
    MULTI_ENTRY = "Multi-Entry"
    """Players may hold several entries at the start."""
    FIFTY_FIFTY = "Fifty50"
    """Half of the field wins an equal base prize plus a chip bonus."""
    FLIPOUT = "Flipout"
    """All hands are dealt face up without betting rounds."""
    TRIPLE_UP = "TripleUp"
    """One third of the field wins triple the buy-in."""
    LOTTERY = "Lottery"
    """Fast games with a random prize drawn before the start."""
    RE_ENTRY = "Re-Entry"
    """Players may re-enter after being eliminated."""
    POWER_UP = "Power_Up"
    """Three-player game with special powers."""
    PROGRESSIVE_BOUNTY = "Progressive-Bounty"
    """Bounties that vary in size and accumulate."""


class Action(StrEnum):
    """Something a player does during a hand."""

    DEALT_CARDS = "Dealt Cards"
    MUCKS_CARDS = "Mucks Cards"
    SHOWS_CARDS = "Shows Cards"
    POST_ANTE = "Post Ante"
    POST_SMALL_BLIND = "Post SB"
    POST_BIG_BLIND = "Post BB"
    STRADDLE = "Straddle"
    POST_DEAD = "Post Dead"
    POST_EXTRA_BLIND = "Post Extra Blind"
    FOLD = "Fold"
    CHECK = "Check"
    BET = "Bet"
    RAISE = "Raise"
    CALL = "Call"
    ADDED_CHIPS = "Added Chips"
    SITS_DOWN = "Sits Down"
    STANDS_UP = "Stands Up"
    ADDED_TO_POT = "Added To Pot"


class BetType(StrEnum):
    """Betting structure of a game."""

    NO_LIMIT = "NL"
    POT_LIMIT = "PL"
    FIXED_LIMIT = "FL"


class GameType(StrEnum):
    """The poker variant being played."""

    HOLDEM = "Holdem"
    OMAHA = "Omaha"
    OMAHA_HI_LO = "OmahaHiLo"
    STUD = "Stud"
    STUD_HI_LO = "StudHiLo"
    DRAW = "Draw"


class HandFlag(StrEnum):
    """Special properties of a single hand."""

    RUN_IT_TWICE = "Run_It_Twice"
    """More than one board is dealt in the same hand."""
    ANONYMOUS = "Anonymous"
    """Players at the table carry no names or identifiers."""
    OBSERVED = "Observed"
    """The hand was watched without the hero being dealt in."""
    FAST = "Fast"
    """Fast-fold variant: folding moves straight to a new hand."""
    CAP = "Cap"
    """The total each player may wager in the hand is limited."""