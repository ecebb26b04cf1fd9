"""Data model of an Open Hand History document.

Every class reads itself from the plain ``dict`` that ``json.loads`` gives
with ``from_dict`` and writes itself back with ``to_dict``. Malformed input
raises ``ValueError``. Cards are kept as their two-character text, such as
``"As"``.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar

from pokerhistory.dates import empty_string_is_none, format_iso8601, parse_iso8601
from pokerhistory.enums import (
    Action,
    BetType,
    GameType,
    SpeedType,
    TournamentFlag,
    TournamentType,
)

T = TypeVar("T")

_U64_LIMIT = 2**64


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _required(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _u64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an unsigned integer, got {value!r}")
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"unsigned integer out of range: {value!r}")
    return value


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _list(convert: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    def parse(value: Any) -> list[T]:
        if not isinstance(value, list):
            raise ValueError(f"expected a list, got {value!r}")
        return [convert(item) for item in value]

    return parse


def _enum(kind: Callable[[str], T]) -> Callable[[Any], T]:
    def parse(value: Any) -> T:
        return kind(_str(value))

    return parse


def _optional(
    data: Mapping[str, Any], key: str, convert: Callable[[Any], T]
) -> T | None:
    value = data.get(key)
    return None if value is None else convert(value)


def _empty_or(value: Any, convert: Callable[[Any], T]) -> T | None:
    value = empty_string_is_none(value)
    return None if value is None else convert(value)


def _cards(value: Any) -> list[str]:
    return _list(_str)(value)


def _date(value: Any) -> datetime | None:
    return parse_iso8601(value)


@dataclass
class SpeedObj:
    """Speed category and blind level duration of a tournament."""

    speed_type: SpeedType
    round_time: int
    """Seconds between blind increases."""

    @classmethod
    def from_dict(cls, data: Any) -> SpeedObj:
        data = _mapping(data, "speed")
        return cls(
            speed_type=_enum(SpeedType)(_required(data, "type")),
            round_time=_u64(_required(data, "round_time")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.speed_type.value, "round_time": self.round_time}


@dataclass
class TournamentBountyObj:
    """A bounty won by knocking out another player."""

    player_id: int
    bounty_won: float
    defeated_player_id: int

    @classmethod
    def from_dict(cls, data: Any) -> TournamentBountyObj:
        data = _mapping(data, "tournament bounty")
        return cls(
            player_id=_u64(_required(data, "player_id")),
            bounty_won=_number(_required(data, "bounty_won")),
            defeated_player_id=_u64(_required(data, "defeated_player_id")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "bounty_won": self.bounty_won,
            "defeated_player_id": self.defeated_player_id,
        }


@dataclass
class TournamentInfoObj:
    """Description of the tournament a hand belongs to."""

    tournament_number: str
    name: str
    start_date_utc: datetime | None
    currency: str
    buyin_amount: float
    fee_amount: float
    bounty_fee_amount: float
    initial_stack: int
    tournament_type: TournamentType
    flags: list[TournamentFlag] | None
    speed: SpeedObj

    @classmethod
    def from_dict(cls, data: Any) -> TournamentInfoObj:
        data = _mapping(data, "tournament info")
        return cls(
            tournament_number=_str(_required(data, "tournament_number")),
            name=_str(_required(data, "name")),
            start_date_utc=_date(_required(data, "start_date_utc")),
            currency=_str(_required(data, "currency")),
            buyin_amount=_number(_required(data, "buyin_amount")),
            fee_amount=_number(_required(data, "fee_amount")),
            bounty_fee_amount=_number(_required(data, "bounty_fee_amount")),
            initial_stack=_u64(_required(data, "initial_stack")),
            tournament_type=_enum(TournamentType)(_required(data, "type")),
            flags=_empty_or(_required(data, "flags"), _list(_enum(TournamentFlag))),
            speed=SpeedObj.from_dict(_required(data, "speed")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "tournament_number": self.tournament_number,
            "name": self.name,
            "start_date_utc": format_iso8601(self.start_date_utc),
            "currency": self.currency,
            "buyin_amount": self.buyin_amount,
            "fee_amount": self.fee_amount,
            "bounty_fee_amount": self.bounty_fee_amount,
            "initial_stack": self.initial_stack,
            "type": self.tournament_type.value,
            "flags": None if self.flags is None else [f.value for f in self.flags],
            "speed": self.speed.to_dict(),
        }


@dataclass
class PlayerWinsObj:
    """What one player took from a pot."""

    player_id: int
    win_amount: float
    cashout_amount: float | None = None
    cashout_fee: float | None = None
    bonus_amount: float | None = None
    contributed_rake: float | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PlayerWinsObj:
        data = _mapping(data, "player wins")
        return cls(
            player_id=_u64(_required(data, "player_id")),
            win_amount=_number(_required(data, "win_amount")),
            cashout_amount=_optional(data, "cashout_amount", _number),
            cashout_fee=_optional(data, "cashout_fee", _number),
            bonus_amount=_optional(data, "bonus_amount", _number),
            contributed_rake=_optional(data, "contributed_rake", _number),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_id": self.player_id,
            "win_amount": self.win_amount,
            "cashout_amount": self.cashout_amount,
            "cashout_fee": self.cashout_fee,
            "bonus_amount": self.bonus_amount,
            "contributed_rake": self.contributed_rake,
        }


@dataclass
class PotObj:
    """A pot and the players who won it."""

    number: int
    amount: float
    rake: float | None = None
    jackpot: float | None = None
    player_wins: list[PlayerWinsObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PotObj:
        data = _mapping(data, "pot")
        return cls(
            number=_u64(_required(data, "number")),
            amount=_number(_required(data, "amount")),
            rake=_optional(data, "rake", _number),
            jackpot=_optional(data, "jackpot", _number),
            player_wins=_list(PlayerWinsObj.from_dict)(_required(data, "player_wins")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "amount": self.amount,
            "rake": self.rake,
            "jackpot": self.jackpot,
            "player_wins": [win.to_dict() for win in self.player_wins],
        }


@dataclass
class ActionObj:
    """One action taken by a player in a betting round."""

    action_number: int
    player_id: int
    action: Action
    amount: float
    is_allin: bool
    cards: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ActionObj:
        data = _mapping(data, "action")
        cards = _empty_or(data["cards"], _cards) if "cards" in data else None
        return cls(
            action_number=_u64(_required(data, "action_number")),
            player_id=_u64(_required(data, "player_id")),
            action=_enum(Action)(_required(data, "action")),
            amount=_number(_required(data, "amount")),
            is_allin=_bool(_required(data, "is_allin")),
            cards=cards,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "action_number": self.action_number,
            "player_id": self.player_id,
            "action": self.action.value,
            "amount": self.amount,
            "is_allin": self.is_allin,
            "cards": None if self.cards is None else list(self.cards),
        }


@dataclass
class RoundObj:
    """A street: the cards dealt on it and the actions taken."""

    id: int
    street: str
    cards: list[str] | None = None
    actions: list[ActionObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> RoundObj:
        data = _mapping(data, "round")
        cards = _empty_or(data["cards"], _cards) if "cards" in data else None
        return cls(
            id=_u64(_required(data, "id")),
            street=_str(_required(data, "street")),
            cards=cards,
            actions=_list(ActionObj.from_dict)(_required(data, "actions")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "street": self.street,
            "cards": None if self.cards is None else list(self.cards),
            "actions": [action.to_dict() for action in self.actions],
        }


@dataclass
class PlayerObj:
    """A player seated at the table."""

    id: int
    seat: int
    name: str
    starting_stack: float
    display: str | None = None
    player_bounty: float | None = None
    is_sitting_out: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PlayerObj:
        data = _mapping(data, "player")
        return cls(
            id=_u64(_required(data, "id")),
            seat=_u64(_required(data, "seat")),
            name=_str(_required(data, "name")),
            starting_stack=_number(_required(data, "starting_stack")),
            display=_optional(data, "display", _str),
            player_bounty=_optional(data, "player_bounty", _number),
            is_sitting_out=_optional(data, "is_sitting_out", _bool),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "seat": self.seat,
            "name": self.name,
            "display": self.display,
            "starting_stack": self.starting_stack,
            "player_bounty": self.player_bounty,
            "is_sitting_out": self.is_sitting_out,
        }


@dataclass
class BetLimitObj:
    """Betting structure and cap of a game."""

    bet_type: BetType
    bet_cap: float

    @classmethod
    def from_dict(cls, data: Any) -> BetLimitObj:
        data = _mapping(data, "bet limit")
        return cls(
            bet_type=_enum(BetType)(_required(data, "bet_type")),
            bet_cap=_number(_required(data, "bet_cap")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"bet_type": self.bet_type.value, "bet_cap": self.bet_cap}


@dataclass
class HandHistory:
    """One complete hand."""

    spec_version: str
    site_name: str
    network_name: str
    internal_version: str
    game_number: str
    start_date_utc: datetime | None
    table_name: str
    game_type: GameType
    table_size: int
    currency: str
    dealer_seat: int
    small_blind_amount: float
    big_blind_amount: float
    ante_amount: float
    tournament: bool = False
    tournament_info: TournamentInfoObj | None = None
    table_handle: str | None = None
    table_skin: str | None = None
    bet_limit: BetLimitObj | None = None
    hero_player_id: int | None = None
    """The player whose view the history follows."""
    players: list[PlayerObj] = field(default_factory=list)
    rounds: list[RoundObj] = field(default_factory=list)
    pots: list[PotObj] = field(default_factory=list)
    tournament_bounties: list[TournamentBountyObj] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> HandHistory:
        data = _mapping(data, "hand history")
        return cls(
            spec_version=_str(_required(data, "spec_version")),
            site_name=_str(_required(data, "site_name")),
            network_name=_str(_required(data, "network_name")),
            internal_version=_str(_required(data, "internal_version")),
            tournament=_bool(data.get("tournament", False)),
            tournament_info=_optional(data, "tournament_info", TournamentInfoObj.from_dict),
            game_number=_str(_required(data, "game_number")),
            start_date_utc=_date(_required(data, "start_date_utc")),
            table_name=_str(_required(data, "table_name")),
            table_handle=_optional(data, "table_handle", _str),
            table_skin=_optional(data, "table_skin", _str),
            game_type=_enum(GameType)(_required(data, "game_type")),
            bet_limit=_optional(data, "bet_limit", BetLimitObj.from_dict),
            table_size=_u64(_required(data, "table_size")),
            currency=_str(_required(data, "currency")),
            dealer_seat=_u64(_required(data, "dealer_seat")),
            small_blind_amount=_number(_required(data, "small_blind_amount")),
            big_blind_amount=_number(_required(data, "big_blind_amount")),
            ante_amount=_number(_required(data, "ante_amount")),
            hero_player_id=_optional(data, "hero_player_id", _u64),
            players=_list(PlayerObj.from_dict)(_required(data, "players")),
            rounds=_list(RoundObj.from_dict)(_required(data, "rounds")),
            pots=_list(PotObj.from_dict)(_required(data, "pots")),
            tournament_bounties=_optional(
                data, "tournament_bounties", _list(TournamentBountyObj.from_dict)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "spec_version": self.spec_version,
            "site_name": self.site_name,
            "network_name": self.network_name,
            "internal_version": self.internal_version,
            "tournament": self.tournament,
            "tournament_info": (
                None if self.tournament_info is None else self.tournament_info.to_dict()
            ),
            "game_number": self.game_number,
            "start_date_utc": format_iso8601(self.start_date_utc),
            "table_name": self.table_name,
            "table_handle": self.table_handle,
            "table_skin": self.table_skin,
            "game_type": self.game_type.value,
            "bet_limit": None if self.bet_limit is None else self.bet_limit.to_dict(),
            "table_size": self.table_size,
            "currency": self.currency,
            "dealer_seat": self.dealer_seat,
            "small_blind_amount": self.small_blind_amount,
            "big_blind_amount": self.big_blind_amount,
            "ante_amount": self.ante_amount,
            "hero_player_id": self.hero_player_id,
            "players": [player.to_dict() for player in self.players],
            "rounds": [round_.to_dict() for round_ in self.rounds],
            "pots": [pot.to_dict() for pot in self.pots],
            "tournament_bounties": (
                None
                if self.tournament_bounties is None
                else [bounty.to_dict() for bounty in self.tournament_bounties]
            ),
        }


@dataclass
class OpenHandHistoryWrapper:
    """Top-level document: a hand history under the ``ohh`` key."""

    ohh: HandHistory

    @classmethod
    def from_dict(cls, data: Any) -> OpenHandHistoryWrapper:
        data = _mapping(data, "document")
        return cls(ohh=HandHistory.from_dict(_required(data, "ohh")))

    def to_dict(self) -> dict[str, Any]:
        return {"ohh": self.ohh.to_dict()}

    @classmethod
    def from_json(cls, text: str | bytes) -> OpenHandHistoryWrapper:
        """Parse a JSON document; raises ``ValueError`` if it is malformed."""
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Serialise to compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))