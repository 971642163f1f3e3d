"""Decisions of a computer player: doubling, choosing a game and picking a card."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from schafkopf.card import Card, CardColor, CardType
from schafkopf.cardlist import CardList, full_deck
from schafkopf.game import PLAYERS, highest_card_index, is_higher
from schafkopf.gameinfo import NUMCARDS, AllowedGames, GameInfo, GameMode, is_allowed

_CANDIDATE_MODES = (GameMode.STICHT, GameMode.WENZ, GameMode.GEIER, GameMode.RUFSPIEL)
_CANDIDATE_COLORS = (
    CardColor.NOCOLOR,
    CardColor.EICHEL,
    CardColor.GRAS,
    CardColor.HERZ,
    CardColor.SCHELLEN,
)


@dataclass
class TableView:
    """What a computer player knows about the table when it has to play a card.

    ``playing_party`` holds the owners that belong to the playing party; cards
    in ``trick`` carry their owner so the holder of the trick can be judged.
    ``next_player`` is the owner playing after this player, or None.
    """

    info: GameInfo
    hand: Sequence[Card]
    trick: Sequence[Card] = ()
    played: Sequence[Card] = ()
    all_cards: Sequence[Card] = field(default_factory=full_deck)
    me: Any = None
    playing_party: Collection[Any] = ()
    next_player: Any = None

    def in_playing_party(self, owner: Any) -> bool:
        """Return True if ``owner`` belongs to the playing party."""
        return owner in self.playing_party

    @property
    def is_player(self) -> bool:
        """True if this player belongs to the playing party."""
        return self.in_playing_party(self.me)


@dataclass
class _Candidate:
    info: GameInfo
    weight: int = 0
    trumps: int = 0
    missing_colors: int = 0


def wants_to_double(hand: Sequence[Card], is_last: bool) -> bool:
    """Return True if the visible half of the hand is worth doubling.

    The first player sees the first half of the hand, the last player the
    second half. Doubling happens when all these cards share one color or
    all are trumps or Sau in a Herz Sticht.
    """
    half = NUMCARDS // 2
    start = half if is_last else 0
    visible = list(hand[start:start + half])
    if len(visible) < half:
        raise ValueError(f"a hand of {len(hand)} cards is too short to decide on doubling")

    if all(card.color == visible[0].color for card in visible):
        return True

    herz_sticht = GameInfo(mode=GameMode.STICHT, color=CardColor.HERZ)
    return all(
        card.card_type == CardType.SAU or herz_sticht.is_trump(card) for card in visible
    )


def _evaluate(hand: CardList, info: GameInfo) -> _Candidate:
    candidate = _Candidate(info)
    for card in hand:
        candidate.weight += info.weight(card)
        if info.is_trump(card):
            candidate.trumps += 1
        elif card.card_type != CardType.SAU and not hand.find_cards(card.color, CardType.SAU):
            candidate.missing_colors += 1
    return candidate


def _acceptable(candidate: _Candidate) -> bool:
    if candidate.info.mode == GameMode.RUFSPIEL:
        return candidate.weight >= 8 and (
            (candidate.missing_colors <= 2 and candidate.trumps >= 5)
            or candidate.missing_colors <= 1
        )
    return candidate.weight >= 9 and candidate.missing_colors <= 1 and candidate.trumps >= 5


def choose_game(
    hand: Iterable[Card], force: bool = False, allowed: AllowedGames | None = None
) -> GameInfo | None:
    """Return the game this hand wants to play, or None.

    When ``force`` is set and no game looks good, an Eichel Sticht is played.
    """
    hand = CardList(hand)
    candidates = [
        _evaluate(hand, GameInfo(mode=mode, color=color))
        for mode in _CANDIDATE_MODES
        for color in _CANDIDATE_COLORS
        if is_allowed(hand, mode, color, allowed)
    ]
    good = [candidate for candidate in candidates if _acceptable(candidate)]
    if good:
        best = max(good, key=lambda candidate: candidate.weight)
        return GameInfo(mode=best.info.mode, color=best.info.color)
    if force:
        return GameInfo(mode=GameMode.STICHT, color=CardColor.EICHEL)
    return None


def find_highest_card(info: GameInfo, cards: Sequence[Card]) -> Card | None:
    """Return the highest of ``cards`` in the game ``info``, or None if empty."""
    if not cards:
        return None
    high = cards[0]
    for card in cards:
        if is_higher(info, card, high):
            high = card
    return high


def find_lowest_possible_card(
    info: GameInfo, highest: Card, cards: Sequence[Card]
) -> Card | None:
    """Return the lowest of ``cards`` that still beats ``highest``.

    Falls back to the highest of ``cards`` when none beats it.
    """
    best = find_highest_card(info, cards)
    for card in cards:
        if is_higher(info, card, highest) and not is_higher(info, card, best):
            best = card
    return best


def find_schmiere(cards: Sequence[Card]) -> Card | None:
    """Return the card with the most points; the first one on ties."""
    return max(cards, key=lambda card: card.points, default=None)


def find_cheapest_card(cards: Sequence[Card]) -> Card | None:
    """Return the card with the fewest points; the first one on ties."""
    return min(cards, key=lambda card: card.points, default=None)


def can_make_trick(info: GameInfo, trick: Sequence[Card], cards: Sequence[Card]) -> bool:
    """Return True if one of ``cards`` beats the current trick."""
    if not trick:
        return True
    highest = trick[highest_card_index(info, trick)]
    return any(is_higher(info, card, highest) for card in cards)


def highest_trump_in_game(
    info: GameInfo,
    all_cards: Iterable[Card],
    played: Iterable[Card],
    hand: Iterable[Card],
) -> Card | None:
    """Return the highest trump not yet played and not in ``hand``, or None."""
    gone = {card.id for card in played} | {card.id for card in hand}
    trumps = [card for card in all_cards if info.is_trump(card) and card.id not in gone]
    return max(trumps, key=info.eval_card, default=None)


def _count_of_color(info: GameInfo, color: int, cards: Iterable[Card]) -> int:
    return sum(
        1
        for card in cards
        if (color == CardColor.NOCOLOR if info.is_trump(card) else card.color == color)
    )


def cards_still_in_game(
    info: GameInfo, color: int, all_cards: Iterable[Card], seen: Iterable[Card]
) -> int:
    """Return how many cards of a color have not been seen yet.

    Trumps count as their own color; pass ``CardColor.NOCOLOR`` to count them.
    """
    return _count_of_color(info, color, all_cards) - _count_of_color(info, color, seen)


def _drop_points(cards: list[Card], points: int) -> list[Card]:
    rest = [card for card in cards if card.points != points]
    return rest if rest else cards[-1:]


def _own_trick(view: TableView) -> bool:
    if not view.trick:
        return False
    highest = view.trick[highest_card_index(view.info, view.trick)]
    return view.in_playing_party(highest.owner) == view.is_player


def choose_card(view: TableView, allowed: Sequence[Card]) -> Card:
    """Pick the card to play from ``allowed``."""
    cards = list(allowed)
    if not cards:
        raise ValueError("no card is allowed to be played")

    info, trick = view.info, view.trick
    if not trick:
        cards = _drop_points(_drop_points(cards, 10), 4)

    if _own_trick(view):
        top_trump = highest_trump_in_game(info, view.all_cards, view.played, view.hand)
        trick_high = find_highest_card(info, trick)
        if (
            len(trick) == PLAYERS - 1
            or (top_trump is not None and trick_high.id == top_trump.id)
            or (
                len(trick) == PLAYERS - 2
                and view.next_player is not None
                and view.in_playing_party(view.next_player) == view.is_player
            )
        ):
            return find_schmiere(cards)

    if can_make_trick(info, trick, cards):
        trumped = any(info.is_trump(card) for card in trick)
        if trick and not trumped:
            seen = [*view.played, *trick]
            if cards_still_in_game(info, trick[0].color, view.all_cards, seen) >= 3:
                return find_lowest_possible_card(info, find_highest_card(info, trick), cards)
        if len(trick) == PLAYERS - 1:
            return find_lowest_possible_card(info, find_highest_card(info, trick), cards)
        return find_highest_card(info, cards)

    return find_cheapest_card(cards)