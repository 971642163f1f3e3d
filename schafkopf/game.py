"""Rules that drive one round of Schafkopf: dealing, ranking cards and choosing the game."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from schafkopf.card import Card, CardColor, CardType
from schafkopf.cardlist import CARD_COUNT, CardList, shuffled_deck
from schafkopf.gameinfo import NUMCARDS, GameInfo, GameMode

PLAYERS = 4
TURNS = CARD_COUNT // PLAYERS


class NoGamePolicy(Enum):
    """What happens when no player wants to play."""

    NEUGEBEN = "neugeben"
    ALTERSPIELT = "alterspielt"
    RAMSCH = "ramsch"


Chooser = Callable[[CardList, bool], "GameInfo | None"]


@dataclass(eq=False)
class Seat:
    """A player at the table.

    ``chooser`` is asked for a game with the hand and a ``force`` flag; when
    forced it must return a game.
    """

    name: str
    cards: CardList = field(default_factory=CardList)
    doubled: bool = False
    is_human: bool = False
    chooser: Chooser | None = None

    def forced_game(self) -> GameInfo:
        """Return the game this seat plays when it is forced to play."""
        if self.chooser is None:
            raise ValueError(f"seat {self.name!r} cannot choose a game")
        info = self.chooser(self.cards, True)
        if info is None:
            raise ValueError(f"seat {self.name!r} returned no game although forced")
        info.spieler = self
        return info


def deal(rng: random.Random | None = None) -> list[CardList]:
    """Shuffle a deck and deal it card by card to the four players."""
    deck = shuffled_deck(rng)
    hands = [CardList() for _ in range(PLAYERS)]
    for position, card in enumerate(deck):
        hands[position % PLAYERS].append(card)
    return hands


def is_higher(info: GameInfo, card: Card, high: Card) -> bool:
    """Return True if ``card`` beats ``high`` in the game ``info``.

    A non-trump only beats a card of its own color.
    """
    card_value = info.eval_card(card)
    high_value = info.eval_card(high)
    if info.is_trump(card) or info.is_trump(high):
        return high_value < card_value
    if info.mode in (GameMode.GEIER, GameMode.WENZ):
        per_color = NUMCARDS - 1
    else:
        per_color = NUMCARDS - 2
    if (high_value - 1) // per_color == (card_value - 1) // per_color:
        return high_value < card_value
    return False


def highest_card_index(info: GameInfo, cards: Sequence[Card]) -> int:
    """Return the index of the card that takes the trick."""
    if not cards:
        raise ValueError("cannot find the highest card of an empty trick")
    best = 0
    for index, card in enumerate(cards):
        if is_higher(info, card, cards[best]):
            best = index
    return best


def choose_game(offers: Sequence[GameInfo]) -> GameInfo:
    """Return the highest-ranking of the offered games; earlier seats win ties."""
    if not offers:
        raise ValueError("no game was offered")
    best = offers[0]
    for offer in offers:
        if offer.beats(best):
            best = offer
    return best


def find_partner(info: GameInfo, seats: Sequence[Seat]) -> Seat | None:
    """In a Rufspiel, set and return the seat holding the called Sau."""
    if info.mode != GameMode.RUFSPIEL:
        return None
    called = Card(CardType.SAU, info.color)
    for seat in seats:
        if any(card.is_equal(called) for card in seat.cards):
            info.mitspieler = seat
            return seat
    return None


def resolve_no_game(
    seats: Sequence[Seat], policy: NoGamePolicy, doubler_has_to_play: bool
) -> GameInfo | None:
    """Decide the game when nobody wants to play.

    Returns the forced game, or None when the cards are thrown together.
    """
    if doubler_has_to_play:
        for seat in reversed(seats):
            if seat.doubled:
                return seat.forced_game()

    if policy == NoGamePolicy.NEUGEBEN:
        return None
    if policy == NoGamePolicy.ALTERSPIELT:
        for seat in seats:
            if seat.cards.contains_card(CardColor.EICHEL, CardType.OBER):
                return seat.forced_game()
        return None
    return GameInfo(mode=GameMode.RAMSCH, color=CardColor.NOCOLOR)


def times_doubled(
    seats: Sequence[Seat], thrown_together: int, double_next_game: bool
) -> int:
    """Return how often the stakes are doubled in this game."""
    doubled = sum(1 for seat in seats if seat.doubled)
    if double_next_game:
        doubled += thrown_together
    return doubled


def trick_order(seats: Sequence[Seat], leader_index: int) -> list[Seat]:
    """Return the seats in playing order, starting with the leader."""
    count = len(seats)
    return [seats[(offset + leader_index) % count] for offset in range(count)]