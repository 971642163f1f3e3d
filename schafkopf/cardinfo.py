"""Card identities in a standard deck and the element names used to render them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Suit of a standard playing card."""

    NONE = 0
    DIAMOND = 1
    HEART = 2
    CLUB = 3
    SPADE = 4


class Rank(IntEnum):
    """Rank of a standard playing card."""

    JOKER = 0
    ACE = 1
    KING = 2
    QUEEN = 3
    JACK = 4
    TEN = 5
    NINE = 6
    EIGHT = 7
    SEVEN = 8
    SIX = 9
    FIVE = 10
    FOUR = 11
    THREE = 12
    TWO = 13


_RANK_PREFIX = {
    Rank.ACE: "1_",
    Rank.KING: "king_",
    Rank.QUEEN: "queen_",
    Rank.JACK: "jack_",
    Rank.TEN: "10_",
    Rank.NINE: "9_",
    Rank.EIGHT: "8_",
    Rank.SEVEN: "7_",
    Rank.SIX: "6_",
    Rank.FIVE: "5_",
    Rank.FOUR: "4_",
    Rank.THREE: "3_",
    Rank.TWO: "2_",
}

_SUIT_NAME = {
    Suit.CLUB: "club",
    Suit.SPADE: "spade",
    Suit.DIAMOND: "diamond",
    Suit.HEART: "heart",
}


@dataclass(frozen=True)
class CardInfo:
    """A card of a standard deck, identified by suit and rank."""

    suit: Suit
    rank: Rank

    def svg_name(self) -> str:
        """Return the SVG element id of this card, e.g. ``1_club``."""
        return _RANK_PREFIX.get(self.rank, "") + _SUIT_NAME.get(self.suit, "")


_DECK_SUIT_ORDER = (Suit.CLUB, Suit.HEART, Suit.DIAMOND, Suit.SPADE)
_DECK_RANK_ORDER = (
    Rank.ACE,
    Rank.KING,
    Rank.QUEEN,
    Rank.JACK,
    Rank.TEN,
    Rank.NINE,
    Rank.EIGHT,
    Rank.SEVEN,
    Rank.SIX,
    Rank.FIVE,
    Rank.FOUR,
    Rank.THREE,
    Rank.TWO,
)

FULL_DECK: tuple[CardInfo, ...] = tuple(
    CardInfo(suit, rank) for rank in _DECK_RANK_ORDER for suit in _DECK_SUIT_ORDER
) + (CardInfo(Suit.NONE, Rank.JOKER),)


def key_for_pixmap(theme: str, element: str, width: int, height: int) -> str:
    """Return the cache key of a rendered element at a given size."""
    return f"{theme}_{element}_{width}_{height}"


def deck_elements(count: int) -> list[str]:
    """Return the SVG element names of the first ``count`` cards of the full deck."""
    if not 0 <= count <= len(FULL_DECK):
        raise ValueError(f"deck size must be between 0 and {len(FULL_DECK)}, got {count}")
    return [info.svg_name() for info in FULL_DECK[:count]]