"""A single card of the 32-card Schafkopf deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from schafkopf.cardinfo import CardInfo, Rank, Suit


class CardType(IntEnum):
    """Card type; values are chosen so that type + color gives a unique id."""

    NOSTICH = -1
    SAU = 1
    KOENIG = 5
    OBER = 9
    UNTER = 13
    ZEHN = 17
    NEUN = 21
    ACHT = 25
    SIEBEN = 29


class CardColor(IntEnum):
    """Card color (suit)."""

    NOCOLOR = -1
    EICHEL = 0
    GRAS = 1
    HERZ = 2
    SCHELLEN = 3


_POINTS = {
    CardType.SAU: 11,
    CardType.ZEHN: 10,
    CardType.KOENIG: 4,
    CardType.OBER: 3,
    CardType.UNTER: 2,
}

_SUITS = {
    CardColor.EICHEL: Suit.CLUB,
    CardColor.GRAS: Suit.SPADE,
    CardColor.HERZ: Suit.HEART,
    CardColor.SCHELLEN: Suit.DIAMOND,
}

_RANKS = {
    CardType.SAU: Rank.ACE,
    CardType.KOENIG: Rank.KING,
    CardType.OBER: Rank.QUEEN,
    CardType.UNTER: Rank.JACK,
    CardType.ZEHN: Rank.TEN,
    CardType.NEUN: Rank.NINE,
    CardType.ACHT: Rank.EIGHT,
    CardType.SIEBEN: Rank.SEVEN,
    CardType.NOSTICH: Rank.ACE,
}

_COLOR_NAMES = {
    CardColor.EICHEL: "Eichel",
    CardColor.GRAS: "Gras",
    CardColor.HERZ: "Herz",
    CardColor.SCHELLEN: "Schellen",
}

_TYPE_NAMES = {
    CardType.SAU: "Sau",
    CardType.ZEHN: "Zehn",
    CardType.KOENIG: "Koenig",
    CardType.OBER: "Ober",
    CardType.UNTER: "Unter",
    CardType.NEUN: "Neun",
    CardType.ACHT: "Acht",
    CardType.SIEBEN: "Sieben",
}

# Rank order from highest to lowest, ignoring trumps and colors.
_PLAIN_ORDER = (
    CardType.SAU,
    CardType.ZEHN,
    CardType.KOENIG,
    CardType.OBER,
    CardType.UNTER,
    CardType.NEUN,
    CardType.ACHT,
    CardType.SIEBEN,
)


@dataclass(eq=False)
class Card:
    """One card. Cards compare by identity; use :meth:`is_equal` for value equality."""

    card_type: CardType
    color: CardColor
    owner: Any = None

    def __post_init__(self) -> None:
        self.card_type = CardType(self.card_type)
        self.color = CardColor(self.color)

    @classmethod
    def from_id(cls, card_id: int) -> Card:
        """Build a card from its id (type + color)."""
        for color in (CardColor.EICHEL, CardColor.GRAS, CardColor.HERZ, CardColor.SCHELLEN):
            if (card_id - color - 1) % 4 == 0:
                try:
                    card_type = CardType(card_id - color)
                except ValueError:
                    raise ValueError(f"invalid card id: {card_id}") from None
                return cls(card_type, color)
        return cls(CardType.NOSTICH, CardColor.NOCOLOR)

    @property
    def id(self) -> int:
        """Unique id of the card, the sum of type and color."""
        return int(self.card_type) + int(self.color)

    @property
    def points(self) -> int:
        """Points the card is worth, e.g. 4 for a Koenig."""
        return _POINTS.get(self.card_type, 0)

    def card_info(self) -> CardInfo:
        """Return the matching card of a standard deck, used for rendering."""
        return CardInfo(_SUITS.get(self.color, Suit.NONE), _RANKS[self.card_type])

    def is_equal(self, other: Card) -> bool:
        """Return True if both cards have the same type and color."""
        return self.card_type == other.card_type and self.color == other.color

    def lower_than(self, other: Card) -> bool:
        """Plain rank comparison ignoring trumps and colors.

        True when ``other`` stands at or after this card in the order
        Sau, Zehn, Koenig, Ober, Unter, Neun, Acht, Sieben.
        """
        pos = _PLAIN_ORDER.index(self.card_type) if self.card_type in _PLAIN_ORDER else 0
        if other.card_type not in _PLAIN_ORDER:
            return False
        return _PLAIN_ORDER.index(other.card_type) >= pos

    def __str__(self) -> str:
        color = _COLOR_NAMES.get(self.color, "Nocolor")
        card_type = _TYPE_NAMES.get(self.card_type, "Unknown")
        return f"{color} {card_type}"