"""Lists of cards: the deck, hands, tricks and the queries run over them."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable

from schafkopf.card import Card, CardColor, CardType

CARD_COUNT = 32

_DECK_TYPES = (
    CardType.SAU,
    CardType.KOENIG,
    CardType.OBER,
    CardType.UNTER,
    CardType.ZEHN,
    CardType.NEUN,
    CardType.ACHT,
    CardType.SIEBEN,
)
_DECK_COLORS = (CardColor.EICHEL, CardColor.GRAS, CardColor.HERZ, CardColor.SCHELLEN)


class CardList(list):
    """An ordered list of :class:`Card` objects."""

    @classmethod
    def from_ids(cls, ids: Iterable[int]) -> CardList:
        """Build a list of new cards from card ids."""
        return cls(Card.from_id(card_id) for card_id in ids)

    def to_ids(self) -> list[int]:
        """Return the ids of all cards, in order."""
        return [card.id for card in self]

    def points(self) -> int:
        """Return the sum of the points of all cards."""
        return sum(card.points for card in self)

    def find_cards(self, color: int, card_type: int) -> CardList:
        """Return the cards matching color and type.

        ``CardColor.NOCOLOR`` and ``CardType.NOSTICH`` match any color or type.
        """
        return CardList(
            card
            for card in self
            if (color == CardColor.NOCOLOR or card.color == color)
            and (card_type == CardType.NOSTICH or card.card_type == card_type)
        )

    def contains_card(self, color: int, card_type: int) -> bool:
        """Return True if a card of this color and type is in the list."""
        return self.contains_id(int(color) + int(card_type))

    def contains_id(self, card_id: int) -> bool:
        """Return True if a card with this id is in the list."""
        return any(card.id == card_id for card in self)

    def remove_cards(self, items: Iterable[Card]) -> None:
        """Remove every card equal in type and color to one of ``items``."""
        items = list(items)
        self[:] = [card for card in self if not any(card.is_equal(item) for item in items)]

    def sort_by(self, key: Callable[[Card], int]) -> None:
        """Sort the cards in place, ascending by ``key``; equal keys keep their order."""
        self.sort(key=key)


def full_deck() -> CardList:
    """Return a fresh, ordered deck of the 32 Schafkopf cards."""
    return CardList(Card(card_type, color) for card_type in _DECK_TYPES for color in _DECK_COLORS)


def shuffled_deck(rng: random.Random | None = None) -> CardList:
    """Return a fresh deck in random order."""
    deck = full_deck()
    (rng or random).shuffle(deck)
    return deck