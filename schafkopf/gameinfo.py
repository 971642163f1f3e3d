"""The game being played: mode, color, the players and the card ordering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from schafkopf.card import Card, CardColor, CardType
from schafkopf.cardlist import CARD_COUNT, CardList, full_deck

NUMCARDS = 8
NUMTRUMPF = 4


class GameMode(IntEnum):
    """Game modes; a lower value is a higher-ranking game."""

    STICHT = 0
    WENZ = 1
    GEIER = 2
    RUFSPIEL = 3
    RAMSCH = 4
    DACHS = 5


@dataclass
class AllowedGames:
    """Which optional games the user permits."""

    dachs: bool = True
    wenz: bool = True
    farb_wenz: bool = True
    geier: bool = True
    farb_geier: bool = True


_COLOR_TEXT = {
    CardColor.NOCOLOR: "colorless",
    CardColor.EICHEL: "Eichel",
    CardColor.GRAS: "Gras",
    CardColor.HERZ: "Heart",
    CardColor.SCHELLEN: "Schellen",
}

_MODE_TEXT = {
    GameMode.STICHT: "Sticht",
    GameMode.GEIER: "Geier",
    GameMode.WENZ: "Wenz",
    GameMode.RAMSCH: "Ramsch",
    GameMode.DACHS: "Badger",
}

_STD_TRUMPS = (CardType.OBER, CardType.UNTER)
_STD_CARDS = (
    CardType.SAU, CardType.ZEHN, CardType.KOENIG,
    CardType.NEUN, CardType.ACHT, CardType.SIEBEN, CardType.NOSTICH,
)
_GEIER_CARDS = (
    CardType.SAU, CardType.ZEHN, CardType.KOENIG, CardType.UNTER,
    CardType.NEUN, CardType.ACHT, CardType.SIEBEN,
)
_WENZ_CARDS = (
    CardType.SAU, CardType.ZEHN, CardType.KOENIG, CardType.OBER,
    CardType.NEUN, CardType.ACHT, CardType.SIEBEN,
)
_DACHS_TRUMPS = (CardType.SAU, CardType.ZEHN)
_DACHS_CARDS = (
    CardType.KOENIG, CardType.OBER, CardType.UNTER,
    CardType.NEUN, CardType.ACHT, CardType.SIEBEN, CardType.NOSTICH,
)


def _index(seq: tuple, value: int) -> int:
    return seq.index(value) if value in seq else -1


@dataclass
class GameInfo:
    """Everything about the current game: mode, color, player and partner.

    ``spieler`` and ``mitspieler`` are player objects with ``name`` and ``cards``.
    """

    mode: GameMode = GameMode.STICHT
    color: CardColor = CardColor.NOCOLOR
    spieler: Any = None
    mitspieler: Any = None
    valid: bool = False

    def __post_init__(self) -> None:
        self.mode = GameMode(self.mode)
        self.color = CardColor(self.color)

    def describe(self) -> str:
        """Return a sentence announcing the game."""
        color = _COLOR_TEXT.get(self.color, "")
        mode = _MODE_TEXT.get(self.mode, "")
        name = self.spieler.name if self.spieler is not None else ""
        if self.mode == GameMode.RUFSPIEL:
            return f"{name} plays on the {color} Ace."
        if self.mode == GameMode.RAMSCH:
            return "Ramsch is played."
        return f"{name} plays {color} {mode}."

    def weight(self, card: Card) -> int:
        """Return how much a card counts towards wanting to play this game."""
        if self.is_trump(card):
            if card.card_type == CardType.OBER and self.mode != GameMode.WENZ:
                return 3
            if card.card_type == CardType.UNTER:
                return 3 if self.mode == GameMode.WENZ else 2
            return 1
        return 1 if card.card_type == CardType.SAU else -1

    def is_trump(self, card: Card) -> bool:
        """Return True if the card is a trump in this game."""
        kind, color = card.card_type, card.color
        if self.mode in (GameMode.RUFSPIEL, GameMode.RAMSCH):
            return kind in (CardType.OBER, CardType.UNTER) or color == CardColor.HERZ
        if self.mode == GameMode.STICHT:
            return kind in (CardType.OBER, CardType.UNTER) or color == self.color
        if self.mode == GameMode.GEIER:
            return kind == CardType.OBER or color == self.color
        if self.mode == GameMode.WENZ:
            return kind == CardType.UNTER or color == self.color
        if self.mode == GameMode.DACHS:
            return kind in (CardType.SAU, CardType.ZEHN)
        return False

    def eval_card(self, card: Card) -> int:
        """Return the worth of a card, from 1 to 32; the highest card gets 32."""
        if self.mode == GameMode.STICHT:
            trumps, cards, col = _STD_TRUMPS, _STD_CARDS, self.color
        elif self.mode == GameMode.GEIER:
            trumps, cards, col = (CardType.OBER,), _GEIER_CARDS, self.color
        elif self.mode == GameMode.WENZ:
            trumps, cards, col = (CardType.UNTER,), _WENZ_CARDS, self.color
        elif self.mode == GameMode.DACHS:
            trumps, cards, col = _DACHS_TRUMPS, _DACHS_CARDS, CardColor.NOCOLOR
        else:
            trumps, cards, col = _STD_TRUMPS, _STD_CARDS, CardColor.HERZ
        if col == CardColor.NOCOLOR:
            col = CardColor.EICHEL
        colors = (int(col),) + tuple(c for c in range(4) if c != col)

        trump_index = _index(trumps, card.card_type)
        if trump_index != -1:
            return CARD_COUNT - (trump_index * NUMTRUMPF + card.color)
        card_index = _index(cards, card.card_type)
        color_index = _index(colors, card.color)
        return CARD_COUNT - (
            len(trumps) * NUMTRUMPF + color_index * (NUMCARDS - len(trumps)) + card_index
        )

    def laufende(self) -> int:
        """Count the run of top trumps held by the playing party.

        Positive when the party holds the highest card, negative when it lacks it.
        """
        if self.mode == GameMode.RAMSCH:
            return 0
        if self.spieler is None:
            raise ValueError("laufende needs a player")
        held = CardList(self.spieler.cards)
        if self.mitspieler is not None:
            held.extend(self.mitspieler.cards)

        ranked = full_deck()
        ranked.sort_by(self.eval_card)
        count = 0
        for position, card in enumerate(reversed(ranked)):
            first = position == 0
            has = bool(held.find_cards(card.color, card.card_type))
            if has and (count > 0 or first):
                count += 1
            elif (not has and count < 0) or first:
                count -= 1
            else:
                break
        return count

    def beats(self, other: GameInfo) -> bool:
        """Return True if this game ranks above ``other``.

        For equal modes only a colorless game ranks higher.
        """
        if self.mode == other.mode:
            return self.color == CardColor.NOCOLOR
        return self.mode < other.mode


def is_allowed(
    cards: CardList, mode: int, color: int, allowed: AllowedGames | None = None
) -> bool:
    """Return True if a hand may announce ``mode`` in ``color``.

    Checks the rules of the game and the user's ``allowed`` preferences.
    """
    allowed = allowed if allowed is not None else AllowedGames()
    if mode == GameMode.RAMSCH:
        return False
    if mode == GameMode.RUFSPIEL:
        if cards.contains_card(color, CardType.SAU) or color == CardColor.HERZ:
            return False
        return any(
            card.color == color and card.card_type not in (CardType.OBER, CardType.UNTER)
            for card in cards
        )
    if mode == GameMode.STICHT and color == CardColor.NOCOLOR:
        return False
    if mode == GameMode.DACHS and not allowed.dachs:
        return False
    if mode == GameMode.WENZ and (
        not allowed.wenz or (color != CardColor.NOCOLOR and not allowed.farb_wenz)
    ):
        return False
    if mode == GameMode.GEIER and (
        not allowed.geier or (color != CardColor.NOCOLOR and not allowed.farb_geier)
    ):
        return False
    return True