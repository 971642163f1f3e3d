import itertools

import pytest

from schafkopf.card import Card, CardColor, CardType
from schafkopf.cardinfo import Rank, Suit

REAL_TYPES = [t for t in CardType if t != CardType.NOSTICH]
REAL_COLORS = [c for c in CardColor if c != CardColor.NOCOLOR]


@pytest.mark.parametrize(
    "card_type, points",
    [
        (CardType.SAU, 11),
        (CardType.ZEHN, 10),
        (CardType.KOENIG, 4),
        (CardType.OBER, 3),
        (CardType.UNTER, 2),
        (CardType.NEUN, 0),
        (CardType.ACHT, 0),
        (CardType.SIEBEN, 0),
    ],
)
def test_points(card_type, points):
    assert Card(card_type, CardColor.GRAS).points == points


def test_deck_points_sum_to_120():
    deck = [Card(t, c) for t, c in itertools.product(REAL_TYPES, REAL_COLORS)]
    assert sum(card.points for card in deck) == 120


def test_id_is_type_plus_color():
    card = Card(CardType.OBER, CardColor.HERZ)
    assert card.id == CardType.OBER + CardColor.HERZ


def test_ids_are_unique_across_deck():
    ids = {Card(t, c).id for t, c in itertools.product(REAL_TYPES, REAL_COLORS)}
    assert len(ids) == 32


@pytest.mark.parametrize("card_type, color", list(itertools.product(REAL_TYPES, REAL_COLORS)))
def test_from_id_round_trip(card_type, color):
    original = Card(card_type, color)
    rebuilt = Card.from_id(original.id)
    assert rebuilt.is_equal(original)
    assert rebuilt.id == original.id


def test_from_id_invalid():
    with pytest.raises(ValueError):
        Card.from_id(40)


def test_str():
    assert str(Card(CardType.SAU, CardColor.HERZ)) == "Herz Sau"
    assert str(Card(CardType.KOENIG, CardColor.EICHEL)) == "Eichel Koenig"
    assert str(Card(CardType.NOSTICH, CardColor.NOCOLOR)) == "Nocolor Unknown"


def test_is_equal_and_identity():
    a = Card(CardType.UNTER, CardColor.SCHELLEN)
    b = Card(CardType.UNTER, CardColor.SCHELLEN)
    c = Card(CardType.UNTER, CardColor.GRAS)
    assert a.is_equal(b)
    assert not a.is_equal(c)
    assert a != b
    assert a in [a] and b not in [a]


@pytest.mark.parametrize(
    "color, suit",
    [
        (CardColor.EICHEL, Suit.CLUB),
        (CardColor.GRAS, Suit.SPADE),
        (CardColor.HERZ, Suit.HEART),
        (CardColor.SCHELLEN, Suit.DIAMOND),
    ],
)
def test_card_info_suit(color, suit):
    assert Card(CardType.SAU, color).card_info().suit == suit


@pytest.mark.parametrize(
    "card_type, rank",
    [
        (CardType.SAU, Rank.ACE),
        (CardType.KOENIG, Rank.KING),
        (CardType.OBER, Rank.QUEEN),
        (CardType.UNTER, Rank.JACK),
        (CardType.ZEHN, Rank.TEN),
        (CardType.NEUN, Rank.NINE),
        (CardType.ACHT, Rank.EIGHT),
        (CardType.SIEBEN, Rank.SEVEN),
    ],
)
def test_card_info_rank(card_type, rank):
    assert Card(card_type, CardColor.HERZ).card_info().rank == rank


def test_card_info_svg_name():
    assert Card(CardType.OBER, CardColor.HERZ).card_info().svg_name() == "queen_heart"


def test_lower_than_order():
    sau = Card(CardType.SAU, CardColor.GRAS)
    sieben = Card(CardType.SIEBEN, CardColor.GRAS)
    assert sau.lower_than(sieben)
    assert not sieben.lower_than(sau)
    assert sau.lower_than(Card(CardType.SAU, CardColor.HERZ))


def test_lower_than_unknown_other():
    sau = Card(CardType.SAU, CardColor.GRAS)
    assert not sau.lower_than(Card(CardType.NOSTICH, CardColor.NOCOLOR))


def test_owner_is_settable():
    card = Card(CardType.ZEHN, CardColor.EICHEL)
    card.owner = "player"
    assert card.owner == "player"