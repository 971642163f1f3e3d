from dataclasses import dataclass, field

import pytest

from schafkopf.card import Card, CardColor, CardType
from schafkopf.cardlist import CardList, full_deck
from schafkopf.gameinfo import AllowedGames, GameInfo, GameMode, is_allowed


@dataclass
class FakePlayer:
    name: str
    cards: CardList = field(default_factory=CardList)


def _ranked_descending(info):
    deck = full_deck()
    deck.sort_by(info.eval_card)
    return list(reversed(deck))


@pytest.mark.parametrize(
    "mode,color",
    [
        (GameMode.STICHT, CardColor.HERZ),
        (GameMode.STICHT, CardColor.GRAS),
        (GameMode.WENZ, CardColor.NOCOLOR),
        (GameMode.WENZ, CardColor.SCHELLEN),
        (GameMode.GEIER, CardColor.EICHEL),
        (GameMode.RUFSPIEL, CardColor.GRAS),
        (GameMode.RAMSCH, CardColor.NOCOLOR),
        (GameMode.DACHS, CardColor.NOCOLOR),
    ],
)
def test_eval_card_is_permutation_of_1_to_32(mode, color):
    info = GameInfo(mode, color)
    values = sorted(info.eval_card(card) for card in full_deck())
    assert values == list(range(1, 33))


def test_eichel_ober_is_highest_in_sticht():
    info = GameInfo(GameMode.STICHT, CardColor.HERZ)
    assert info.eval_card(Card(CardType.OBER, CardColor.EICHEL)) == 32


def test_obers_lead_ranking_in_rufspiel():
    info = GameInfo(GameMode.RUFSPIEL, CardColor.GRAS)
    top = _ranked_descending(info)[:4]
    assert all(card.card_type == CardType.OBER for card in top)


def test_unter_leads_ranking_in_wenz():
    info = GameInfo(GameMode.WENZ, CardColor.NOCOLOR)
    top = _ranked_descending(info)[:4]
    assert all(card.card_type == CardType.UNTER for card in top)


def test_is_trump_per_mode():
    ruf = GameInfo(GameMode.RUFSPIEL, CardColor.GRAS)
    assert ruf.is_trump(Card(CardType.SIEBEN, CardColor.HERZ))
    assert not ruf.is_trump(Card(CardType.SAU, CardColor.GRAS))
    wenz = GameInfo(GameMode.WENZ, CardColor.NOCOLOR)
    assert wenz.is_trump(Card(CardType.UNTER, CardColor.GRAS))
    assert not wenz.is_trump(Card(CardType.OBER, CardColor.EICHEL))
    geier = GameInfo(GameMode.GEIER, CardColor.SCHELLEN)
    assert geier.is_trump(Card(CardType.NEUN, CardColor.SCHELLEN))
    assert not geier.is_trump(Card(CardType.UNTER, CardColor.EICHEL))
    dachs = GameInfo(GameMode.DACHS, CardColor.NOCOLOR)
    assert dachs.is_trump(Card(CardType.ZEHN, CardColor.GRAS))
    assert not dachs.is_trump(Card(CardType.OBER, CardColor.EICHEL))


def test_weight():
    sticht = GameInfo(GameMode.STICHT, CardColor.HERZ)
    assert sticht.weight(Card(CardType.OBER, CardColor.GRAS)) == 3
    assert sticht.weight(Card(CardType.UNTER, CardColor.GRAS)) == 2
    assert sticht.weight(Card(CardType.SIEBEN, CardColor.HERZ)) == 1
    assert sticht.weight(Card(CardType.SAU, CardColor.EICHEL)) == 1
    assert sticht.weight(Card(CardType.NEUN, CardColor.EICHEL)) == -1
    wenz = GameInfo(GameMode.WENZ, CardColor.NOCOLOR)
    assert wenz.weight(Card(CardType.UNTER, CardColor.EICHEL)) == 3


def test_beats():
    sticht = GameInfo(GameMode.STICHT, CardColor.EICHEL)
    ruf = GameInfo(GameMode.RUFSPIEL, CardColor.GRAS)
    assert sticht.beats(ruf)
    assert not ruf.beats(sticht)
    plain_wenz = GameInfo(GameMode.WENZ, CardColor.NOCOLOR)
    herz_wenz = GameInfo(GameMode.WENZ, CardColor.HERZ)
    assert plain_wenz.beats(herz_wenz)
    assert not herz_wenz.beats(plain_wenz)


def test_describe():
    anna = FakePlayer("Anna")
    assert GameInfo(GameMode.RAMSCH).describe() == "Ramsch is played."
    assert (
        GameInfo(GameMode.RUFSPIEL, CardColor.GRAS, spieler=anna).describe()
        == "Anna plays on the Gras Ace."
    )
    assert (
        GameInfo(GameMode.STICHT, CardColor.HERZ, spieler=anna).describe()
        == "Anna plays Heart Sticht."
    )
    assert (
        GameInfo(GameMode.DACHS, CardColor.NOCOLOR, spieler=anna).describe()
        == "Anna plays colorless Badger."
    )


def test_laufende_ramsch_is_zero():
    assert GameInfo(GameMode.RAMSCH).laufende() == 0


def test_laufende_requires_player():
    with pytest.raises(ValueError):
        GameInfo(GameMode.STICHT, CardColor.HERZ).laufende()


@pytest.mark.parametrize("run", [1, 3, 6])
def test_laufende_positive_with_partner(run):
    info = GameInfo(GameMode.RUFSPIEL, CardColor.GRAS)
    ranked = _ranked_descending(info)
    held = ranked[:run] + ranked[-(8 - run):]
    info.spieler = FakePlayer("A", CardList(held[:4]))
    info.mitspieler = FakePlayer("B", CardList(held[4:]))
    assert info.laufende() == run


@pytest.mark.parametrize("missing", [1, 3, 5])
def test_laufende_negative(missing):
    info = GameInfo(GameMode.STICHT, CardColor.EICHEL)
    ranked = _ranked_descending(info)
    info.spieler = FakePlayer("A", CardList(ranked[missing:missing + 8]))
    assert info.laufende() == -missing


def _hand(*cards):
    return CardList(Card(card_type, color) for card_type, color in cards)


def test_is_allowed_rules():
    hand = _hand((CardType.NEUN, CardColor.GRAS), (CardType.OBER, CardColor.EICHEL))
    assert not is_allowed(hand, GameMode.RAMSCH, CardColor.NOCOLOR)
    assert not is_allowed(hand, GameMode.RUFSPIEL, CardColor.HERZ)
    assert is_allowed(hand, GameMode.RUFSPIEL, CardColor.GRAS)
    assert not is_allowed(hand, GameMode.RUFSPIEL, CardColor.SCHELLEN)
    assert not is_allowed(hand, GameMode.STICHT, CardColor.NOCOLOR)
    assert is_allowed(hand, GameMode.STICHT, CardColor.EICHEL)


def test_is_allowed_rufspiel_with_own_sau_or_only_trumps():
    with_sau = _hand((CardType.NEUN, CardColor.GRAS), (CardType.SAU, CardColor.GRAS))
    assert not is_allowed(with_sau, GameMode.RUFSPIEL, CardColor.GRAS)
    only_trumps = _hand((CardType.OBER, CardColor.GRAS), (CardType.UNTER, CardColor.GRAS))
    assert not is_allowed(only_trumps, GameMode.RUFSPIEL, CardColor.GRAS)


def test_is_allowed_preferences():
    hand = _hand((CardType.NEUN, CardColor.GRAS))
    assert not is_allowed(hand, GameMode.DACHS, CardColor.NOCOLOR, AllowedGames(dachs=False))
    assert is_allowed(hand, GameMode.DACHS, CardColor.NOCOLOR, AllowedGames())
    no_farb_wenz = AllowedGames(farb_wenz=False)
    assert not is_allowed(hand, GameMode.WENZ, CardColor.HERZ, no_farb_wenz)
    assert is_allowed(hand, GameMode.WENZ, CardColor.NOCOLOR, no_farb_wenz)
    assert not is_allowed(hand, GameMode.GEIER, CardColor.NOCOLOR, AllowedGames(geier=False))
    no_farb_geier = AllowedGames(farb_geier=False)
    assert not is_allowed(hand, GameMode.GEIER, CardColor.EICHEL, no_farb_geier)
    assert is_allowed(hand, GameMode.GEIER, CardColor.NOCOLOR, no_farb_geier)