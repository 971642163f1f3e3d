# schafkopf

A library for the Bavarian card game Schafkopf: the 32-card deck, the
game types and their trump orders, trick evaluation, game selection and
a computer opponent that decides whether to double, what to announce and
which card to play. It also holds the geometry used to lay out a
player's hand on screen and a registry of installed SVG card decks.

The package has no dependencies outside the standard library.

## Modules

- `schafkopf.card` – `Card`, `CardType` and `CardColor`. A card knows its
  points (Sau 11, Zehn 10, Koenig 4, Ober 3, Unter 2, the rest 0) and a
  numeric id, the sum of type and color; `Card.from_id` turns an id back
  into a card. `Card.is_equal` compares type and color, `str(card)` gives
  names such as `"Herz Ober"`, and `Card.card_info` maps the card to a
  French-suited `CardInfo`.
- `schafkopf.cardinfo` – `CardInfo`, `Suit` and `Rank`: a card of a
  standard deck and its SVG element name (`CardInfo.svg_name`, e.g.
  `1_club`), plus `key_for_pixmap` and `deck_elements` for naming
  rendered images.
- `schafkopf.cardlist` – `CardList`, a `list` of cards with `points`,
  `find_cards`, `contains_card`, `contains_id`, `remove_cards`, `sort_by`
  and conversion to and from card ids (`from_ids`, `to_ids`).
  `full_deck()` builds the 32 cards in order, `shuffled_deck(rng)` a
  shuffled deck from an optional `random.Random`.
- `schafkopf.gameinfo` – `GameMode` (Sticht, Wenz, Geier, Rufspiel,
  Ramsch, Dachs), `AllowedGames` for the optional games a table permits,
  and `GameInfo`, which decides what is trump (`is_trump`), ranks cards
  (`eval_card`), weighs a hand (`weight`), counts the *Laufende*
  (`laufende`), compares announcements (`beats`) and announces the game
  (`describe`). `is_allowed` checks whether a hand may announce a game.
- `schafkopf.game` – dealing (`deal`), trick evaluation (`is_higher`,
  `highest_card_index`), picking the highest announcement
  (`choose_game`), finding the partner in a Rufspiel (`find_partner`),
  the case where nobody wants to play (`resolve_no_game` with a
  `NoGamePolicy`), doubling (`times_doubled`) and playing order after a
  trick (`trick_order`). Players are represented by `Seat`.
- `schafkopf.computerplayer` – the computer opponent: `wants_to_double`,
  `choose_game` and `choose_card`, which looks at the table through a
  `TableView`, together with the helpers it is built from
  (`find_highest_card`, `find_lowest_possible_card`, `find_schmiere`,
  `find_cheapest_card`, `can_make_trick`, `highest_trump_in_game`,
  `cards_still_in_game`).
- `schafkopf.layout` – pure functions for a hand on the table:
  `hand_layout` gives the position of every card slot for a seat and
  scene size, `hand_rotation` the card rotation of a seat,
  `front_visible` whether a card shows its face, and `move_step` one step
  of an animated move towards a target.
- `schafkopf.carddeck` – `DeckRegistry` finds SVG card decks in `svg*`
  folders (by default under the XDG data directories' `carddecks`),
  describes them as `DeckTheme`, picks a default or random deck and reads
  the chosen deck name from a configuration mapping; `write_deck_name`
  stores it.

## Example

```python
import random

from schafkopf.cardlist import full_deck
from schafkopf.game import deal, highest_card_index
from schafkopf.gameinfo import GameInfo, GameMode
from schafkopf.card import CardColor
from schafkopf import computerplayer

deck = full_deck()
print(len(deck), deck.points())      # 32 120

hands = deal(random.Random(7))
game = computerplayer.choose_game(hands[0], force=True)
trick = [hands[i][0] for i in range(4)]
print(game.describe(), highest_card_index(game, trick))
```

## What the package does not do

It is a library of rules and decisions. It has no command to start, no
graphical table, no game loop that runs a round with human input, no
rendering of card images and no scoring of finished games; a program
built on it supplies those. Positions of the cards played into a trick
and keyboard navigation are not included either.

## Running the tests

Install the `test` extra and run `pytest`.