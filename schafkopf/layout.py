"""Where a player's hand is laid out on the table and how cards move there."""

from __future__ import annotations

from collections.abc import Sequence

from schafkopf.gameinfo import NUMCARDS

MARGIN = 10
"""Distance in pixels between the hands and the border of the table."""

CARD_OVERLAP = 1 / 8
"""Visible part of a covered card in the side hands, relative to its size."""

FAR_DISTANCE = 60
FAST_STEP = 20
SLOW_STEP = 1


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def hand_layout(
    position: int,
    scene_width: int,
    scene_height: int,
    card_width: int,
    card_height: int,
    visible: Sequence[bool],
    rearrange: bool,
) -> list[tuple[int, int] | None]:
    """Return the top-left corner of every card slot of a hand.

    ``position`` is the seat: 0 bottom, 1 left, 2 top, 3 right. When
    ``rearrange`` is set, hidden cards take no room and get None.
    """
    visible = list(visible)
    num = sum(1 for shown in visible if shown) if rearrange else NUMCARDS
    width, height = scene_width, scene_height
    avail_width = width - 2 * MARGIN

    cardw, cardh = card_width, card_height
    if position in (1, 3):
        cardw, cardh = cardh, cardw

    fits = avail_width > num * cardw + (num - 1)
    side_y = int((height - (cardh * CARD_OVERLAP * (num - 1) + cardh)) / 2)

    if position == 0:
        x = _cdiv(width - cardw * num, 2) - _cdiv(num - 1, 2) if fits else MARGIN
        y = height - cardh - MARGIN
    elif position == 1:
        x, y = MARGIN, side_y
    elif position == 2:
        x = int((width - (cardw * CARD_OVERLAP * (num - 1) + cardw)) / 2)
        y = MARGIN
    else:
        x, y = width - cardw - MARGIN, side_y

    result: list[tuple[int, int] | None] = []
    for shown in visible:
        if not (shown or not rearrange):
            result.append(None)
            continue
        result.append((x, y))
        if position == 0:
            if fits:
                x += cardw + 1
            elif num > 1:
                x += _cdiv(avail_width - cardw, num - 1)
        elif position == 2:
            x = int(x + cardw * CARD_OVERLAP)
        else:
            y = int(y + cardh * CARD_OVERLAP)
    return result


def hand_rotation(position: int) -> int:
    """Return the rotation in degrees of the cards of a seat."""
    if position == 1:
        return 270
    if position == 3:
        return 90
    return 0


def front_visible(index: int, is_human: bool, has_doubled: bool, is_last: bool) -> bool:
    """Return True if the card at ``index`` of a hand shows its face.

    Before doubling a human sees only half the hand: the first half, or the
    second half when playing last.
    """
    if not is_human:
        return False
    if has_doubled:
        return True
    if is_last:
        return index >= NUMCARDS // 2
    return index < NUMCARDS // 2


def _step(current: int, target: int) -> int:
    speed = FAST_STEP if abs(target - current) > FAR_DISTANCE else SLOW_STEP
    if target > current:
        return current + speed
    if target < current:
        return current - speed
    return current


def move_step(x: int, y: int, to_x: int, to_y: int) -> tuple[int, int]:
    """Return the position after one animation step towards the destination."""
    return _step(x, to_x), _step(y, to_y)