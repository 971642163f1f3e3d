"""Discovery of installed SVG card decks."""

from __future__ import annotations

import configparser
import os
import random
from collections.abc import Iterable, MutableMapping, Mapping
from dataclasses import dataclass
from pathlib import Path

CONFIG_KEY = "Cardname"
_GROUP = "KDE Backdeck"
_TRUE_WORDS = {"true", "1", "yes", "on"}


@dataclass
class DeckTheme:
    """Information on one installed card deck."""

    name: str
    untranslated_name: str
    comment: str
    path: Path
    back: str
    preview: Path
    svg_file: Path
    is_default: bool = False


def _default_directories() -> list[Path]:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    roots = [data_home, *data_dirs.split(os.pathsep)]
    return [Path(root) / "carddecks" for root in roots if root]


def _read_group(index: Path) -> Mapping[str, str]:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    try:
        parser.read(index, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        return {}
    if not parser.has_section(_GROUP):
        return {}
    return dict(parser.items(_GROUP))


class DeckRegistry:
    """The card decks found in ``svg*`` folders of the given directories."""

    def __init__(self, directories: Iterable[os.PathLike | str] | None = None) -> None:
        self.directories = (
            [Path(d) for d in directories] if directories is not None else _default_directories()
        )
        self._themes: dict[str, DeckTheme] = {}
        self.scan()

    def scan(self) -> None:
        """Read all deck descriptions again."""
        self._themes.clear()
        for directory in self.directories:
            if not directory.is_dir():
                continue
            for deck in sorted(directory.glob("svg*")):
                self._load(deck)

    def _load(self, deck: Path) -> None:
        group = _read_group(deck / "index.desktop")
        preview = deck / group.get("Preview", "12c.png")
        if not preview.is_file():
            return
        name = group.get("Name", "unnamed")
        svg = group.get("SVG", "")
        if not svg:
            return
        self._themes[name] = DeckTheme(
            name=name,
            untranslated_name=name,
            comment=group.get("Comment", ""),
            path=deck,
            back=group.get("Back", ""),
            preview=preview,
            svg_file=deck / svg,
            is_default=group.get("Default", "false").strip().lower() in _TRUE_WORDS,
        )

    def deck_names(self) -> list[str]:
        """Return the names of all decks, sorted."""
        return sorted(self._themes)

    def deck_info(self, name: str) -> DeckTheme | None:
        """Return the deck called ``name``, or None."""
        return self._themes.get(name)

    def svg_file_path(self, name: str) -> Path | None:
        """Return the SVG file of the deck called ``name``, or None."""
        theme = self._themes.get(name)
        return theme.svg_file if theme is not None else None

    def default_deck_name(self) -> str | None:
        """Return the deck marked as default, else the last deck, else None."""
        fallback = None
        for name in self.deck_names():
            theme = self._themes[name]
            if theme.is_default:
                return theme.untranslated_name
            fallback = theme.untranslated_name
        return fallback

    def random_deck_name(self, rng: random.Random | None = None) -> str:
        """Return the name of a randomly chosen deck."""
        names = self.deck_names()
        if not names:
            raise LookupError("no card decks are installed")
        return (rng or random).choice(names)

    def deck_name_from_config(self, config: Mapping[str, str], default: str | None) -> str | None:
        """Return the deck stored in ``config`` if installed, else ``default``."""
        theme = config.get(CONFIG_KEY, default)
        if theme not in self._themes:
            return default
        return theme


def write_deck_name(config: MutableMapping[str, str], theme: str) -> None:
    """Store the deck name in ``config``."""
    config[CONFIG_KEY] = theme