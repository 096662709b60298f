"""Alias-existence oracles and extension predicates.

The transducer never looks at a voicebank itself. It asks an injected
``exists(alias, tone)`` callable, and for vowel-to-vowel syllables an
injected ``can_extend(syllable)`` callable.
"""

import logging
from typing import Iterable, Protocol

import pretty_midi

from vocalias.types import Hiatus

logger = logging.getLogger(__name__)

Tone = int | str | None

_MIDI_LOW = 0
_MIDI_HIGH = 127


class AliasOracle(Protocol):
    def __call__(self, alias: str, tone: Tone) -> bool: ...


class ExtensionPredicate(Protocol):
    def __call__(self, syllable: Hiatus) -> bool: ...


def query_oracle(exists: AliasOracle, alias: str, tone: Tone) -> bool:
    """Ask the oracle whether ``alias`` exists at ``tone``.

    Any failure inside the oracle counts as "does not exist", so the caller
    falls back to the always-available isolated unit.
    """
    try:
        return bool(exists(alias, tone))
    except Exception as e:
        logger.warning(f"Alias lookup failed for {alias!r} at tone {tone!r}: {e}")
        return False


def normalize_tone(tone: Tone) -> int | None:
    """Convert a tone to a MIDI note number.

    Accepts ints (0-127) and note names like 'C4' or 'F#3'. None means
    "any tone" and is returned unchanged.
    """
    if tone is None:
        return None
    if isinstance(tone, bool):
        raise ValueError(f"Invalid tone: {tone!r}")
    if isinstance(tone, int):
        note = tone
    elif isinstance(tone, str):
        note = pretty_midi.note_name_to_number(tone.strip())
    else:
        raise ValueError(f"Invalid tone: {tone!r}")

    if not _MIDI_LOW <= note <= _MIDI_HIGH:
        raise ValueError(f"Tone out of MIDI range: {tone!r}")
    return note


class AliasTable:
    """In-memory oracle over a fixed set of aliases.

    Each alias can be restricted to one or more inclusive tone ranges, the
    way pitched sub-banks of a voicebank cover different registers. An alias
    added without a range exists at every tone.

    Example:
        >>> table = AliasTable({"akr": None, "kr": ("C3", "B4")})
        >>> table("kr", "C4")
        True
        >>> table("kr", 90)
        False
    """

    def __init__(self, entries: dict[str, tuple[Tone, Tone] | None] | None = None):
        self._ranges: dict[str, list[tuple[int, int]]] = {}
        for alias, tone_range in (entries or {}).items():
            self.add(alias, tone_range)

    @classmethod
    def from_aliases(cls, aliases: Iterable[str]) -> "AliasTable":
        """Build a table where every alias exists at every tone."""
        table = cls()
        for alias in aliases:
            table.add(alias)
        return table

    def add(self, alias: str, tone_range: tuple[Tone, Tone] | None = None) -> None:
        if tone_range is None:
            low, high = _MIDI_LOW, _MIDI_HIGH
        else:
            low, high = (normalize_tone(t) for t in tone_range)
            if low is None or high is None:
                raise ValueError(f"Tone range for {alias!r} needs both bounds")
            if low > high:
                raise ValueError(f"Empty tone range for {alias!r}: {tone_range!r}")
        self._ranges.setdefault(alias, []).append((low, high))

    def exists(self, alias: str, tone: Tone = None) -> bool:
        ranges = self._ranges.get(alias)
        if not ranges:
            return False
        note = normalize_tone(tone)
        if note is None:
            return True
        return any(low <= note <= high for low, high in ranges)

    __call__ = exists

    def __contains__(self, alias: str) -> bool:
        return alias in self._ranges

    def __len__(self) -> int:
        return len(self._ranges)


def never_extend(syllable: Hiatus) -> bool:
    """Extension predicate that always asks for a fresh vowel alias."""
    return False


def same_vowel_extension(syllable: Hiatus) -> bool:
    """Hold the previous alias when the vowel repeats ('a' then 'a')."""
    return syllable.prev_vowel == syllable.vowel
