"""Core data types for vocalias.

The segmenter hands over flag-carrying ``Syllable`` and ``Ending`` records.
``classify()`` turns a record into exactly one member of the closed shape
set, which is what the transducer dispatches on.
"""

from dataclasses import dataclass


class InvalidSyllableError(ValueError):
    """A syllable or ending whose shape and classifier flags disagree."""


def _as_phonemes(phonemes) -> tuple[str, ...]:
    if isinstance(phonemes, str):
        raise InvalidSyllableError(
            f"Expected a sequence of phonemes, got the string {phonemes!r}"
        )
    return tuple(phonemes)


# --- Syllable shapes ---


@dataclass(frozen=True)
class StartingVowel:
    """Utterance-initial vowel with no onset: ``a`` -> ``-a``."""
    vowel: str
    tone: int | str | None = None


@dataclass(frozen=True)
class Hiatus:
    """Vowel directly after another vowel, no consonant in between."""
    prev_vowel: str
    vowel: str
    tone: int | str | None = None


@dataclass(frozen=True)
class StartingConsonantVowel:
    """Utterance-initial consonant cluster followed by a vowel."""
    onset: tuple[str, ...]
    vowel: str
    tone: int | str | None = None

    def __post_init__(self):
        object.__setattr__(self, "onset", _as_phonemes(self.onset))
        if not self.onset:
            raise InvalidSyllableError("Starting CV syllable needs an onset consonant")


@dataclass(frozen=True)
class Interior:
    """Vowel, one or more consonants, vowel: the general mid-word case."""
    prev_vowel: str
    onset: tuple[str, ...]
    vowel: str
    tone: int | str | None = None

    def __post_init__(self):
        object.__setattr__(self, "onset", _as_phonemes(self.onset))
        if not self.onset:
            raise InvalidSyllableError("Interior syllable needs an onset consonant")


SyllableShape = StartingVowel | Hiatus | StartingConsonantVowel | Interior


# --- Ending shapes ---


@dataclass(frozen=True)
class EndingVowel:
    """Word ends on the vowel: ``a`` -> ``a-``."""
    prev_vowel: str
    tone: int | str | None = None


@dataclass(frozen=True)
class EndingWithCoda:
    """Word ends on one or more consonants after the vowel."""
    prev_vowel: str
    coda: tuple[str, ...]
    tone: int | str | None = None

    def __post_init__(self):
        object.__setattr__(self, "coda", _as_phonemes(self.coda))
        if not self.coda:
            raise InvalidSyllableError("Ending with coda needs at least one consonant")


EndingShape = EndingVowel | EndingWithCoda


# --- Segmenter records ---


def _check_flag(name: str, given: bool | None, derived: bool, record) -> None:
    if given is not None and bool(given) != derived:
        raise InvalidSyllableError(
            f"{name}={given} contradicts the shape of {record!r}"
        )


@dataclass(frozen=True)
class Syllable:
    """One syllable as produced by the segmenter.

    Classifier flags left as None are derived from the shape. Flags that are
    set must agree with it, otherwise ``classify()`` raises.
    """
    vowel: str
    onset: tuple[str, ...] = ()
    prev_vowel: str | None = None
    tone: int | str | None = None
    is_starting_vowel: bool | None = None
    is_vowel_to_vowel: bool | None = None
    is_starting_consonant_vowel: bool | None = None

    def __post_init__(self):
        object.__setattr__(self, "onset", _as_phonemes(self.onset))

    def classify(self) -> SyllableShape:
        """Return the single shape this syllable belongs to."""
        if not self.vowel:
            raise InvalidSyllableError(f"Syllable has no nucleus vowel: {self!r}")

        starting = self.prev_vowel is None
        _check_flag("is_starting_vowel", self.is_starting_vowel,
                    starting and not self.onset, self)
        _check_flag("is_vowel_to_vowel", self.is_vowel_to_vowel,
                    not starting and not self.onset, self)
        _check_flag("is_starting_consonant_vowel", self.is_starting_consonant_vowel,
                    starting and bool(self.onset), self)

        if starting and not self.onset:
            return StartingVowel(self.vowel, self.tone)
        if not self.onset:
            return Hiatus(self.prev_vowel, self.vowel, self.tone)
        if starting:
            return StartingConsonantVowel(self.onset, self.vowel, self.tone)
        return Interior(self.prev_vowel, self.onset, self.vowel, self.tone)


@dataclass(frozen=True)
class Ending:
    """The close of a word: the last vowel plus any trailing consonants."""
    prev_vowel: str
    coda: tuple[str, ...] = ()
    tone: int | str | None = None
    is_ending_vowel: bool | None = None

    def __post_init__(self):
        object.__setattr__(self, "coda", _as_phonemes(self.coda))

    def classify(self) -> EndingShape:
        if not self.prev_vowel:
            raise InvalidSyllableError(f"Ending has no vowel to close: {self!r}")
        _check_flag("is_ending_vowel", self.is_ending_vowel, not self.coda, self)
        if not self.coda:
            return EndingVowel(self.prev_vowel, self.tone)
        return EndingWithCoda(self.prev_vowel, self.coda, self.tone)
