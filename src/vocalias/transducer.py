"""Syllable-to-alias transduction for CVC voicebanks.

Alias naming, with ``-`` marking a word or utterance edge:

    -a      vowel at the start of an utterance
    -ka     consonant+vowel at the start of a word
    ak      vowel-to-consonant transition inside a word
    kr      fused consonant pair, only when the voicebank has it
    k-      isolated consonant before a cluster break
    ak-     vowel+consonant at the end of a word
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from vocalias.config import default_transition_length
from vocalias.inventory import INDONESIAN, PhonemeInventory
from vocalias.oracle import (
    AliasOracle,
    ExtensionPredicate,
    Tone,
    never_extend,
    query_oracle,
)
from vocalias.types import (
    Ending,
    EndingShape,
    EndingVowel,
    EndingWithCoda,
    Hiatus,
    Interior,
    InvalidSyllableError,
    StartingConsonantVowel,
    StartingVowel,
    Syllable,
    SyllableShape,
)

logger = logging.getLogger(__name__)

BOUNDARY = "-"


def validate_alias(alias: str) -> str:
    """Hook for voicebanks that rename aliases. CVC aliases pass through."""
    return alias


def transition_length_hint(
    alias: str = "",
    default: Callable[[], float] = default_transition_length,
) -> float:
    """Basic transition length in ms, taken as-is from the provider."""
    return default()


def _shape_of(syllable: Syllable | SyllableShape) -> SyllableShape:
    if isinstance(syllable, Syllable):
        return syllable.classify()
    return syllable


def _ending_shape_of(ending: Ending | EndingShape) -> EndingShape:
    if isinstance(ending, Ending):
        return ending.classify()
    return ending


def _cluster_transitions(
    onset: tuple[str, ...],
    tone: Tone,
    exists: AliasOracle,
) -> list[str]:
    """Split an onset cluster into fused pairs and isolated consonants.

    Walks left to right. A pair the voicebank has is emitted fused and both
    consonants are consumed; otherwise the current consonant is emitted with
    a trailing boundary and the next one starts a new pair. A consonant left
    without a partner is not emitted here, the base alias covers it.
    """
    aliases = []
    i = 0
    while i < len(onset) - 1:
        pair = f"{onset[i]}{onset[i + 1]}"
        if query_oracle(exists, pair, tone):
            aliases.append(pair)
            i += 2
        else:
            aliases.append(f"{onset[i]}{BOUNDARY}")
            i += 1
    return aliases


def transduce_syllable(
    syllable: Syllable | SyllableShape,
    exists: AliasOracle,
    can_extend: ExtensionPredicate = never_extend,
) -> list[str]:
    """Return the aliases that render one syllable, in playback order.

    An empty list means the previous syllable's last alias is held through
    this one (vowel-to-vowel with extension).

    Raises:
        InvalidSyllableError: If a segmenter record has contradictory flags.
        TypeError: If ``syllable`` is not a known syllable shape.
    """
    shape = _shape_of(syllable)

    if isinstance(shape, StartingVowel):
        aliases = [f"{BOUNDARY}{shape.vowel}"]
    elif isinstance(shape, Hiatus):
        if can_extend(shape):
            logger.debug(f"Extending previous alias over {shape.prev_vowel}->{shape.vowel}")
            return []
        aliases = [shape.vowel]
    elif isinstance(shape, StartingConsonantVowel):
        aliases = [f"{BOUNDARY}{c}" for c in shape.onset[:-1]]
        aliases.append(f"{BOUNDARY}{shape.onset[-1]}{shape.vowel}")
    elif isinstance(shape, Interior):
        aliases = [f"{shape.prev_vowel}{shape.onset[0]}"]
        if len(shape.onset) > 1:
            aliases.extend(_cluster_transitions(shape.onset, shape.tone, exists))
        # The last consonant anchors the base alias even if a fused pair
        # above already ended on it.
        aliases.append(f"{BOUNDARY}{shape.onset[-1]}{shape.vowel}")
    else:
        raise TypeError(f"Not a syllable shape: {shape!r}")

    aliases = [validate_alias(a) for a in aliases]
    logger.debug(f"{type(shape).__name__} -> {aliases}")
    return aliases


def transduce_ending(
    ending: Ending | EndingShape,
    exists: AliasOracle,
) -> list[str]:
    """Return the aliases that close a word.

    Coda consonants after the first use their word-final ``C-`` alias when
    the voicebank has one and the bare phoneme otherwise.
    """
    shape = _ending_shape_of(ending)

    if isinstance(shape, EndingVowel):
        aliases = [f"{shape.prev_vowel}{BOUNDARY}"]
    elif isinstance(shape, EndingWithCoda):
        aliases = [f"{shape.prev_vowel}{shape.coda[0]}{BOUNDARY}"]
        for consonant in shape.coda[1:]:
            final = f"{consonant}{BOUNDARY}"
            aliases.append(final if query_oracle(exists, final, shape.tone) else consonant)
    else:
        raise TypeError(f"Not an ending shape: {shape!r}")

    aliases = [validate_alias(a) for a in aliases]
    logger.debug(f"{type(shape).__name__} -> {aliases}")
    return aliases


def transduce_phrase(
    syllables: Iterable[Syllable | SyllableShape],
    ending: Ending | EndingShape | None,
    exists: AliasOracle,
    can_extend: ExtensionPredicate = never_extend,
) -> list[list[str]]:
    """Transduce pre-segmented syllables and an optional word ending.

    Returns one alias list per syllable (empty lists included, so entries
    stay aligned with the host's notes), then one for the ending if given.
    """
    result = [transduce_syllable(s, exists, can_extend) for s in syllables]
    if ending is not None:
        result.append(transduce_ending(ending, exists))
    return result


@dataclass
class Phonemizer:
    """Binds a voicebank's collaborators to the transduction functions.

    Args:
        exists: Alias-existence oracle for the voicebank.
        can_extend: Decides whether a vowel-to-vowel syllable holds the
            previous alias instead of getting its own.
        inventory: Vowel and consonant sets, checked when ``strict``.
        transition_length: Default transition-length provider (ms).
        strict: Reject phonemes outside the inventory.
    """
    exists: AliasOracle
    can_extend: ExtensionPredicate = never_extend
    inventory: PhonemeInventory = INDONESIAN
    transition_length: Callable[[], float] = default_transition_length
    strict: bool = False

    def check_phonemes(self, vowels: Iterable[str] = (), consonants: Iterable[str] = ()) -> None:
        """Raise InvalidSyllableError for symbols the inventory doesn't know."""
        unknown = [v for v in vowels if not self.inventory.is_vowel(v)]
        unknown += [c for c in consonants if not self.inventory.is_consonant(c)]
        if unknown:
            raise InvalidSyllableError(f"Phonemes not in inventory: {unknown}")

    def process_syllable(self, syllable: Syllable | SyllableShape) -> list[str]:
        shape = _shape_of(syllable)
        if self.strict:
            prev = getattr(shape, "prev_vowel", None)
            self.check_phonemes(
                vowels=[shape.vowel] + ([prev] if prev is not None else []),
                consonants=getattr(shape, "onset", ()),
            )
        return transduce_syllable(shape, self.exists, self.can_extend)

    def process_ending(self, ending: Ending | EndingShape) -> list[str]:
        shape = _ending_shape_of(ending)
        if self.strict:
            self.check_phonemes(
                vowels=[shape.prev_vowel],
                consonants=getattr(shape, "coda", ()),
            )
        return transduce_ending(shape, self.exists)

    def process_phrase(
        self,
        syllables: Iterable[Syllable | SyllableShape],
        ending: Ending | EndingShape | None = None,
    ) -> list[list[str]]:
        result = [self.process_syllable(s) for s in syllables]
        if ending is not None:
            result.append(self.process_ending(ending))
        return result

    def validate_alias(self, alias: str) -> str:
        return validate_alias(alias)

    def get_transition_basic_length_ms(self, alias: str = "") -> float:
        return transition_length_hint(alias, default=self.transition_length)
