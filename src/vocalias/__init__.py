"""vocalias: turn segmented syllables into voicebank alias sequences."""

from vocalias.inventory import INDONESIAN, PhonemeInventory
from vocalias.oracle import (
    AliasTable,
    never_extend,
    normalize_tone,
    query_oracle,
    same_vowel_extension,
)
from vocalias.transducer import (
    Phonemizer,
    transduce_ending,
    transduce_phrase,
    transduce_syllable,
    transition_length_hint,
    validate_alias,
)
from vocalias.types import (
    Ending,
    EndingVowel,
    EndingWithCoda,
    Hiatus,
    Interior,
    InvalidSyllableError,
    StartingConsonantVowel,
    StartingVowel,
    Syllable,
)

__all__ = [
    "INDONESIAN",
    "PhonemeInventory",
    "AliasTable",
    "never_extend",
    "normalize_tone",
    "query_oracle",
    "same_vowel_extension",
    "Phonemizer",
    "transduce_ending",
    "transduce_phrase",
    "transduce_syllable",
    "transition_length_hint",
    "validate_alias",
    "Ending",
    "EndingVowel",
    "EndingWithCoda",
    "Hiatus",
    "Interior",
    "InvalidSyllableError",
    "StartingConsonantVowel",
    "StartingVowel",
    "Syllable",
]
