"""Phoneme inventories: which symbols count as vowels and consonants."""

from dataclasses import dataclass, field


def _symbols(text: str) -> frozenset[str]:
    """Parse a comma-separated symbol list like 'a,e,i'."""
    return frozenset(s.strip() for s in text.split(",") if s.strip())


@dataclass(frozen=True)
class PhonemeInventory:
    """Disjoint vowel and consonant sets for one voicebank language.

    Burst consonants (plosives and affricates) are a subset of the
    consonants and are kept for hosts that shorten their transitions.
    """
    vowels: frozenset[str]
    consonants: frozenset[str]
    burst_consonants: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "vowels", frozenset(self.vowels))
        object.__setattr__(self, "consonants", frozenset(self.consonants))
        object.__setattr__(self, "burst_consonants", frozenset(self.burst_consonants))

        overlap = self.vowels & self.consonants
        if overlap:
            raise ValueError(
                f"Phonemes listed as both vowel and consonant: {sorted(overlap)}"
            )
        stray = self.burst_consonants - self.consonants
        if stray:
            raise ValueError(f"Burst consonants not in inventory: {sorted(stray)}")

    def is_vowel(self, phoneme: str) -> bool:
        return phoneme in self.vowels

    def is_consonant(self, phoneme: str) -> bool:
        return phoneme in self.consonants

    def is_burst(self, phoneme: str) -> bool:
        return phoneme in self.burst_consonants

    def classify(self, phoneme: str) -> str | None:
        """Return 'vowel', 'consonant', or None for an unknown symbol."""
        if phoneme in self.vowels:
            return "vowel"
        if phoneme in self.consonants:
            return "consonant"
        return None


# Indonesian CVC voicebanks ("3" is schwa, "2" the glottal stop)
INDONESIAN = PhonemeInventory(
    vowels=_symbols("a,e,3,i,o,u"),
    consonants=_symbols(
        "b,c,d,f,g,h,j,k,2,kh,l,m,n,ng,ny,p,r,s,sy,t,v,w,y,z"
    ),
    burst_consonants=_symbols("p,b,t,d,k,g,c,j"),
)
