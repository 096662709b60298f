"""Environment-driven defaults."""

import os

# Basic transition length between two aliases, in milliseconds
DEFAULT_TRANSITION_MS = float(os.environ.get("VOCALIAS_TRANSITION_MS", "120"))


def default_transition_length() -> float:
    """Default transition-length provider used when the host supplies none."""
    return DEFAULT_TRANSITION_MS
