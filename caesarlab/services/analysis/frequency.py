"""
Frequency-based key inference for the Caesar cipher.

Every key in a fixed scan range is tried; the decryption whose letter
distribution has the highest log-likelihood under a reference frequency
table wins.
"""

import logging
import math
from collections import Counter
from collections.abc import Iterator, Mapping

from caesarlab.core.exceptions import UnknownLanguageError
from caesarlab.models.schemas import KeyScore, Script
from caesarlab.services.alphabets import MAX_ALPHABET_LENGTH, classify
from caesarlab.services.engines.caesar import decrypt

logger = logging.getLogger(__name__)

# Keys 0..32, sized to the Russian alphabet whatever the text's script
SCAN_KEYS = range(MAX_ALPHABET_LENGTH)

# Keeps the logarithm finite for letters absent from a candidate
EPSILON = 1e-10

ENGLISH_FREQ: dict[str, float] = {
    "e": 0.1270, "t": 0.0906, "a": 0.0817, "o": 0.0751, "i": 0.0697,
    "n": 0.0675, "s": 0.0633, "h": 0.0609, "r": 0.0599, "d": 0.0425,
    "l": 0.0403, "c": 0.0278, "u": 0.0276, "m": 0.0241, "w": 0.0236,
    "f": 0.0223, "g": 0.0202, "y": 0.0197, "p": 0.0193, "b": 0.0129,
    "v": 0.0098, "k": 0.0077, "j": 0.0015, "x": 0.0015, "q": 0.0010,
    "z": 0.0007,
}

RUSSIAN_FREQ: dict[str, float] = {
    "о": 0.1097, "е": 0.0845, "а": 0.0801, "и": 0.0735, "н": 0.0670,
    "т": 0.0626, "с": 0.0547, "р": 0.0473, "в": 0.0454, "л": 0.0440,
    "к": 0.0349, "м": 0.0321, "д": 0.0298, "п": 0.0281, "у": 0.0262,
    "я": 0.0201, "ы": 0.0190, "ь": 0.0174, "г": 0.0170, "з": 0.0165,
    "б": 0.0159, "ч": 0.0144, "й": 0.0121, "х": 0.0097, "ж": 0.0094,
    "ш": 0.0073, "ю": 0.0064, "ц": 0.0048, "щ": 0.0036, "э": 0.0032,
    "ф": 0.0026, "ъ": 0.0004, "ё": 0.0004,
}

REFERENCE_TABLES: dict[Script, dict[str, float]] = {
    Script.ENGLISH: ENGLISH_FREQ,
    Script.RUSSIAN: RUSSIAN_FREQ,
}


def reference_table(language: Script | str) -> dict[str, float]:
    """Return a copy of the built-in frequency table for a language."""
    try:
        return dict(REFERENCE_TABLES[Script(language)])
    except (KeyError, ValueError):
        raise UnknownLanguageError(str(getattr(language, "value", language))) from None


def detect_language(text: str) -> Script:
    """
    Guess the reference language from the registered letters of ``text``.

    Russian wins ties and texts without any registered letter.
    """
    counts = Counter(classify(char) for char in text)
    if counts[Script.ENGLISH] > counts[Script.RUSSIAN]:
        return Script.ENGLISH
    return Script.RUSSIAN


def letter_counts(text: str) -> tuple[Counter, int]:
    """
    Count letters of any script, folded to lowercase.

    Returns:
        (counts per lowercase letter, total letter count)
    """
    counts: Counter = Counter()
    total = 0

    for char in text:
        if char.isalpha():
            counts[char.lower()] += 1
            total += 1

    return counts, total


def score_candidate(text: str, frequency_table: Mapping[str, float]) -> float:
    """
    Log-likelihood of a candidate plaintext under a frequency table.

    Higher is better. Letters missing from the text contribute
    ``ln(EPSILON / total)`` weighted by their expected frequency.
    """
    counts, total = letter_counts(text)
    denominator = total + EPSILON * len(frequency_table)

    score = 0.0
    for letter, expected in frequency_table.items():
        observed = counts.get(letter, 0)
        score += math.log((observed + EPSILON) / denominator) * expected

    return score


def _scan(ciphertext: str, frequency_table: Mapping[str, float]) -> Iterator[KeyScore]:
    for key in SCAN_KEYS:
        yield KeyScore(key=key, score=score_candidate(decrypt(ciphertext, key), frequency_table))


def rank_keys(ciphertext: str, frequency_table: Mapping[str, float]) -> list[KeyScore]:
    """Score every scanned key, in ascending key order."""
    return list(_scan(ciphertext, frequency_table))


def statistical_analysis(ciphertext: str, frequency_table: Mapping[str, float]) -> int:
    """
    Find the key whose decryption best matches a frequency table.

    Keys 0..32 are scanned in order and only a strictly greater score
    replaces the current best, so ties resolve to the lowest key.

    Args:
        ciphertext: Text to analyse
        frequency_table: Expected frequency per lowercase letter

    Returns:
        Best key in [0, 32]
    """
    best_key = 0
    best_score = float("-inf")

    for candidate in _scan(ciphertext, frequency_table):
        if candidate.score > best_score:
            best_score = candidate.score
            best_key = candidate.key

    logger.debug("Frequency analysis picked key %d (score %.4f)", best_key, best_score)
    return best_key


def key_confidence(scores: list[KeyScore], letter_total: int) -> float:
    """
    Posterior weight of the best key, treating each score as a per-letter
    log-likelihood over ``letter_total`` letters.

    Keys that decrypt to the same text score identically and are
    counted once, so English aliases (k and k + 26) do not halve it.
    """
    distinct = set(s.score for s in scores)
    if letter_total == 0 or len(distinct) < 2:
        # No letters to tell the keys apart
        return 0.0

    best = max(distinct)
    total = sum(math.exp((score - best) * letter_total) for score in distinct)
    return 1.0 / total
