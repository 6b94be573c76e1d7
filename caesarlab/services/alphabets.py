"""
Alphabet registry for the multi-script Caesar cipher.

Two scripts are supported, each with an upper and a lower case alphabet of
identical length. Position ``i`` in the upper variant is the same letter as
position ``i`` in the lower variant.
"""

from caesarlab.models.schemas import Script

ENGLISH_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ENGLISH_LOWER = "abcdefghijklmnopqrstuvwxyz"
RUSSIAN_UPPER = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
RUSSIAN_LOWER = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"

# (upper, lower) per script, in classification order
ALPHABETS: dict[Script, tuple[str, str]] = {
    Script.ENGLISH: (ENGLISH_UPPER, ENGLISH_LOWER),
    Script.RUSSIAN: (RUSSIAN_UPPER, RUSSIAN_LOWER),
}

MAX_ALPHABET_LENGTH = max(len(upper) for upper, _ in ALPHABETS.values())

_UPPER_SETS: dict[Script, frozenset[str]] = {
    script: frozenset(upper) for script, (upper, _) in ALPHABETS.items()
}


def classify(char: str) -> Script:
    """
    Determine which script a character belongs to.

    Matching is case-insensitive. English is checked before Russian.

    Args:
        char: A single character

    Returns:
        The script, or Script.NONE for passthrough characters
    """
    upper = char.upper()
    for script, letters in _UPPER_SETS.items():
        if upper in letters:
            return script
    return Script.NONE


def alphabets_for(script: Script) -> tuple[str, str]:
    """Return the (upper, lower) alphabet pair of a script."""
    return ALPHABETS[script]


def alphabet_length(script: Script) -> int:
    """Number of letters in one case variant of a script's alphabet."""
    return len(ALPHABETS[script][0])


def shift_char(char: str, script: Script, delta: int) -> str:
    """
    Shift a classified character within its own alphabet.

    The same-case variant is selected, so the result keeps the case of
    the input. Characters that classify into a script without being in
    either of its variants (e.g. dotless 'ı', whose uppercase is 'I')
    are returned unchanged.
    """
    upper, lower = ALPHABETS[script]
    alphabet = upper if char.isupper() else lower

    index = alphabet.find(char)
    if index == -1:
        return char

    # Python's % is already non-negative for a positive modulus
    return alphabet[(index + delta) % alphabet_length(script)]
