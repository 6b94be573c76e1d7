import logging
import random

from caesarlab.models.schemas import BruteForceCandidate, CipherType, Script
from caesarlab.services.alphabets import MAX_ALPHABET_LENGTH, classify, shift_char
from caesarlab.services.engines.base import CipherEngine, DecryptionResult
from caesarlab.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def encrypt(text: str, key: int) -> str:
    """
    Shift every English or Russian letter of ``text`` by ``key``.

    The key is reduced modulo the length of each letter's own alphabet,
    so English letters rotate through 26 positions and Russian letters
    through 33. Everything else is copied unchanged.
    """
    result = []

    for char in text:
        script = classify(char)
        if script is Script.NONE:
            result.append(char)
        else:
            result.append(shift_char(char, script, key))

    return "".join(result)


def decrypt(text: str, key: int) -> str:
    """Undo ``encrypt`` by shifting in reverse."""
    return encrypt(text, -key)


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine over English and Russian alphabets.

    Each letter is shifted by a fixed amount within its own alphabet, keeping
    its case. With at most 33 keys per script it is broken by trying every
    shift, or by picking the shift whose letter distribution best matches a
    reference language.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount "
        "within its alphabet. Supports the Latin and Cyrillic scripts."
    )

    def encrypt(self, plaintext: str, key: int) -> str:
        """Encrypt plaintext with the given shift."""
        return encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: int) -> str:
        """Decrypt ciphertext with the given shift."""
        return decrypt(ciphertext, key)

    def brute_force(self, ciphertext: str) -> list[BruteForceCandidate]:
        """Try every key from 1 up to the longest alphabet length."""
        from caesarlab.services.analysis.brute_force import brute_force_decrypt

        return [
            BruteForceCandidate(key=key, plaintext=plaintext)
            for key, plaintext in enumerate(brute_force_decrypt(ciphertext), start=1)
        ]

    def find_key_and_decrypt(
        self,
        ciphertext: str,
        language: Script | None = None,
    ) -> DecryptionResult:
        """Find the best shift by frequency analysis and decrypt."""
        from caesarlab.services.analysis import frequency

        if language is None:
            language = frequency.detect_language(ciphertext)

        table = frequency.reference_table(language)
        scores = frequency.rank_keys(ciphertext, table)
        key = frequency.statistical_analysis(ciphertext, table)
        plaintext = self.decrypt(ciphertext, key)
        _, letters = frequency.letter_counts(ciphertext)

        logger.debug("Best %s key for %d chars: %d", language.value, len(ciphertext), key)

        return DecryptionResult(
            plaintext=plaintext,
            key=key,
            confidence=frequency.key_confidence(scores, letters),
            explanation=self.explain(ciphertext, plaintext, key),
        )

    def generate_random_key(self) -> int:
        """Generate a random shift (1-32, excluding 0)."""
        return random.randint(1, MAX_ALPHABET_LENGTH - 1)

    def validate_key(self, key: object) -> bool:
        """Any integer is a valid shift; it is reduced per alphabet."""
        try:
            int(key)
            return True
        except (ValueError, TypeError):
            return False

    def explain(self, ciphertext: str, plaintext: str, key: int) -> str:
        """Generate human-readable explanation."""
        return (
            f"Caesar cipher with shift of {key}. "
            f"Each letter was shifted back {key} positions in its alphabet "
            f"(mod 26 for English, mod 33 for Russian). "
            f"For example, the first ciphertext character '{ciphertext[0] if ciphertext else 'N/A'}' "
            f"becomes '{plaintext[0] if plaintext else 'N/A'}'."
        )
