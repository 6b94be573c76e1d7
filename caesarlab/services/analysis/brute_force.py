import logging

from caesarlab.services.alphabets import MAX_ALPHABET_LENGTH
from caesarlab.services.engines.caesar import decrypt

logger = logging.getLogger(__name__)


def brute_force_decrypt(ciphertext: str) -> list[str]:
    """
    Decrypt under every key from 1 to MAX_ALPHABET_LENGTH - 1.

    The range is sized to the Russian alphabet for every input, so for
    English-only text the candidates repeat with period 26 (key 27 gives
    the same text as key 1).

    Returns:
        One plaintext per key; entry ``k - 1`` is the decryption with key ``k``
    """
    candidates = [decrypt(ciphertext, key) for key in range(1, MAX_ALPHABET_LENGTH)]
    logger.debug("Brute force produced %d candidates", len(candidates))
    return candidates
