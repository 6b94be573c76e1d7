from abc import ABC, abstractmethod
from dataclasses import dataclass

from caesarlab.models.schemas import BruteForceCandidate, CipherType, Script


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: int
    confidence: float
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt with a known key
    - decrypt_with_key(): Decrypt with a known key, with metadata
    - brute_force(): Decrypt under every candidate key
    - find_key_and_decrypt(): Infer the key and decrypt
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str

    @abstractmethod
    def encrypt(self, plaintext: str, key: int) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: int) -> str:
        """
        Decrypt ciphertext with the given key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            Plaintext
        """
        pass

    def decrypt_with_key(self, ciphertext: str, key: int) -> DecryptionResult:
        """Decrypt with a known key."""
        plaintext = self.decrypt(ciphertext, key)

        return DecryptionResult(
            plaintext=plaintext,
            key=key,
            confidence=1.0,  # Known key = certain
            explanation=self.explain(ciphertext, plaintext, key),
        )

    @abstractmethod
    def brute_force(self, ciphertext: str) -> list[BruteForceCandidate]:
        """
        Decrypt under every key in the engine's key range.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Candidates in ascending key order
        """
        pass

    @abstractmethod
    def find_key_and_decrypt(
        self,
        ciphertext: str,
        language: Script | None = None,
    ) -> DecryptionResult:
        """
        Find the best key and decrypt.

        Args:
            ciphertext: The ciphertext to decrypt
            language: Reference language, detected from the text when omitted

        Returns:
            Best decryption result
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> int:
        """Generate a random valid key for this cipher."""
        pass

    @abstractmethod
    def validate_key(self, key: object) -> bool:
        """Validate that a key is valid for this cipher."""
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str, key: int) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The original ciphertext
            plaintext: The decrypted plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass
