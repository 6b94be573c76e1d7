"""Tests for the Caesar cipher engine and alphabet registry."""

import pytest

from caesarlab.models.schemas import CipherType, Script
from caesarlab.services.alphabets import (
    ENGLISH_LOWER,
    ENGLISH_UPPER,
    MAX_ALPHABET_LENGTH,
    RUSSIAN_LOWER,
    RUSSIAN_UPPER,
    alphabet_length,
    alphabets_for,
    classify,
    shift_char,
)
from caesarlab.services.engines.caesar import CaesarEngine, decrypt, encrypt
from caesarlab.services.engines.registry import EngineRegistry


class TestAlphabets:
    """Test suite for the alphabet registry."""

    def test_alphabet_sizes(self):
        assert len(ENGLISH_UPPER) == len(ENGLISH_LOWER) == 26
        assert len(RUSSIAN_UPPER) == len(RUSSIAN_LOWER) == 33
        assert MAX_ALPHABET_LENGTH == 33

    def test_case_variants_correspond(self):
        """Position i in the upper variant is the same letter in lower."""
        for upper, lower in (alphabets_for(Script.ENGLISH), alphabets_for(Script.RUSSIAN)):
            assert upper.lower() == lower

    def test_no_shared_characters(self):
        letters = ENGLISH_UPPER + ENGLISH_LOWER + RUSSIAN_UPPER + RUSSIAN_LOWER
        assert len(set(letters)) == len(letters)

    @pytest.mark.parametrize(
        "char, expected",
        [
            ("A", Script.ENGLISH),
            ("z", Script.ENGLISH),
            ("Ж", Script.RUSSIAN),
            ("ё", Script.RUSSIAN),
            ("Ё", Script.RUSSIAN),
            ("5", Script.NONE),
            (" ", Script.NONE),
            ("!", Script.NONE),
            ("α", Script.NONE),
            ("é", Script.NONE),
        ],
    )
    def test_classify(self, char, expected):
        assert classify(char) is expected

    def test_classify_multichar_uppercase_never_matches(self):
        """'ß' uppercases to 'SS', which is not a single registered letter."""
        assert classify("ß") is Script.NONE
        assert classify("ﬆ") is Script.NONE  # uppercases to 'ST'

    def test_classify_uses_uppercase_form(self):
        """Dotless i uppercases to 'I', so it classifies as English."""
        assert classify("ı") is Script.ENGLISH

    def test_shift_char_keeps_case(self):
        assert shift_char("a", Script.ENGLISH, 1) == "b"
        assert shift_char("A", Script.ENGLISH, 1) == "B"
        assert shift_char("я", Script.RUSSIAN, 1) == "а"
        assert shift_char("Я", Script.RUSSIAN, 1) == "А"

    def test_shift_char_negative_delta(self):
        assert shift_char("a", Script.ENGLISH, -1) == "z"
        assert shift_char("А", Script.RUSSIAN, -1) == "Я"
        assert shift_char("c", Script.ENGLISH, -55) == "z"

    def test_shift_char_unregistered_variant_passes_through(self):
        """Characters that classify but are absent from both variants."""
        assert shift_char("ı", Script.ENGLISH, 5) == "ı"
        assert shift_char("ſ", Script.ENGLISH, 5) == "ſ"

    def test_alphabet_length(self):
        assert alphabet_length(Script.ENGLISH) == 26
        assert alphabet_length(Script.RUSSIAN) == 33


class TestCaesarFunctions:
    """Test suite for the encrypt/decrypt functions."""

    @pytest.fixture
    def mixed_text(self):
        return "Hello, Мир! 123 — Съешь же ещё этих мягких французских булок. The end."

    def test_encrypt_hello_world(self):
        assert encrypt("Hello, World!", 3) == "Khoor, Zruog!"

    def test_encrypt_russian(self):
        assert encrypt("Привет", 1) == "Рсйгёу"

    def test_decrypt_known(self):
        assert decrypt("Khoor, Zruog!", 3) == "Hello, World!"
        assert decrypt("Рсйгёу", 1) == "Привет"

    def test_roundtrip_small(self):
        assert decrypt(encrypt("test", 5), 5) == "test"

    def test_roundtrip_all_keys(self, mixed_text):
        for key in range(-70, 71):
            assert decrypt(encrypt(mixed_text, key), key) == mixed_text

    def test_roundtrip_huge_key(self, mixed_text):
        key = 10**12 + 7
        assert decrypt(encrypt(mixed_text, key), key) == mixed_text
        assert encrypt("abc", 26 * 10**6 + 1) == "bcd"

    def test_script_local_modulo(self):
        """The same key wraps at 26 for English and at 33 for Russian."""
        assert encrypt("a", 26) == "a"
        assert encrypt("а", 26) != "а"
        assert encrypt("а", 33) == "а"
        assert encrypt("Ab Аб", 1) == "Bc Бв"

    def test_periodicity_english(self):
        text = "Attack at dawn"
        for key in range(-5, 6):
            assert encrypt(text, key) == encrypt(text, key + 26)
            assert encrypt(text, key) == encrypt(text, key - 26)

    def test_periodicity_russian(self):
        text = "Ёжик в тумане"
        for key in range(-5, 6):
            assert encrypt(text, key) == encrypt(text, key + 33)
            assert encrypt(text, key) == encrypt(text, key - 33)

    def test_yo_sits_between_ye_and_zhe(self):
        assert encrypt("е", 1) == "ё"
        assert encrypt("ё", 1) == "ж"
        assert encrypt("Е", 1) == "Ё"

    def test_passthrough(self):
        text = "0123456789 .,;:!?-()[]{}\t\nαβγ ß 中文 ı"
        assert encrypt(text, 7) == text

    def test_length_and_case_preserved(self, mixed_text):
        for key in (1, 13, 32, -4):
            result = encrypt(mixed_text, key)
            assert len(result) == len(mixed_text)
            for before, after in zip(mixed_text, result):
                assert before.isupper() == after.isupper()
                assert classify(before) is classify(after)

    def test_empty_text(self):
        assert encrypt("", 5) == ""
        assert decrypt("", -5) == ""

    def test_key_zero_is_identity(self, mixed_text):
        assert encrypt(mixed_text, 0) == mixed_text


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    @pytest.fixture
    def long_plaintext(self):
        """Longer text with natural English letter distribution."""
        return (
            "Cryptography is the study of secure communication in the presence "
            "of adversaries. Long before computers existed people invented ciphers "
            "to hide meaning from unauthorized readers. Some methods relied on simple "
            "substitution while others used transposition or periodic keys. "
            "The quick brown fox jumps over the lazy dog."
        )

    @pytest.fixture
    def long_russian(self):
        return (
            "Шифр Цезаря является одним из самых простых и наиболее широко известных "
            "методов шифрования. Это вид шифра подстановки, в котором каждый символ "
            "в открытом тексте заменяется символом, находящимся на некотором постоянном "
            "числе позиций левее или правее него в алфавите. Съешь же ещё этих мягких "
            "французских булок да выпей чаю."
        )

    def test_registered(self):
        assert CipherType.CAESAR in EngineRegistry.list_registered()
        engine = EngineRegistry().get_engine(CipherType.CAESAR)
        assert isinstance(engine, CaesarEngine)

    def test_encrypt_decrypt_roundtrip(self, engine):
        for shift in range(MAX_ALPHABET_LENGTH):
            ciphertext = engine.encrypt("Hello Мир", shift)
            assert engine.decrypt_with_key(ciphertext, shift).plaintext == "Hello Мир"

    def test_encrypt_shift_7(self, engine):
        assert engine.encrypt("HELLO", 7) == "OLSSV"

    def test_decrypt_with_key(self, engine):
        result = engine.decrypt_with_key("OLSSV", 7)
        assert result.plaintext == "HELLO"
        assert result.key == 7
        assert result.confidence == 1.0

    def test_brute_force(self, engine):
        candidates = engine.brute_force("Khoor")
        assert len(candidates) == 32
        assert [c.key for c in candidates] == list(range(1, 33))
        assert candidates[2].plaintext == "Hello"

    def test_find_key_and_decrypt_english(self, engine, long_plaintext):
        ciphertext = engine.encrypt(long_plaintext, 13)

        result = engine.find_key_and_decrypt(ciphertext)

        assert result.key == 13
        assert result.plaintext == long_plaintext
        assert 0.5 < result.confidence <= 1.0

    def test_find_key_and_decrypt_russian(self, engine, long_russian):
        ciphertext = engine.encrypt(long_russian, 20)

        result = engine.find_key_and_decrypt(ciphertext, Script.RUSSIAN)

        assert result.key == 20
        assert result.plaintext == long_russian

    def test_find_key_without_letters(self, engine):
        result = engine.find_key_and_decrypt("12345 !!!")
        assert result.key == 0
        assert result.plaintext == "12345 !!!"
        assert result.confidence == 0.0

    def test_generate_random_key(self, engine):
        keys = [engine.generate_random_key() for _ in range(100)]

        for key in keys:
            assert engine.validate_key(key)
            assert 1 <= key <= 32  # Excludes 0 (no encryption)

    def test_validate_key(self, engine):
        for key in (0, -1, 100, "7", " 12 "):
            assert engine.validate_key(key) is True

        assert engine.validate_key("abc") is False
        assert engine.validate_key(None) is False
        assert engine.validate_key("1.5") is False

    def test_explain(self, engine):
        explanation = engine.explain("OLSSV", "HELLO", 7)

        assert "7" in explanation
        assert "shift" in explanation.lower()
