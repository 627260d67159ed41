"""Tests for the route transposition cipher engine."""

import pytest

from cyrcipher.core.exceptions import TransposeCipherError
from cyrcipher.models.schemas import ErrorKind
from cyrcipher.services.engines.transposition.route import TransposeCipher


class TestTransposeCipherKey:
    """Column count validation."""

    @pytest.mark.parametrize("key", [0, -5])
    def test_non_positive_key(self, key):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(key)
        assert exc_info.value.kind == ErrorKind.INVALID_KEY

    @pytest.mark.parametrize("key", ["3", 3.0, True, None])
    def test_non_integer_key(self, key):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(key)
        assert exc_info.value.kind == ErrorKind.INVALID_KEY

    def test_key_too_large(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(1001)
        assert exc_info.value.kind == ErrorKind.KEY_TOO_LARGE

    def test_largest_key_accepted(self):
        assert TransposeCipher(1000).num_columns == 1000

    @pytest.mark.parametrize("raw,expected", [("3", 3), (" 12 ", 12), ("1000", 1000)])
    def test_parse_key(self, raw, expected):
        assert TransposeCipher.parse_key(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "ключ", "3.14", "12abc", "-5", "3 столбца", "٣"])
    def test_parse_key_rejects_non_numeric(self, raw):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher.parse_key(raw)
        assert exc_info.value.kind == ErrorKind.INVALID_KEY


class TestTransposeCipherEncrypt:
    """Encryption behaviour."""

    @pytest.fixture
    def cipher(self):
        return TransposeCipher(3)

    def test_full_table(self, cipher):
        # П Р И / В Е Т / М И Р read from the right column to the left
        assert cipher.encrypt("ПРИВЕТМИР") == "ИТРРЕИПВМ"

    def test_partial_last_row(self, cipher):
        assert cipher.encrypt("ПРИВЕТ МИР") == "ИТИРЕМПВ Р"

    def test_partial_last_row_four_columns(self):
        assert TransposeCipher(4).encrypt("ПРИВЕТ МИР") == "ВМИ РТРПЕИ"

    def test_single_column_is_identity(self):
        assert TransposeCipher(1).encrypt("ПРИВЕТ") == "ПРИВЕТ"

    def test_single_row_is_reversed(self):
        assert TransposeCipher(3).encrypt("АБВ") == "ВБА"

    def test_case_preserved(self, cipher):
        assert cipher.encrypt("приВЕТмир") == "иТррЕипВм"

    def test_output_length_matches_input(self, cipher):
        text = "ШИФР ТАБЛИЧНОЙ ПЕРЕСТАНОВКИ"
        assert len(cipher.encrypt(text)) == len(text)

    def test_empty_text(self, cipher):
        with pytest.raises(TransposeCipherError) as exc_info:
            cipher.encrypt("")
        assert exc_info.value.kind == ErrorKind.EMPTY_TEXT

    @pytest.mark.parametrize("text", ["ПРИВЕТ!", "ПРИВЕТ123", "ПРИ-ВЕТ", "ПРИВЕТ\tМИР"])
    def test_invalid_text_character(self, cipher, text):
        with pytest.raises(TransposeCipherError) as exc_info:
            cipher.encrypt(text)
        assert exc_info.value.kind == ErrorKind.INVALID_TEXT_CHARACTER

    def test_key_exceeds_text_length(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(10).encrypt("ПРИВЕТ")
        assert exc_info.value.kind == ErrorKind.KEY_EXCEEDS_TEXT_LENGTH

    def test_key_equal_to_text_length(self):
        assert TransposeCipher(6).encrypt("ПРИВЕТ") == "ТЕВИРП"

    def test_table_too_large(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(1).encrypt("А" * 10001)
        assert exc_info.value.kind == ErrorKind.TABLE_TOO_LARGE

    def test_largest_table_accepted(self):
        text = "А" * 10000
        assert TransposeCipher(1).encrypt(text) == text


class TestTransposeCipherDecrypt:
    """Decryption behaviour and round trips."""

    def test_full_table(self):
        assert TransposeCipher(3).decrypt("ИТРРЕИПВМ") == "ПРИВЕТМИР"

    def test_partial_last_row(self):
        assert TransposeCipher(3).decrypt("ИТИРЕМПВ Р") == "ПРИВЕТ МИР"

    @pytest.mark.parametrize(
        "text",
        [
            "ПРИВЕТМИР",
            "ПРИВЕТ МИР",
            "Шифр табличной перестановки",
            "HELLO WORLD",
            " ПРОБЕЛЫ ПО КРАЯМ ",
        ],
    )
    def test_roundtrip_for_every_key(self, text):
        for columns in range(1, len(text) + 1):
            cipher = TransposeCipher(columns)
            assert cipher.decrypt(cipher.encrypt(text)) == text

    def test_empty_ciphertext(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(3).decrypt("")
        assert exc_info.value.kind == ErrorKind.EMPTY_TEXT

    def test_invalid_ciphertext_character(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(3).decrypt("ИТР.РЕИ")
        assert exc_info.value.kind == ErrorKind.INVALID_TEXT_CHARACTER

    def test_key_exceeds_ciphertext_length(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(10).decrypt("ТЕВИРП")
        assert exc_info.value.kind == ErrorKind.KEY_EXCEEDS_TEXT_LENGTH

    def test_table_too_large(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(2).decrypt("А" * 20001)
        assert exc_info.value.kind == ErrorKind.TABLE_TOO_LARGE


class TestTransposeCipherTable:
    """Table layout helper."""

    def test_build_table_marks_unused_cells(self):
        table = TransposeCipher(3).build_table("ПРИВЕТ МИР")
        assert table == [
            ["П", "Р", "И"],
            ["В", "Е", "Т"],
            [" ", "М", "И"],
            ["Р", None, None],
        ]

    def test_build_table_validates_text(self):
        with pytest.raises(TransposeCipherError) as exc_info:
            TransposeCipher(3).build_table("ПР")
        assert exc_info.value.kind == ErrorKind.KEY_EXCEEDS_TEXT_LENGTH

    def test_explain(self):
        cipher = TransposeCipher(3)
        explanation = cipher.explain("ПРИВЕТ МИР", cipher.encrypt("ПРИВЕТ МИР"))
        assert "3 columns and 4 rows" in explanation
