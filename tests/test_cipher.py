"""
Unit tests for the cipher engine.

Test coverage:
    - Known encrypt/decrypt vectors
    - Round-trip for ASCII, Cyrillic and astral text
    - Identity on empty tape
    - Modular wrap-around and shift normalization
    - Cyclic reuse of the tape
    - Surrogate pair handling
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from tape_cipher import encrypt, decrypt, transform, is_usable_tape, UnknownModeError
from tape_cipher.cipher import normalize_shift, expand_shifts
from tape_cipher.code_units import text_to_code_units, code_units_to_text, code_unit_length


TEXTS = [
    "",
    "A",
    "Hello, World!",
    "Привет, мир!",
    "tab\tnewline\n\x00end",
    "emoji 😀 and 𝄞 clef",
]

TAPES = [
    "1,2",
    "5",
    "-7, 65535, 100000, 3.9, x",
    "0",
    "1e3;0x10 -2.5",
]


class TestKnownVectors:
    """Test fixed input/output pairs."""

    def test_encrypt_ab(self):
        """Test encrypt('AB', '1,2') == 'BD'."""
        assert encrypt("AB", "1,2") == "BD"

    def test_decrypt_bd(self):
        """Test decrypt('BD', '1,2') == 'AB'."""
        assert decrypt("BD", "1,2") == "AB"

    def test_negative_shift(self):
        """Test that a negative tape value shifts backwards."""
        assert encrypt("B", "-1") == "A"

    def test_full_cycle_shift_is_identity(self):
        """Test that a shift of 65536 leaves text unchanged."""
        assert encrypt("abc", "65536") == "abc"

    def test_wrap_around_top(self):
        """Test wrap past 0xFFFF on encryption."""
        assert encrypt("\uffff", "1") == "\x00"

    def test_wrap_around_bottom(self):
        """Test wrap below 0 on decryption."""
        assert decrypt("\x00", "1") == "\uffff"


class TestRoundTrip:
    """Test that decrypt inverts encrypt and vice versa."""

    @pytest.mark.parametrize("text", TEXTS)
    @pytest.mark.parametrize("tape", TAPES)
    def test_decrypt_after_encrypt(self, text, tape):
        """Test decrypt(encrypt(T, S), S) == T."""
        assert decrypt(encrypt(text, tape), tape) == text

    @pytest.mark.parametrize("text", TEXTS)
    def test_encrypt_after_decrypt(self, text):
        """Test encrypt(decrypt(T, S), S) == T."""
        tape = "9, 40000, -3"
        assert encrypt(decrypt(text, tape), tape) == text

    def test_random_text_roundtrip(self):
        """Test round-trip over random BMP text with a long tape."""
        rng = np.random.default_rng(1234)
        # Stay clear of the surrogate range so the input is a plain string
        units = rng.integers(0, 0xD800, size=500)
        text = code_units_to_text(units)
        tape = ",".join(str(v) for v in rng.integers(-100000, 100000, size=37))

        assert decrypt(encrypt(text, tape), tape) == text


class TestEmptyTape:
    """Test the no-op behaviour when the tape has no values."""

    @pytest.mark.parametrize("tape", ["", None, " ;, "])
    def test_identity(self, tape):
        """Test encrypt and decrypt return the text unchanged."""
        assert encrypt("secret", tape) == "secret"
        assert decrypt("secret", tape) == "secret"

    def test_is_usable_tape(self):
        """Test detection of empty tapes."""
        assert not is_usable_tape("")
        assert not is_usable_tape(None)
        assert not is_usable_tape(",,")
        assert is_usable_tape("a")
        assert is_usable_tape("0")


class TestTapeCycling:
    """Test the index-to-shift mapping."""

    def test_cycling_positions(self):
        """Test that position i uses tape[i % len(tape)]."""
        result = encrypt("\x00" * 7, "1,2,3")
        shifts = text_to_code_units(result).tolist()

        assert shifts == [1, 2, 3, 1, 2, 3, 1]
        assert shifts[5] == shifts[2]

    def test_expand_shifts(self):
        """Test laying a tape over more positions than it has values."""
        shifts = expand_shifts([1, -1, 70000], 5)
        assert shifts.tolist() == [1, 65535, 4464, 1, 65535]

    def test_expand_shifts_shorter_text(self):
        """Test a text shorter than the tape."""
        assert expand_shifts([4, 5, 6], 2).tolist() == [4, 5]

    def test_expand_shifts_zero(self):
        """Test an empty text."""
        assert expand_shifts([4, 5, 6], 0).size == 0


class TestShiftNormalization:
    """Test reduction of tape values into [0, 65535]."""

    @pytest.mark.parametrize("shift,expected", [
        (0, 0),
        (1, 1),
        (-1, 65535),
        (65535, 65535),
        (65536, 0),
        (70000, 4464),
        (-65537, 65535),
        (10 ** 30, 10 ** 30 % 65536),
    ])
    def test_normalize_shift(self, shift, expected):
        """Test the normalized shift value."""
        assert normalize_shift(shift) == expected

    def test_output_within_code_unit_range(self):
        """Test that every output unit is a 16-bit value."""
        result = encrypt("Hello 😀", "65535, -65535, 123456789")
        units = text_to_code_units(result)
        assert units.min() >= 0
        assert units.max() <= 65535


class TestCodeUnits:
    """Test the 16-bit code unit view of text."""

    def test_surrogate_pair_shifted_per_unit(self):
        """Test that both halves of a surrogate pair shift independently."""
        # U+1F600 = D83D DE00 -> D83E DE01 = U+1FA01
        result = encrypt("😀", "1")
        assert result == "\U0001FA01"
        assert code_unit_length(result) == 2

    def test_pair_split_uses_two_tape_positions(self):
        """Test that an astral character consumes two tape values."""
        result = encrypt("😀A", "0,0,1")
        assert result == "😀B"

    def test_lone_surrogate_roundtrip(self):
        """Test that a shift into the surrogate range survives decryption."""
        tape = str(0xD800 - ord("A"))
        cipher = encrypt("A", tape)

        assert cipher == "\ud800"
        assert decrypt(cipher, tape) == "A"

    def test_length_preserved(self):
        """Test that the number of code units never changes."""
        text = "abc 😀 д"
        assert code_unit_length(encrypt(text, "7,8")) == code_unit_length(text)

    def test_code_unit_conversion(self):
        """Test text to units and back."""
        units = text_to_code_units("A😀")
        assert units.dtype == np.dtype("<u2")
        assert units.tolist() == [0x41, 0xD83D, 0xDE00]
        assert code_units_to_text(units) == "A😀"

    def test_code_units_out_of_range(self):
        """Test that values beyond 16 bits are rejected."""
        with pytest.raises(ValueError, match="Code units must be in"):
            code_units_to_text(np.array([65536]))


class TestTransform:
    """Test mode dispatch."""

    def test_encrypt_mode(self):
        """Test 'encrypt' mode."""
        assert transform("AB", "1,2", "encrypt") == "BD"

    def test_decrypt_mode(self):
        """Test 'decrypt' mode."""
        assert transform("BD", "1,2", "decrypt") == "AB"

    def test_unknown_mode(self):
        """Test that an unknown mode raises."""
        with pytest.raises(UnknownModeError, match="Unknown mode"):
            transform("AB", "1,2", "rot13")
