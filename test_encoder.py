import string

import numpy as np
import pytest

from alidval import AlphabeticalIdEncoder, EncoderConfig
from alidval.utils import letter_index, standard_char_value, stretch_char_value


@pytest.fixture
def encoder():
    return AlphabeticalIdEncoder()


@pytest.fixture
def stretch_encoder():
    return AlphabeticalIdEncoder(EncoderConfig(first_char_alphabetic_stretch=True))


def test_character_values():
    assert letter_index(ord('A')) == 0
    assert letter_index(ord('z')) == 25
    assert letter_index(ord('@')) is None
    assert letter_index(ord('[')) is None
    assert letter_index(0xC1) is None
    assert standard_char_value(ord('a')) == 1
    assert standard_char_value(ord('Z')) == 26
    assert standard_char_value(ord('5')) == 0
    assert stretch_char_value(ord('A')) == 0
    assert stretch_char_value(ord('z')) == 25
    assert stretch_char_value(ord('-')) == 0


def test_empty_string(encoder, stretch_encoder):
    assert encoder.encode("") == 0.0
    assert encoder.encode(None) == 0.0
    assert stretch_encoder.encode("") == 0.0


@pytest.mark.parametrize("text", ["0123456789", " !?.-_", "\t\n", "é", "日本", b"\xff\x80", "\udcff"])
def test_non_letters_encode_to_zero(encoder, stretch_encoder, text):
    assert encoder.encode(text) == 0.0
    assert stretch_encoder.encode(text) == 0.0


@pytest.mark.parametrize("text", ["Hello World", "alphabetical", "MiXeD cAsE 42", "Zz"])
def test_case_is_ignored(encoder, stretch_encoder, text):
    assert encoder.encode(text.upper()) == encoder.encode(text.lower())
    assert stretch_encoder.encode(text.upper()) == stretch_encoder.encode(text.lower())


def test_single_letters_are_monotonic(encoder, stretch_encoder):
    ids = [encoder.encode(letter) for letter in string.ascii_uppercase]
    assert all(a < b for a, b in zip(ids, ids[1:]))
    stretch_ids = [stretch_encoder.encode(letter) for letter in string.ascii_uppercase]
    assert all(a < b for a, b in zip(stretch_ids, stretch_ids[1:]))


def test_known_values(encoder):
    assert encoder.encode("A") == 1 / 27.0
    assert encoder.encode("z") == 26 / 27.0
    assert encoder.encode("Hi") == 8 / 27.0 + 9 / 729.0
    assert encoder.encode("?b") == 2 / 729.0


def test_non_letter_sorts_before_a(encoder):
    assert encoder.encode("!") < encoder.encode("A")
    assert encoder.encode("a!") < encoder.encode("aa")
    assert encoder.encode("a") < encoder.encode("ab")


def test_trailing_non_letters_do_not_change_id(encoder):
    assert encoder.encode("Alpha") == encoder.encode("Alpha!!  ")


def test_stretch_first_character(stretch_encoder):
    assert stretch_encoder.encode("A") == 0.0
    assert stretch_encoder.encode("a") == 0.0
    assert stretch_encoder.encode("Z") == 25 / 26.0
    assert stretch_encoder.encode("#") == stretch_encoder.encode("A")
    assert stretch_encoder.encode("#x") == stretch_encoder.encode("ax")
    assert stretch_encoder.encode("B") == 1 / 26.0
    assert stretch_encoder.encode("BA") == 1 / 26.0 + 1 / (26.0 * 27.0)


@pytest.mark.parametrize("rest", ["", "a", "hello", "Zebra crossing", "xyz123"])
def test_stretch_scales_remaining_characters(encoder, stretch_encoder, rest):
    assert stretch_encoder.encode("A" + rest) == pytest.approx(encoder.encode(rest) / 26.0)


@pytest.mark.parametrize("text", ["", "a", "z" * 40, "Z" * 11, "zzzzzzzzzzzz!zzzz", "m" * 100])
def test_ids_stay_in_base_range(encoder, stretch_encoder, text):
    assert 0.0 <= encoder.encode(text) <= 1.0
    assert 0.0 <= stretch_encoder.encode(text) <= 1.0


def test_precision_saturates_naturally(encoder):
    prefix = "abcdefghijklmnop"
    assert encoder.encode(prefix) == encoder.encode(prefix + "qrstuvwxyz")
    # eleven characters are still fully distinguished
    assert encoder.encode("abcdefghija") != encoder.encode("abcdefghijb")


def test_non_ascii_bytes_take_one_position_each(encoder):
    # 'é' is two UTF-8 bytes, so 'b' lands in the third position
    assert encoder.encode("éb") == encoder.encode(b"\xc3\xa9b") == 2 / 19683.0


def test_unsupported_input_type(encoder):
    with pytest.raises(TypeError):
        encoder.encode(42)


def test_batch_encode(encoder):
    texts = ["apple", "Banana", "", "cherry"]
    ids = encoder.batch_encode(texts)
    assert isinstance(ids, np.ndarray)
    assert ids.dtype == np.float64
    assert ids.shape == (4,)
    assert list(ids) == [encoder.encode(text) for text in texts]
    assert encoder.batch_encode([]).shape == (0,)
