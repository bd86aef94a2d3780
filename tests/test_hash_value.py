from __future__ import annotations

import dataclasses

import pytest

from hashmatch import Hash


def test_constructor_stores_fields_verbatim() -> None:
    value = Hash(0b1_0110, 99, algorithm_id=-5)

    assert value.raw_value == 0b1_0110
    assert value.bit_resolution == 99
    assert value.algorithm_id == -5


def test_from_bits_prepends_guard_bit() -> None:
    value = Hash.from_bits(0b0011, 4, algorithm_id=7)

    assert value.raw_value == 0b1_0011
    assert value.data_bits == 0b0011


def test_equality_ignores_bit_length() -> None:
    a = Hash(0b1_0101, 4, algorithm_id=1)
    b = Hash(0b1_0101, 12, algorithm_id=1)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Hash(0b1_0101, 4, algorithm_id=2)
    assert a != Hash(0b1_0100, 4, algorithm_id=1)


def test_hash_is_immutable() -> None:
    value = Hash.from_bits(0b01, 2, algorithm_id=1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        value.value = 0  # type: ignore[misc]


def test_str_pads_data_bits_without_guard_bit() -> None:
    assert str(Hash.from_bits(0b0011, 4, algorithm_id=7)) == "Hash: 0011 [algoId: 7]"
    assert str(Hash.from_bits(0, 6, algorithm_id=2)) == "Hash: 000000 [algoId: 2]"
