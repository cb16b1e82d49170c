import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from highwayhash.cat import (
    HighwayHashCat,
    hash_fragments64,
    hash_fragments128,
    hash_fragments256,
)
from highwayhash.core import hash64, hash128, hash256

KEY1 = (
    0x0706050403020100,
    0x0F0E0D0C0B0A0908,
    0x1716151413121110,
    0x1F1E1D1C1B1A1918,
)
KEY2 = (1, 2, 3, 4)

EXPECTED64 = {
    0: 0x907A56DE22C26E53,
    1: 0x7EAB43AAC7CDDD78,
    7: 0x4D02AE1738F59482,
    16: 0xCFAB3489F97EB832,
    31: 0x9FC7007CCF035A68,
    32: 0xA0C964D9ECD580FC,
    33: 0x2C90F73CA03181FC,
    63: 0xAB8EEBE9BF2139A0,
    64: 0x75542C5D4CD2A6FF,
}


@pytest.mark.parametrize("size", sorted(EXPECTED64))
def test_cat_matches_known_vectors(size):
    data = bytes(range(size))
    half = size // 2
    cat = HighwayHashCat(KEY1)
    cat.append(data[:half]).append(data[half:])
    assert cat.finish64() == EXPECTED64[size]


def test_cat_second_key_vector():
    data = bytes(128 + i for i in range(33))
    assert hash_fragments64(KEY2, [data[:5], data[5:20], data[20:]]) == 0x53C516CCE478CAD7


def test_empty_cat_equals_empty_hash():
    assert HighwayHashCat(KEY1).finish64() == 0x907A56DE22C26E53


def test_all_three_fragment_partitions():
    data = bytes(range(70))
    for size1 in range(0, 23, 3):
        for size2 in range(0, 23, 5):
            for size3 in range(0, 23, 7):
                total = size1 + size2 + size3
                fragments = [
                    data[:size1],
                    data[size1 : size1 + size2],
                    data[size1 + size2 : total],
                ]
                assert hash_fragments64(KEY1, fragments) == hash64(data[:total], KEY1)


@pytest.mark.parametrize("size", [0, 3, 17, 32, 45, 96, 101])
def test_wide_results_match_one_shot(size):
    data = bytes((i * 7) & 0xFF for i in range(size))
    fragments = [data[i : i + 5] for i in range(0, size, 5)]
    assert hash_fragments128(KEY2, fragments) == hash128(data, KEY2)
    assert hash_fragments256(KEY2, fragments) == hash256(data, KEY2)


def test_finish_does_not_consume():
    cat = HighwayHashCat(KEY1)
    cat.append(bytes(range(10)))
    first = cat.finish64()
    assert cat.finish64() == first
    assert cat.finish128() == cat.finish128()
    cat.append(bytes(range(10, 40)))
    assert cat.finish64() == hash64(bytes(range(40)), KEY1)
    assert cat.finish256() == hash256(bytes(range(40)), KEY1)


def test_append_accepts_bytes_like():
    data = bytes(range(50))
    cat = HighwayHashCat(KEY1)
    cat.append(bytearray(data[:20]))
    cat.append(memoryview(data[20:]))
    assert cat.finish64() == hash64(data, KEY1)


def test_append_rejects_str():
    with pytest.raises(TypeError):
        HighwayHashCat(KEY1).append("text")


def test_bad_key_length():
    with pytest.raises(ValueError):
        HighwayHashCat((1, 2, 3))


def test_bad_key_range():
    with pytest.raises(ValueError):
        hash_fragments64((1, 2, 3, 1 << 64), [b"abc"])


@settings(max_examples=50, deadline=None)
@given(
    data=st.binary(max_size=200),
    cuts=st.lists(st.integers(min_value=0, max_value=200), max_size=6),
)
def test_any_split_matches_one_shot(data, cuts):
    points = sorted({min(c, len(data)) for c in cuts} | {0, len(data)})
    fragments = [data[a:b] for a, b in zip(points, points[1:])]
    assert hash_fragments64(KEY1, fragments) == hash64(data, KEY1)
    assert hash_fragments128(KEY1, fragments) == hash128(data, KEY1)