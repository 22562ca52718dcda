import pytest

from oneiros.rng import Xorshift64, MASK64


def test_first_value_for_seed_one():
    rng = Xorshift64(1)
    # 1 -> 0x2001 -> 0x2001 -> 0x2001 ^ (0x2001 << 43)
    assert rng.next() == (1 << 56) | (1 << 43) | (1 << 13) | 1


def test_same_seed_same_sequence():
    a = Xorshift64(0xdeadbeef)
    b = Xorshift64(0xdeadbeef)
    assert [a.next() for _ in range(1000)] == [b.next() for _ in range(1000)]


def test_reseed_restarts_sequence():
    rng = Xorshift64(42)
    first = [rng.next() for _ in range(10)]
    rng.seed(42)
    assert [rng.next() for _ in range(10)] == first


def test_values_stay_within_64_bits():
    rng = Xorshift64(MASK64)
    for _ in range(10000):
        value = rng.next()
        assert 0 <= value <= MASK64


def test_seed_is_masked_to_64_bits():
    assert Xorshift64((1 << 64) | 7).state == 7
    assert Xorshift64(-1).state == MASK64


def test_zero_seed_is_a_fixed_point():
    rng = Xorshift64(0)
    assert {rng.next() for _ in range(100)} == {0}


def test_copy_replays_without_disturbing_original():
    rng = Xorshift64(1234)
    rng.next()
    replay = rng.copy()
    assert [replay.next() for _ in range(5)] == [rng.next() for _ in range(5)]


@pytest.mark.parametrize("n", [1, 2, 3, 7, 256])
def test_randbelow_in_range(n):
    rng = Xorshift64(99)
    assert all(0 <= rng.randbelow(n) < n for _ in range(1000))


def test_from_entropy_produces_different_states():
    states = {Xorshift64.from_entropy().state for _ in range(10)}
    assert len(states) > 1


def test_iterator_protocol():
    a = Xorshift64(5)
    b = Xorshift64(5)
    assert next(a) == b.next()
