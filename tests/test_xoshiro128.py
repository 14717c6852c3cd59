"""xoshiro128++ known answers and its extra seeding paths."""

import io

import pytest

from xoshiro_engines import StateFormatError, Xoshiro128PP, join32

DEFAULT_OUTPUTS = [0xAC58B322, 0xC14AC4FE, 0xF1BB0726, 0x144AD16B, 0x4C8C612B]


class CountingSeedSequence:
    def generate_state(self, n_words):
        return list(range(1, n_words + 1))


def test_default_state_matches_reference_stream():
    rng = Xoshiro128PP()
    assert [rng.next() for _ in DEFAULT_OUTPUTS] == DEFAULT_OUTPUTS
    assert rng.state == [0x9CD0D042, 0x0DC08924, 0x393EA70D, 0x925ED2EF]


def test_raw_state_reference_stream():
    rng = Xoshiro128PP([1, 2, 3, 4])
    assert [rng() for _ in range(3)] == [0x281, 0x180387, 0xC0183387]


def test_64_bit_seed_mixes_high_half_first():
    rng = Xoshiro128PP.from_seed(12345)
    assert rng.state == [0xF9960010, 0x1CC6A2AD, 0xA4481706, 0x07C73E38]
    assert [rng.next() for _ in range(3)] == [0xA8352410, 0xA0BA4B7C, 0xDAB9ACAE]


def test_32_bit_seed_widens_into_both_halves():
    narrow = Xoshiro128PP.from_seed32(0xDEADBEEF)
    wide = Xoshiro128PP.from_seed(join32(0xDEADBEEF, 0xDEADBEEF))
    assert narrow.state == wide.state
    assert narrow.state == [0xD030482D, 0x25E90749, 0x6C9264D5, 0x8F84FCBD]


def test_32_bit_seed_wraps_modulo_2_32():
    assert Xoshiro128PP.from_seed32(0x1DEADBEEF) == Xoshiro128PP.from_seed32(0xDEADBEEF)


def test_integer_seed_dispatch_uses_64_bit_path():
    rng = Xoshiro128PP()
    rng.seed(0xDEADBEEF)
    assert rng == Xoshiro128PP.from_seed(0xDEADBEEF)
    assert rng != Xoshiro128PP.from_seed32(0xDEADBEEF)


def test_two_wide_words_split_low_half_first():
    rng = Xoshiro128PP()
    rng.seed_state64([0x0000000200000001, 0x0000000400000003])
    assert rng == Xoshiro128PP([1, 2, 3, 4])


def test_two_wide_words_are_checked():
    with pytest.raises(ValueError):
        Xoshiro128PP().seed_state64([1, 2, 3, 4])
    with pytest.raises(ValueError):
        Xoshiro128PP().seed_state64([1 << 64, 0])


def test_seed_sequence_fills_state_directly():
    rng = Xoshiro128PP.from_seed_sequence(CountingSeedSequence())
    assert rng.state == [1, 2, 3, 4]


def test_identical_seeds_give_identical_streams():
    first = Xoshiro128PP.from_seed32(42)
    second = Xoshiro128PP.from_seed32(42)
    assert [first.next() for _ in range(10_000)] == [second.next() for _ in range(10_000)]


@pytest.mark.parametrize("count", [0, 1, 5, 100])
def test_discard_matches_stepping(count):
    skipped = Xoshiro128PP.from_seed(11)
    stepped = Xoshiro128PP.from_seed(11)

    skipped.discard(count)
    for _ in range(count):
        stepped.next()

    assert skipped.next() == stepped.next()


def test_discard_reference_value():
    rng = Xoshiro128PP()
    rng.discard(1000)
    assert rng.next() == 0x7134B8F9


def test_serialized_layout():
    data = Xoshiro128PP().to_bytes()
    assert len(data) == Xoshiro128PP.serialized_size() == 19
    assert data.hex() == "8c8f581c" "20" "e4dc233d" "20" "b027a08d" "20" "bb70c710"


def test_round_trip_resumes_stream():
    original = Xoshiro128PP.from_seed(77)
    original.discard(3)

    buffer = io.BytesIO()
    original.dump(buffer)
    restored = Xoshiro128PP.from_bytes(buffer.getvalue())

    assert [restored.next() for _ in range(50)] == [original.next() for _ in range(50)]


def test_wrong_size_is_rejected():
    with pytest.raises(StateFormatError):
        Xoshiro128PP.from_bytes(Xoshiro128PP().to_bytes() + b" ")


def test_outputs_stay_in_range():
    rng = Xoshiro128PP.from_seed(31337)
    sample = [rng.next() for _ in range(20_000)]
    assert rng.max() == 0xFFFFFFFF
    assert all(rng.min() <= value <= rng.max() for value in sample)
    assert max(sample) > rng.max() * 0.99
    assert min(sample) < rng.max() * 0.01


def test_all_zero_state_is_absorbing():
    rng = Xoshiro128PP([0, 0, 0, 0])
    assert all(rng.next() == 0 for _ in range(100))


def test_raw_words_must_fit_32_bits():
    with pytest.raises(ValueError):
        Xoshiro128PP([1 << 32, 0, 0, 0])
