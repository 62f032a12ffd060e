import itertools

import numpy as np
import pytest
from scipy.stats import chisquare

from threadrand import Bounds, Rng, RngConfig
from threadrand.core.types import INT_KINDS
from threadrand.rng import ALPHABETIC, ALPHANUMERIC, DIGITS

N_SAMPLES = 10_000
MIN_P_VALUE = 1e-4


@pytest.fixture()
def rng():
    return Rng.with_seed(42)


def _draw_mixed(r: Rng) -> list:
    return [
        r.bool(),
        r.alphabetic(),
        r.digit(36),
        r.u8(),
        r.i64(range(-10, 10)),
        r.u128(),
        r.f64(),
        float(r.f32()),
    ]


def test_same_seed_same_stream():
    a = Rng.with_seed(1234)
    b = Rng.with_seed(1234)
    for _ in range(50):
        assert _draw_mixed(a) == _draw_mixed(b)


def test_reseed_replays_stream(rng):
    rng.seed(7)
    first = [_draw_mixed(rng) for _ in range(20)]
    rng.seed(7)
    second = [_draw_mixed(rng) for _ in range(20)]
    assert first == second
    assert rng.get_seed() == 7


def test_different_seeds_diverge():
    a = Rng.with_seed(1)
    b = Rng.with_seed(2)
    assert [a.u64() for _ in range(10)] != [b.u64() for _ in range(10)]


@pytest.mark.parametrize("value", [-1, 2**64])
def test_seed_outside_u64_raises(value):
    with pytest.raises(ValueError):
        Rng.with_seed(value)


def test_seed_must_be_integer():
    with pytest.raises(TypeError):
        Rng.with_seed(1.5)
    # numpy integers are fine
    assert Rng.with_seed(np.uint64(3)).get_seed() == 3


def _shapes(kind):
    return [
        Bounds.closed(kind.min, kind.min + 9),
        Bounds.half_open(kind.max - 5, kind.max),
        Bounds(kind.min, kind.min + 3, start_inclusive=False, end_inclusive=True),
        Bounds.at_least(kind.max - 2),
        Bounds.up_to(kind.min + 2),
        Bounds.full(),
    ]


@pytest.mark.parametrize("kind", INT_KINDS, ids=lambda k: k.name)
def test_integer_samples_stay_in_bounds(rng, kind):
    sample = getattr(rng, kind.name)
    for bounds in _shapes(kind):
        low, high = bounds.resolve(kind)
        values = [sample(bounds) for _ in range(N_SAMPLES)]
        assert min(values) >= low, f"{kind.name} {bounds}"
        assert max(values) <= high, f"{kind.name} {bounds}"


@pytest.mark.parametrize("kind", INT_KINDS, ids=lambda k: k.name)
def test_small_range_hits_every_value(rng, kind):
    sample = getattr(rng, kind.name)
    bounds = Bounds.closed(kind.min, kind.min + 9)
    seen = {sample(bounds) for _ in range(1000)}
    assert seen == set(range(kind.min, kind.min + 10))


def test_full_u8_range_reaches_both_ends(rng):
    values = {rng.u8() for _ in range(N_SAMPLES)}
    assert 0 in values and 255 in values


def test_single_value_range(rng):
    assert all(rng.i16(Bounds.closed(-3, -3)) == -3 for _ in range(100))


@pytest.mark.parametrize("kind_name", ["u8", "i32", "u64", "i128"])
def test_small_range_is_uniform(rng, kind_name):
    sample = getattr(rng, kind_name)
    counts = np.bincount([sample(range(0, 4)) for _ in range(40_000)], minlength=4)
    assert chisquare(counts).pvalue > MIN_P_VALUE


def test_wide_range_has_no_modulo_bias(rng):
    # A naive `word % span` would make the first third twice as likely here.
    span = 3 * 2**126
    thirds = [rng.u128(range(0, span)) // 2**126 for _ in range(30_000)]
    counts = np.bincount(thirds, minlength=3)
    assert counts.shape == (3,)
    assert chisquare(counts).pvalue > MIN_P_VALUE


@pytest.mark.parametrize(
    "bounds", [range(5, 5), range(6, 5), Bounds.closed(6, 5), slice(3, 3)]
)
def test_empty_range_raises(rng, bounds):
    with pytest.raises(ValueError, match="empty range"):
        rng.u32(bounds)


def test_digit_alphabet(rng):
    values = {rng.digit(16) for _ in range(N_SAMPLES)}
    assert values == set("0123456789abcdef")
    assert {rng.digit(36) for _ in range(N_SAMPLES)} == set(DIGITS)
    assert {rng.digit(1) for _ in range(100)} == {"0"}


@pytest.mark.parametrize("base", [0, 37, -1])
def test_digit_bad_base_raises(rng, base):
    with pytest.raises(ValueError):
        rng.digit(base)


def test_character_classes(rng):
    letters = [rng.alphabetic() for _ in range(N_SAMPLES)]
    assert set(letters) <= set(ALPHABETIC)
    assert any(c.islower() for c in letters)
    assert any(c.isupper() for c in letters)

    symbols = {rng.alphanumeric() for _ in range(N_SAMPLES)}
    assert symbols == set(ALPHANUMERIC)

    assert {rng.lowercase() for _ in range(N_SAMPLES)} == set("abcdefghijklmnopqrstuvwxyz")
    assert {rng.uppercase() for _ in range(N_SAMPLES)} == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_bool_is_balanced(rng):
    trues = sum(rng.bool() for _ in range(N_SAMPLES))
    assert 4500 < trues < 5500


def test_floats_in_unit_interval(rng):
    f64s = np.array([rng.f64() for _ in range(N_SAMPLES)])
    f32s = np.array([rng.f32() for _ in range(N_SAMPLES)])
    assert np.all(f64s >= 0.0) and np.all(f64s < 1.0)
    assert np.all(f32s >= 0.0) and np.all(f32s < 1.0)
    assert isinstance(rng.f64(), float)
    assert isinstance(rng.f32(), np.float32)


def test_shuffle_covers_all_permutations(rng):
    base = [1, 2, 3, 4, 5]
    perms = {p: 0 for p in itertools.permutations(base)}
    for _ in range(24_000):
        seq = list(base)
        rng.shuffle(seq)
        perms[tuple(seq)] += 1
    counts = np.array(list(perms.values()))
    assert len(perms) == 120
    assert np.all(counts > 0)
    assert chisquare(counts).pvalue > MIN_P_VALUE


def test_shuffle_short_sequences_are_noops(rng):
    empty: list = []
    rng.shuffle(empty)
    assert empty == []
    single = ["x"]
    rng.shuffle(single)
    assert single == ["x"]


def test_shuffle_arrays_and_rejects_immutables(rng):
    arr = np.arange(100)
    rng.shuffle(arr)
    assert sorted(arr.tolist()) == list(range(100))
    with pytest.raises(TypeError):
        rng.shuffle((1, 2, 3))


def test_choice(rng):
    items = ["a", "b", "c"]
    assert {rng.choice(items) for _ in range(200)} == set(items)
    with pytest.raises(IndexError):
        rng.choice([])


def test_fork_is_deterministic_and_independent():
    parent_a = Rng.with_seed(99)
    parent_b = Rng.with_seed(99)
    child_a = parent_a.fork()
    child_b = parent_b.fork()
    assert child_a.get_seed() == child_b.get_seed()
    assert [child_a.u64() for _ in range(5)] == [child_b.u64() for _ in range(5)]
    assert [child_a.u64() for _ in range(5)] != [parent_a.u64() for _ in range(5)]


@pytest.mark.parametrize("kind", ["pcg64", "pcg64dxsm", "philox", "sfc64"])
def test_every_bit_generator_is_deterministic(kind):
    cfg = RngConfig(bit_generator=kind)
    a = Rng.with_seed(5, cfg)
    b = Rng.with_seed(5, cfg)
    assert [_draw_mixed(a) for _ in range(10)] == [_draw_mixed(b) for _ in range(10)]
    assert a.config.bit_generator == kind
    assert kind in repr(a)
