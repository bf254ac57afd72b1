import random

import pytest

from cryptoprims.bowe_hopwood import (
    BoweHopwoodCRH,
    BoweHopwoodParameters,
    BoweHopwoodTwoToOneCRH,
    max_chunks_in_segment,
)
from cryptoprims.curve import JUBJUB, field_element_to_bytes
from cryptoprims.errors import IncorrectInputLength
from cryptoprims.pedersen_crh import Window

BIG_WINDOW = Window(window_size=63, num_windows=8)


@pytest.fixture(scope="module")
def big_params():
    return BoweHopwoodCRH(BIG_WINDOW).setup(random.Random(1))


def test_max_chunks_for_jubjub():
    assert max_chunks_in_segment(JUBJUB.scalar_modulus) == 63


def test_simple_bh(big_params):
    crh = BoweHopwoodCRH(BIG_WINDOW)
    result = crh.evaluate(big_params, bytes([1, 2, 3]))
    assert 0 <= result < JUBJUB.base_modulus
    assert crh.evaluate(big_params, bytes([1, 2, 3])) == result
    assert crh.evaluate(big_params, bytes([1, 2, 4])) != result


def test_native_two_to_one_equality(big_params):
    rng = random.Random(7)
    left = bytes(rng.getrandbits(8) for _ in range(31))
    right = bytes(rng.getrandbits(8) for _ in range(31))
    two = BoweHopwoodTwoToOneCRH(BIG_WINDOW)
    expected = BoweHopwoodCRH(BIG_WINDOW).evaluate(big_params, left + right + b"\x00")
    assert two.evaluate(big_params, left, right) == expected


def test_input_size_check():
    window = Window(window_size=1, num_windows=1)
    crh = BoweHopwoodCRH(window)
    params = crh.setup(random.Random(3))
    with pytest.raises(IncorrectInputLength):
        crh.evaluate(params, bytes(189))


def test_setup_rejects_oversized_window():
    with pytest.raises(ValueError):
        BoweHopwoodCRH(Window(window_size=64, num_windows=1)).setup(random.Random(0))


def test_generators_shape_and_spacing():
    window = Window(window_size=3, num_windows=2)
    params = BoweHopwoodCRH(window).setup(random.Random(5))
    assert len(params.generators) == window.num_windows
    for segment in params.generators:
        assert len(segment) == window.window_size
        for current, following in zip(segment, segment[1:]):
            assert following == current * 16


@pytest.fixture
def three_segment():
    rng = random.Random(11)
    gens = [JUBJUB.random_point(rng) for _ in range(3)]
    params = BoweHopwoodParameters(generators=[[g] for g in gens])
    crh = BoweHopwoodCRH(Window(window_size=1, num_windows=3))
    return crh, params, gens


@pytest.mark.parametrize(
    "byte, multiple",
    [(0x00, 1), (0x01, 2), (0x02, 3), (0x03, 4), (0x04, -1), (0x07, -4)],
)
def test_chunk_encoding(three_segment, byte, multiple):
    crh, params, (g0, g1, g2) = three_segment
    expected = g0 * multiple + g1 + g2
    assert crh.evaluate(params, bytes([byte])) == expected.x


def test_empty_input_is_identity(three_segment):
    crh, params, _ = three_segment
    assert crh.evaluate(params, b"") == JUBJUB.identity().x


def test_wrong_generator_count(three_segment):
    crh, params, _ = three_segment
    short = BoweHopwoodParameters(generators=params.generators[:2])
    with pytest.raises(ValueError):
        crh.evaluate(short, b"\x00")


def test_wrong_segment_length(three_segment):
    crh, params, _ = three_segment
    bad = BoweHopwoodParameters(generators=[seg * 2 for seg in params.generators])
    with pytest.raises(ValueError):
        crh.evaluate(bad, b"\x00")


def test_two_to_one_unequal_lengths():
    window = Window(window_size=8, num_windows=4)
    two = BoweHopwoodTwoToOneCRH(window)
    params = two.setup(random.Random(2))
    with pytest.raises(ValueError):
        two.evaluate(params, b"ab", b"c")


def test_two_to_one_compress_uses_field_bytes():
    window = Window(window_size=8, num_windows=4)
    two = BoweHopwoodTwoToOneCRH(window)
    params = two.setup(random.Random(4))
    left = two.evaluate(params, b"\x01\x02", b"\x03\x04")
    right = two.evaluate(params, b"\x05\x06", b"\x07\x08")
    p = JUBJUB.base_modulus
    expected = two.evaluate(
        params, field_element_to_bytes(left, p), field_element_to_bytes(right, p)
    )
    assert two.compress(params, left, right) == expected


def test_parameters_str():
    text = str(BoweHopwoodParameters(generators=[[JUBJUB.identity()]]))
    assert text.startswith("Bowe-Hopwood-Pedersen Hash Parameters {\n")
    assert "Generator 0:" in text
    assert text.endswith("}\n")