import numpy as np
import pytest

from letter_simhash.errors import InvalidArgumentError
from letter_simhash.fingerprints import encode


def test_zero_weights_tie_to_zero_bits():
    assert encode(np.zeros(128, dtype=np.int64)) == bytes(16)


def test_positive_weights_set_bits():
    assert encode([5] * 128) == b"\xff" * 16
    assert encode([-1] * 128) == bytes(16)


def test_bit_order_is_msb_first():
    w = [0] * 128
    w[0] = 1      # byte 0, bit 7
    w[15] = 3     # byte 1, bit 0
    w[127] = 1    # byte 15, bit 0
    fp = encode(w)
    assert fp[0] == 0x80
    assert fp[1] == 0x01
    assert fp[15] == 0x01
    assert fp[2:15] == bytes(13)


def test_mixed_signs_and_ties():
    w = [1, 0, -1, 2, 0, 0, 7, -3] + [0] * 120
    assert encode(w)[0] == 0b10010010


@pytest.mark.parametrize("size", [0, 64, 127, 129])
def test_wrong_length_rejected(size):
    with pytest.raises(InvalidArgumentError):
        encode([1] * size)
