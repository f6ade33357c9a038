import logging

import numpy
import pytest

from galoislfsr import (
    MAX_WIDTH, GaloisLFSR, default_mask, mask_to_taps, resolve_taps, taps_to_mask,
    ConfigError, InvalidSeed, InvalidStopValue, InvalidTaps, InvalidWidth, NoDefaultTaps,
    StopValueAlreadySet, UnsafeDefaultsNotEnabled, UnsafeTapsRejected,
)


def test_width_bounds():
    with pytest.raises(InvalidWidth):
        GaloisLFSR(0, 1, [1])
    with pytest.raises(InvalidWidth):
        GaloisLFSR(-8, 1, [1])
    with pytest.raises(InvalidWidth):
        GaloisLFSR(MAX_WIDTH + 1, 1, [MAX_WIDTH + 1])
    assert GaloisLFSR(MAX_WIDTH, 1, [MAX_WIDTH, 1]).width == MAX_WIDTH
    assert GaloisLFSR(1, 1, [1]).read() == 1


def test_width_type():
    with pytest.raises(InvalidWidth):
        GaloisLFSR(8.0, 1, [8, 1])
    with pytest.raises(InvalidWidth):
        GaloisLFSR('8', 1, [8, 1])
    with pytest.raises(InvalidWidth):
        GaloisLFSR(True, 1, [1])


def test_seed_bounds():
    with pytest.raises(InvalidSeed):
        GaloisLFSR(4, 0, 0b1001)
    with pytest.raises(InvalidSeed):
        GaloisLFSR(4, -1, 0b1001)
    with pytest.raises(InvalidSeed):
        GaloisLFSR(4, 2**4, 0b1001)
    assert GaloisLFSR(4, 2**4 - 1, 0b1001).value == 15


def test_seed_type():
    with pytest.raises(InvalidSeed):
        GaloisLFSR(4, '1', 0b1001)
    with pytest.raises(InvalidSeed):
        GaloisLFSR(4, 1.0, 0b1001)


def test_width_checked_before_seed():
    with pytest.raises(InvalidWidth):
        GaloisLFSR(0, 0)


def test_tap_position_bounds():
    assert GaloisLFSR(4, 1, [4]).mask == 0b1000
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, [5])
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, [4, 0])
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, [4, -1])
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, [])


def test_tap_position_types():
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, [4, 1.5])
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, '43')
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, b'\x04\x03')
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, 12.0)


def test_taps_from_any_iterable():
    assert GaloisLFSR(4, 1, (4, 1)).mask == 0b1001
    assert GaloisLFSR(4, 1, iter([4, 1])).mask == 0b1001
    assert GaloisLFSR(4, 1, {1, 4}).mask == 0b1001


def test_mask_bounds():
    assert GaloisLFSR(4, 1, 0b1111).mask == 0b1111
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, 0b10000)
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, 0)
    with pytest.raises(InvalidTaps):
        GaloisLFSR(4, 1, -12)


def test_numpy_integers_accepted():
    lfsr = GaloisLFSR(numpy.int64(4), numpy.uint8(1), numpy.uint16(0b1001))
    assert lfsr.width == 4
    assert lfsr.mask == 0b1001
    assert type(lfsr.read()) is int


def test_defaults_need_opt_in():
    with pytest.raises(UnsafeDefaultsNotEnabled):
        GaloisLFSR(8, 1)
    lfsr = GaloisLFSR(8, 1, allow_unsafe_defaults=True)
    assert lfsr.taps == [8, 6, 5, 4]


def test_no_default_taps():
    with pytest.raises(NoDefaultTaps):
        GaloisLFSR(1, 1, allow_unsafe_defaults=True)


def test_default_taps_given_explicitly_are_rejected():
    with pytest.raises(UnsafeTapsRejected):
        GaloisLFSR(8, 1, [8, 6, 5, 4])
    with pytest.raises(UnsafeTapsRejected):
        GaloisLFSR(8, 1, [4, 5, 6, 8])
    with pytest.raises(UnsafeTapsRejected):
        GaloisLFSR(8, 1, 0b10111000)
    with pytest.raises(UnsafeTapsRejected):
        GaloisLFSR(4, 1, [4, 3])
    assert GaloisLFSR(8, 1, [8, 6, 5, 4], allow_unsafe_defaults=True).mask == 0b10111000


def test_opt_in_is_per_register():
    GaloisLFSR(8, 1, allow_unsafe_defaults=True)
    with pytest.raises(UnsafeDefaultsNotEnabled):
        GaloisLFSR(8, 1)


def test_default_taps_warn(caplog):
    with caplog.at_level(logging.WARNING, logger='galoislfsr'):
        GaloisLFSR(8, 1, allow_unsafe_defaults=True)
    assert 'trivially predictable' in caplog.text


def test_custom_taps_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger='galoislfsr'):
        GaloisLFSR(8, 1, [8, 7, 3, 2], allow_unsafe_defaults=True)
    assert caplog.text == ''


def test_stop_value_bounds():
    lfsr = GaloisLFSR(4, 1, 0b1001)
    with pytest.raises(InvalidStopValue):
        lfsr.stop_after_value(16)
    with pytest.raises(InvalidStopValue):
        lfsr.stop_after_value(-1)
    with pytest.raises(InvalidStopValue):
        lfsr.stop_after_value('3')
    assert lfsr.stop_value is None
    lfsr.stop_after_value(15)
    assert lfsr.stop_value == 15


def test_stop_value_only_once():
    lfsr = GaloisLFSR(4, 1, 0b1001)
    lfsr.stop_after_value(5)
    for value in (5, 6, 0, 99, 'x'):
        with pytest.raises(StopValueAlreadySet):
            lfsr.stop_after_value(value)
    assert lfsr.stop_value == 5


def test_stop_value_does_not_touch_state():
    lfsr = GaloisLFSR(4, 1, 0b1001)
    upcoming = lfsr.peek()
    lfsr.stop_after_value(upcoming)
    assert lfsr.value == 1
    assert lfsr.read() == upcoming
    assert lfsr.read() is None


def test_error_hierarchy():
    for exc in (InvalidWidth, InvalidSeed, InvalidTaps, UnsafeDefaultsNotEnabled, NoDefaultTaps,
                UnsafeTapsRejected, InvalidStopValue, StopValueAlreadySet):
        assert issubclass(exc, ConfigError)
        assert issubclass(exc, ValueError)
    with pytest.raises(ValueError):
        GaloisLFSR(4, 0, 0b1001)


def test_resolve_taps():
    assert resolve_taps(8, [8, 7, 3, 2]) == 0b11000110
    assert resolve_taps(8, 0b11000110) == 0b11000110
    assert resolve_taps(8, allow_unsafe_defaults=True) == default_mask(8)
    with pytest.raises(UnsafeDefaultsNotEnabled):
        resolve_taps(8)


def test_mask_conversions():
    assert taps_to_mask([16, 14, 13, 11]) == 0xB400
    assert mask_to_taps(0xB400) == [16, 14, 13, 11]
    assert default_mask(16) == 0xB400
    assert default_mask(1) is None
    assert default_mask(256) is None
