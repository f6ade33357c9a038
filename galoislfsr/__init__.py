# -*- coding: utf-8 -*-
"""Galois Linear Feedback Shift Register.

A Galois LFSR shifts its value right by one bit per step and, whenever the bit
shifted out is set, XORs the tap mask into the result. With a maximal-length
tap set the register walks through every nonzero ``width``-bit value before
repeating. The output is NOT cryptographically secure, whatever taps are used.

References:
http://datagenetics.com/blog/november12017/index.html
https://users.ece.cmu.edu/~koopman/lfsr/
https://en.wikipedia.org/wiki/Linear-feedback_shift_register#Galois_LFSRs
"""
import itertools
import logging
import numbers
import sys

import numpy

from galoislfsr.db import max_len_lfsr_taps
from galoislfsr.errors import (
    ConfigError,
    InvalidSeed,
    InvalidStopValue,
    InvalidTaps,
    InvalidWidth,
    LFSRError,
    NoDefaultTaps,
    StopValueAlreadySet,
    UnsafeDefaultsNotEnabled,
    UnsafeTapsRejected,
)

__all__ = [
    'GaloisLFSR', 'galois_step', 'galois_sequence', 'measure_period',
    'taps_to_mask', 'mask_to_taps', 'default_mask', 'resolve_taps', 'MAX_WIDTH',
    'LFSRError', 'ConfigError', 'InvalidWidth', 'InvalidSeed', 'InvalidTaps',
    'UnsafeDefaultsNotEnabled', 'NoDefaultTaps', 'UnsafeTapsRejected',
    'InvalidStopValue', 'StopValueAlreadySet',
]

log = logging.getLogger(__name__)

# Widest register whose values still fit the native signed word.
MAX_WIDTH = sys.maxsize.bit_length()


def galois_step(value, mask):
    """Return the value following `value` for the tap `mask`.

    >>> galois_step(0b0001, 0b1100)
    12
    >>> galois_step(0b1100, 0b1100)
    6
    """
    if value & 1:
        return (value >> 1) ^ mask
    return value >> 1


def galois_sequence(mask, seed=1):
    """Galois LFSR as an endless generator.

    The seed itself is not yielded; the first value is the step after it.

    Example: mask = 0b1100 (taps [4, 3]), seed = 0b0001:

    cycle state
      0    1100
      1    0110
      2    0011
      3    1101
      4    1010
      5    0101
     ...
     14    0001

    >>> prng = galois_sequence(taps_to_mask([4, 3]))
    >>> [next(prng) for i in range(16)]
    [12, 6, 3, 13, 10, 5, 14, 7, 15, 11, 9, 8, 4, 2, 1, 12]
    """
    state = seed
    while True:
        state = galois_step(state, mask)
        yield state


def taps_to_mask(taps):
    """Converts 1-indexed tap positions to the corresponding feedback mask.

    Example:
        Taps [4, 3] set bits 3 and 2, i.e. the mask 0b1100

    >>> taps_to_mask([4, 3])
    12
    """
    mask = 0
    for tap in taps:
        mask |= 1 << (tap - 1)
    return mask


def mask_to_taps(mask):
    """Converts a feedback mask to its 1-indexed tap positions, highest first.

    >>> mask_to_taps(0b1100)
    [4, 3]
    """
    return list(reversed([i + 1 for i, x in enumerate(reversed(bin(mask)[2:])) if x == '1']))


def default_mask(width):
    """Mask of the well-known maximal-length taps for `width`, or None."""
    taps = max_len_lfsr_taps.get(width)
    if not taps:
        return None
    return taps_to_mask(taps)


def measure_period(cntr):
    """Measures how many distinct values a counter yields before repeating.
    """
    seen = set()
    while True:
        x = next(cntr)
        if x in seen:
            break
        seen.add(x)
    return len(seen)


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_width(width):
    if not _is_integer(width):
        raise InvalidWidth('Invalid type for width: expecting integer, got %s' % type(width).__name__)
    if width < 1:
        raise InvalidWidth('width must be at least 1 bit, got %d' % width)
    if width > MAX_WIDTH:
        raise InvalidWidth('This environment does not support %d-bit LFSRs (maximum is %d)' % (width, MAX_WIDTH))
    return int(width)


def _check_seed(seed, width):
    if not _is_integer(seed):
        raise InvalidSeed('Invalid type for seed: expecting integer, got %s' % type(seed).__name__)
    if seed <= 0:
        raise InvalidSeed('seed must be greater than 0, got %d' % seed)
    if seed >> width:
        raise InvalidSeed('seed 0x%X is larger than %d bits' % (seed, width))
    return int(seed)


def resolve_taps(width, taps=None, allow_unsafe_defaults=False):
    """Validate a tap specification for a `width`-bit register and return its mask.

    `taps` is either an integer mask or an iterable of 1-indexed bit positions.
    When it is None the default table entry for `width` is used, which is only
    allowed with `allow_unsafe_defaults`. Without that opt-in, taps that happen
    to equal the default entry are refused as well.

    >>> resolve_taps(8, [8, 7, 3, 2])
    198
    >>> resolve_taps(4, allow_unsafe_defaults=True)
    12
    """
    known = default_mask(width)
    if taps is None:
        if not allow_unsafe_defaults:
            raise UnsafeDefaultsNotEnabled(
                'You must specify custom taps for %d bits, or explicitly allow the unsafe defaults' % width)
        if known is None:
            raise NoDefaultTaps('No default taps for %d bits' % width)
        log.debug('adopting default taps %r for %d bits', max_len_lfsr_taps[width], width)
        return known

    if _is_integer(taps):
        mask = int(taps)
        if mask <= 0:
            raise InvalidTaps('taps mask must be greater than 0, got %d' % mask)
        if mask >> width:
            raise InvalidTaps('taps mask 0x%X is larger than %d bits' % (mask, width))
    elif isinstance(taps, (str, bytes, bytearray)) or not hasattr(taps, '__iter__'):
        raise InvalidTaps('Invalid type for taps: expecting integer or sequence of bit positions, got %s'
                          % type(taps).__name__)
    else:
        taps = list(taps)
        if not taps:
            raise InvalidTaps('at least one tap position is required')
        for tap in taps:
            if not _is_integer(tap):
                raise InvalidTaps('tap positions must be integers, got %r' % (tap,))
            if tap < 1:
                raise InvalidTaps('tap positions start at 1, got %d' % tap)
            if tap > width:
                raise InvalidTaps('tap position %d is beyond the %d bits of this LFSR' % (tap, width))
        mask = taps_to_mask(int(tap) for tap in taps)

    if mask == known and not allow_unsafe_defaults:
        raise UnsafeTapsRejected(
            'These taps match the default ones for %d bits and are not safe to use in production' % width)
    return mask


class GaloisLFSR(object):
    """A `width`-bit Galois LFSR started from `seed`.

    `taps` is an integer mask or a list of 1-indexed bit positions. Leaving it
    out means the well-known default taps, which have to be asked for with
    `allow_unsafe_defaults=True`; that choice only applies to this register.

    >>> lfsr = GaloisLFSR(4, 1, [4, 3], allow_unsafe_defaults=True)
    >>> lfsr.peek()
    12
    >>> lfsr.read(), lfsr.read(), lfsr.read()
    (12, 6, 3)
    >>> lfsr.stop_after_value(10)
    >>> list(lfsr)
    [13, 10]
    >>> lfsr.read() is None
    True

    Instances are not thread-safe.
    """

    def __init__(self, width, seed, taps=None, allow_unsafe_defaults=False):
        width = _check_width(width)
        seed = _check_seed(seed, width)
        mask = resolve_taps(width, taps, allow_unsafe_defaults)
        if mask == default_mask(width):
            log.warning('%d-bit LFSR uses the default taps; its output is trivially predictable', width)
        self._width = width
        self._seed = seed
        self._mask = mask
        self._allow_unsafe_defaults = bool(allow_unsafe_defaults)
        self._value = seed
        self._stop_value = None
        log.debug('created %r', self)

    @property
    def width(self):
        return self._width

    @property
    def seed(self):
        return self._seed

    @property
    def mask(self):
        return self._mask

    @property
    def taps(self):
        return mask_to_taps(self._mask)

    @property
    def value(self):
        """Last value produced (the seed before any read), None once halted."""
        return self._value

    @property
    def stop_value(self):
        return self._stop_value

    @property
    def halted(self):
        return self._value is None

    def peek(self):
        """Return the next value without consuming it, None once halted."""
        if self._value is None:
            return None
        return galois_step(self._value, self._mask)

    def read(self):
        """Advance the register and return the new value, None once halted.

        The stop value, if armed, is still returned; the register halts right
        after it.
        """
        next_value = self.peek()
        if next_value is None:
            return None
        if self._stop_value is not None and next_value == self._stop_value:
            log.debug('%d-bit LFSR reached stop value 0x%X, halting', self._width, next_value)
            self._value = None
        else:
            self._value = next_value
        return next_value

    def stop_after_value(self, value):
        """Halt the register after it returns `value`.

        Arming it with the seed gives exactly one complete cycle, ending with
        the seed. Can only be set once.
        """
        if self._stop_value is not None:
            raise StopValueAlreadySet('A stop value of 0x%X has already been set for this LFSR' % self._stop_value)
        if not _is_integer(value) or value < 0 or value >> self._width:
            raise InvalidStopValue('stop value %r is not a valid %d-bit unsigned integer' % (value, self._width))
        self._stop_value = int(value)
        log.debug('%d-bit LFSR will stop after 0x%X', self._width, self._stop_value)

    def get_restarted(self):
        """Fresh register with the same configuration, without a stop value."""
        return type(self)(self._width, self._seed, self._mask, allow_unsafe_defaults=self._allow_unsafe_defaults)

    def get_period(self):
        """Number of distinct values this configuration yields from the seed.

        Walks the whole cycle, so only practical for small widths.
        """
        return measure_period(galois_sequence(self._mask, self._seed))

    def read_many(self, count):
        """Read up to `count` values into a ``numpy.uint64`` array.

        The array is shorter than `count` when the register halts first.
        """
        if count < 0:
            raise ValueError('count must not be negative, got %d' % count)
        return numpy.fromiter(itertools.islice(self, count), dtype=numpy.uint64)

    def __call__(self):
        while True:
            value = self.read()
            if value is None:
                return
            yield value

    def __iter__(self):
        return self()

    def __next__(self):
        value = self.read()
        if value is None:
            raise StopIteration
        return value

    def __repr__(self):
        state = 'halted' if self._value is None else '0x%X' % self._value
        return '<%s(%dbit, seed=0x%X, mask=0x%X, state=%s)>' % (
            type(self).__name__, self._width, self._seed, self._mask, state)
