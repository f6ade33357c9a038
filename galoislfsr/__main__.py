# -*- coding: utf-8 -*-
"""Print values from a Galois LFSR.

    galoislfsr 16 0xACE1 --taps 16,15,13,4 -n 8
"""
import argparse
import itertools
import logging
import sys

from galoislfsr import GaloisLFSR
from galoislfsr.errors import ConfigError

FORMATS = {
    'dec': lambda value, width: '%d' % value,
    'hex': lambda value, width: '0x%0*X' % ((width + 3) // 4, value),
    'bin': lambda value, width: format(value, '0%db' % width),
}


def parse_int(text):
    """Integer in decimal, hex (0x..) or binary (0b..) notation."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not a decimal, 0x hex or 0b binary integer' % text)


def parse_count(text):
    """Non-negative number of values."""
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not an integer' % text)
    if count < 0:
        raise argparse.ArgumentTypeError('count must not be negative, got %d' % count)
    return count


def parse_taps(text):
    """Comma separated list of 1-indexed tap positions, e.g. '16,15,13,4'."""
    try:
        return [int(tap) for tap in text.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not a comma separated list of bit positions' % text)


def build_argparser():
    p = argparse.ArgumentParser(
        prog='galoislfsr',
        description='Print successive values of a Galois LFSR. Not cryptographically secure.')
    p.add_argument('width', type=parse_int, help='register width in bits')
    p.add_argument('seed', type=parse_int, help='nonzero starting value (decimal, 0x hex or 0b binary)')
    taps = p.add_mutually_exclusive_group()
    taps.add_argument('-t', '--taps', type=parse_taps, help="tap positions, e.g. '16,15,13,4'")
    taps.add_argument('-m', '--mask', type=parse_int, help='tap mask, e.g. 0xB400')
    p.add_argument('--allow-unsafe-defaults', action='store_true',
                   help='allow the well-known default taps for this width')
    p.add_argument('-s', '--stop-after', type=parse_int, default=None,
                   help='halt after this value has been printed')
    p.add_argument('-n', '--count', type=parse_count, default=None,
                   help='number of values to print (default: one full cycle, or until the stop value; '
                        'never more than 2**width - 1 values)')
    p.add_argument('-f', '--format', choices=sorted(FORMATS), default='dec', help='output notation')
    p.add_argument('-v', '--verbose', action='store_true', help='log debug messages')
    return p


def main(argv=None):
    parser = build_argparser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    taps = args.taps if args.taps is not None else args.mask
    try:
        lfsr = GaloisLFSR(args.width, args.seed, taps, allow_unsafe_defaults=args.allow_unsafe_defaults)
        if args.stop_after is not None:
            lfsr.stop_after_value(args.stop_after)
        elif args.count is None:
            lfsr.stop_after_value(lfsr.seed)
    except ConfigError as exc:
        parser.exit(2, '%s: error: %s\n' % (parser.prog, exc))

    render = FORMATS[args.format]
    if args.count is None:
        # every nonzero state at most once; the seed may never come back
        # when the top tap bit is clear
        values = itertools.islice(lfsr, 2**lfsr.width - 1)
    else:
        values = lfsr.read_many(args.count)
    for value in values:
        print(render(int(value), lfsr.width))
    return 0


if __name__ == '__main__':
    sys.exit(main())
