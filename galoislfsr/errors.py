# -*- coding: utf-8 -*-
"""Exceptions raised while configuring a Galois LFSR.

All of them derive from :class:`ConfigError`, which is also a ``ValueError``.
Stepping a register never raises; running past the stop value yields ``None``.
"""


class LFSRError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(LFSRError, ValueError):
    """The register was asked for a configuration it cannot honour."""


class InvalidWidth(ConfigError):
    pass


class InvalidSeed(ConfigError):
    pass


class InvalidTaps(ConfigError):
    pass


class UnsafeDefaultsNotEnabled(ConfigError):
    """No taps were given and the caller did not opt into the default ones."""


class NoDefaultTaps(ConfigError):
    """The default table holds nothing for the requested width."""


class UnsafeTapsRejected(ConfigError):
    """The given taps are the well-known default ones for this width."""


class InvalidStopValue(ConfigError):
    pass


class StopValueAlreadySet(ConfigError):
    pass
