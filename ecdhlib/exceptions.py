#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

This are only meant to dicriminate between Exceptions being raised
by ecdhlib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecdhlib versions are derived.
"""


class ECDHlibValueError(ValueError):
    pass


class ECDHlibTypeError(TypeError):
    pass


class ECDHlibRuntimeError(RuntimeError):
    pass


class DivisionByZeroError(ECDHlibValueError, ZeroDivisionError):
    "Prime field division with a zero divisor."


class MalformedEncodingError(ECDHlibValueError):
    "Invalid, short, or wrong-alphabet point encoding."


class UnsupportedCurveError(ECDHlibValueError):
    "Unknown curve identifier, raised only on strict lookups."


class RandomnessUnavailableError(ECDHlibRuntimeError):
    "The randomness source failed: key generation cannot proceed."
