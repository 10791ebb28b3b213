#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecdhlib package."

import logging

name = "ecdhlib"
__version__ = "2022.6.1"
__author__ = "The ecdhlib developers"
__author_email__ = "devs@ecdhlib.org"
__copyright__ = "Copyright (C) 2020-2022 The ecdhlib developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
