#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the hdkeychain package."

import logging

name = "hdkeychain"
__version__ = "2022.5.3"
__author__ = "The hdkeychain developers"
__author_email__ = "devs@hdkeychain.org"
__copyright__ = "Copyright (C) 2021-2022 The hdkeychain developers"
__license__ = "MIT License"

_LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"


def init_logging(log_level: str = "warning") -> logging.Logger:
    """Initialize package logging with a StreamHandler set to log_level.

    Return the package logger, so that applications can further
    customize it (e.g. adding a FileHandler).
    """
    log = logging.getLogger(__name__)
    log.setLevel(logging.DEBUG)  # handlers do the actual filtering
    formatter = logging.Formatter(_LOG_FORMAT)
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh.setLevel(getattr(logging, log_level.upper()))
    log.addHandler(sh)
    return log
