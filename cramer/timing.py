# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import time
from contextlib import contextmanager

_logger = logging.getLogger(__name__)


class Stopwatch:
    elapsed: float

    def __init__(self):
        self.elapsed = 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.elapsed:.6f} s)"


@contextmanager
def timeit_logger(logger=None, name=""):
    """
    Time the enclosed block and log the wall time at INFO level.

    >>> with timeit_logger(name="solve") as sw:
    ...     pass
    >>> sw.elapsed >= 0
    True
    """
    if logger is None:
        logger = _logger
    sw = Stopwatch()
    t0 = time.perf_counter()
    try:
        yield sw
    finally:
        sw.elapsed = time.perf_counter() - t0
        text = f"Elapsed time ({name})" if name else "Elapsed time"
        logger.info(f"{text}: {sw.elapsed:.6f} s")
