#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import logging
import time

log = logging.getLogger(__name__)


def timeit(func: callable) -> callable:
    """
    Decorator for measuring a function's running time

    :param func: function
    :return:
    """
    def measure_time(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start_time
        log.info(f"Processing time of '{func.__qualname__}()': {elapsed:.4f} seconds.")
        return result

    return measure_time
