#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import logging

from xchain import Chain
from xchain.util import timeit


def test_timeit(caplog) -> None:
    @timeit
    def decode(value: int) -> Chain:
        return Chain.from_u16(value)

    with caplog.at_level(logging.INFO):
        assert decode(42) == Chain.from_u16(42)

    assert "Processing time of 'test_timeit.<locals>.decode()'" in caplog.text
