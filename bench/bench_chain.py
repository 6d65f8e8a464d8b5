#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import logging
import pickle
import sys

import orjson

import xchain.serialize
import xchain.wire
from xchain.chain import (
    Chain,
    U16_MAX,
)
from xchain.config import CONFIG as C
from xchain.util.misc import timeit

log = logging.getLogger(__name__)


@timeit
def bench_chain(num: int = 10) -> int:
    logging.basicConfig(level=logging.DEBUG, format=C["LOG_FORMAT"], datefmt=C["LOG_DATE_FORMAT"])

    values = list(range(U16_MAX + 1))
    chains = [Chain.from_u16(v) for v in values]
    texts = [str(c) for c in chains]
    frames = [xchain.wire.pack(c) for c in chains]

    data_dump_pickle = pickle.dumps(chains)
    data_dump_orjson = xchain.serialize.dumps(chains)

    @timeit
    def decode_u16():
        for _ in range(num):
            for v in values:
                Chain.from_u16(v)

    @timeit
    def parse_text():
        for _ in range(num):
            for t in texts:
                Chain.parse(t)

    @timeit
    def format_text():
        for _ in range(num):
            for c in chains:
                str(c)

    @timeit
    def unpack_wire():
        for _ in range(num):
            for f in frames:
                xchain.wire.unpack(f)

    @timeit
    def load_pickle():
        for _ in range(num):
            pickle.loads(data_dump_pickle)

    @timeit
    def load_orjson():
        for _ in range(num):
            [xchain.serialize.from_primitive(v) for v in orjson.loads(data_dump_orjson)]

    decode_u16()
    parse_text()
    format_text()
    unpack_wire()
    load_pickle()
    load_orjson()

    return 0


if __name__ == "__main__":
    sys.exit(bench_chain())
