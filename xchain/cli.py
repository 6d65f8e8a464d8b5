#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

from typing import (
    List,
    Optional,
)

import argparse
import logging

import xchain.wire
from xchain.chain import Chain
from xchain.config import CONFIG as C

log = logging.getLogger(__name__)


def convert(value: str) -> Chain:
    """
    Read a chain id given either as a decimal number or in its textual form

    Examples:
    '42' -> Unknown(42)
    'solana' -> Solana
    'Unknown(1)' -> Solana

    :param value: command line argument
    :return:
    """
    if value.isascii() and value.isdigit():
        return Chain.from_u16(int(value))
    return Chain.parse(value)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the textual, numeric and wire form of each given chain id.

    :param argv: command line arguments (defaults to ``sys.argv``)
    :return: exit status
    """
    parser = argparse.ArgumentParser(
        prog="xchain",
        description="Convert chain ids between their numeric, textual and wire form.",
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="chain id number (e.g. 42) or text (e.g. 'Solana', 'Unknown(42)')",
    )
    parser.add_argument(
        "--byteorder",
        choices=["big", "little"],
        default=C["WIRE_BYTE_ORDER"],
        help="byte order of the wire form (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=C["LOG_LEVEL"], format=C["LOG_FORMAT"], datefmt=C["LOG_DATE_FORMAT"])

    status = 0
    for value in args.values:
        try:
            chain = convert(value)
        except ValueError as e:
            # includes InvalidChain
            log.error(e)
            status = 1
            continue

        wire = xchain.wire.pack(chain, byteorder=args.byteorder)
        print(f"{chain}\t{chain.to_u16()}\t0x{wire.hex()}")

    return status
