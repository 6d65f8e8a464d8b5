#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

from typing import Optional

from xchain.chain import Chain
from xchain.config import CONFIG as C

# number of bytes of an encoded chain id
WIDTH = 2


def _byteorder(value: Optional[str]) -> str:
    byteorder = C["WIRE_BYTE_ORDER"] if value is None else value
    if byteorder not in ("big", "little"):
        raise ValueError(f"Invalid byte order '{byteorder}'")
    return byteorder


def pack(chain: Chain, byteorder: Optional[str] = None) -> bytes:
    """
    Encode a chain id as a fixed-width field of a binary message

    :param chain: chain id
    :param byteorder: 'big' or 'little', defaults to the configured wire byte order
    :return:
    """
    return Chain.from_u16(chain).to_u16().to_bytes(WIDTH, byteorder=_byteorder(byteorder))


def unpack(data: bytes, offset: int = 0, byteorder: Optional[str] = None) -> Chain:
    """
    Decode a chain id field from a binary message

    :param data: message buffer
    :param offset: position of the field
    :param byteorder: 'big' or 'little', defaults to the configured wire byte order
    :return:
    """
    if offset < 0 or len(data) - offset < WIDTH:
        raise ValueError(f"Buffer too short to read a chain id at offset {offset} (size: {len(data)})")

    value = int.from_bytes(data[offset:offset + WIDTH], byteorder=_byteorder(byteorder))
    return Chain.from_u16(value)
