#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import pytest

import xchain.wire
from xchain import Chain


def test_wire_pack() -> None:
    assert xchain.wire.pack(Chain.ANY) == b"\x00\x00"
    assert xchain.wire.pack(Chain.SOLANA) == b"\x00\x01"
    assert xchain.wire.pack(Chain.from_u16(42)) == b"\x00\x2a"
    assert xchain.wire.pack(Chain.from_u16(0x1234)) == b"\x12\x34"

    assert xchain.wire.pack(Chain.SOLANA, byteorder="little") == b"\x01\x00"
    assert xchain.wire.pack(Chain.from_u16(0x1234), byteorder="little") == b"\x34\x12"


def test_wire_unpack() -> None:
    assert xchain.wire.unpack(b"\x00\x00") is Chain.ANY
    assert xchain.wire.unpack(b"\x00\x01") is Chain.SOLANA
    assert xchain.wire.unpack(b"\x01\x00", byteorder="little") is Chain.SOLANA
    assert xchain.wire.unpack(b"\xff\xff") == Chain.from_u16(65535)

    # field embedded in a larger message
    msg = b"\x01" + b"\x00\x2a" + b"\xde\xad"
    assert xchain.wire.unpack(msg, offset=1) == Chain.from_u16(42)
    assert xchain.wire.unpack(bytearray(msg), offset=1) == Chain.from_u16(42)
    assert xchain.wire.unpack(memoryview(msg), offset=3) == Chain.from_u16(0xdead)


def test_wire_unpack_short() -> None:
    with pytest.raises(ValueError):
        xchain.wire.unpack(b"")

    with pytest.raises(ValueError):
        xchain.wire.unpack(b"\x00")

    with pytest.raises(ValueError):
        xchain.wire.unpack(b"\x00\x01\x02", offset=2)

    with pytest.raises(ValueError):
        xchain.wire.unpack(b"\x00\x01", offset=-1)


def test_wire_byteorder_invalid() -> None:
    with pytest.raises(ValueError):
        xchain.wire.pack(Chain.SOLANA, byteorder="network")

    with pytest.raises(ValueError):
        xchain.wire.unpack(b"\x00\x01", byteorder="network")


def test_wire_isomorphic() -> None:
    for byteorder in ["big", "little"]:
        for i in range(0, 65536, 97):
            c = Chain.from_u16(i)
            data = xchain.wire.pack(c, byteorder=byteorder)
            assert len(data) == xchain.wire.WIDTH
            assert xchain.wire.unpack(data, byteorder=byteorder) is c
