#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

from typing import (
    Any,
    Iterable,
    Union,
)

import orjson

from xchain.chain import Chain

TData = Union[bytes, bytearray, memoryview, str]


def to_primitive(chain: Chain) -> int:
    """
    Structured form of a chain id: a bare unsigned 16-bit integer

    :param chain: chain id
    :return:
    """
    return Chain.from_u16(chain).to_u16()


def from_primitive(value: Any) -> Chain:
    """
    Read a chain id from its structured form

    :param value: integer read from a structured document
    :return:
    """
    return Chain.from_u16(value)


def _default(obj: Any) -> Any:
    # orjson passes unsupported types here (e.g. sets)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def dumps(obj: Any) -> bytes:
    """
    Serialize to JSON

    Chain values (including unknown ones) are written as plain integers, since
    orjson serializes ``enum.IntEnum`` members by value.

    Note: keys are sorted to get a deterministic output

    :param obj: any JSON compatible object
    :return:
    """
    return orjson.dumps(obj, default=_default, option=orjson.OPT_SORT_KEYS)


def loads_chain(data: TData) -> Chain:
    """
    Deserialize a JSON document holding a single chain id

    :param data: JSON document
    :return:
    """
    return from_primitive(orjson.loads(data))


def loads(data: TData, fields: Iterable[str] = ()) -> Any:
    """
    Deserialize a JSON document and convert the given top-level fields to chain ids

    Example:
    b'{"emitterChain":1,"sequence":7}', fields=["emitterChain"] -> {"emitterChain": Chain.SOLANA, "sequence": 7}

    :param data: JSON document
    :param fields: names of fields holding a chain id
    :return:
    """
    obj = orjson.loads(data)
    for name in fields:
        if name in obj:
            obj[name] = from_primitive(obj[name])
    return obj
