#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import enum
import re

U16_MAX = 0xFFFF

_SPLIT = re.compile(r"[()]")
_DECIMAL = re.compile(r"\+?0*([0-9]{1,5})")

_NAMES = {
    0: "Any",
    1: "Solana",
}


def _iequal(text: str, keyword: str) -> bool:
    """
    ASCII case-insensitive comparison

    :param text: arbitrary input
    :param keyword: lowercase keyword
    :return:
    """
    return text.isascii() and text.lower() == keyword


class InvalidChain(ValueError):
    """
    A text could not be parsed as a chain identifier
    """

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"invalid chain: {self.value}"


@enum.unique
class Chain(enum.IntEnum):
    """
    Identifier of a chain participating in the cross-chain protocol.

    Known chains are regular members. Every other 16-bit value is represented by a
    pseudo-member created on first lookup (``Unknown(n)``), so that any value read
    from a message survives a decode/encode cycle unchanged.

    Note: 0 and 1 always resolve to ``ANY`` and ``SOLANA``, an unknown chain can never
    carry one of those values.

    Usage:

    Chain.from_u16(42)          # <Chain.UNKNOWN: 42>
    Chain.parse("solana")       # <Chain.SOLANA: 1>
    str(Chain.from_u16(42))     # 'Unknown(42)'
    Chain.SOLANA.to_u16()       # 1

    """
    # In the wire format, 0 indicates a message for any destination chain
    ANY = 0
    SOLANA = 1

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not 0 <= value <= U16_MAX:
            return None

        member = int.__new__(cls, value)
        member._name_ = None
        member._value_ = int(value)
        return cls._value2member_map_.setdefault(int(value), member)

    @classmethod
    def from_u16(cls, value: int) -> "Chain":
        """
        Decode a numeric chain id

        :param value: unsigned 16-bit integer
        :return:
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Chain id must be an integer, got {type(value).__name__}")
        if not 0 <= value <= U16_MAX:
            raise ValueError(f"Chain id {value} does not fit in 16 bits")

        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "Chain":
        """
        Parse the textual form of a chain id

        Accepts 'Any', 'Solana' and 'Unknown(<decimal>)', keywords are case-insensitive.
        The decimal value is normalized, e.g. 'Unknown(1)' yields ``SOLANA``.

        :param text: chain id text
        :raises InvalidChain: the text is not a valid chain id
        :return:
        """
        if _iequal(text, "any"):
            return cls.ANY
        if _iequal(text, "solana"):
            return cls.SOLANA

        parts = _SPLIT.split(text)
        if not _iequal(parts[0], "unknown") or len(parts) < 2:
            raise InvalidChain(text)

        m = _DECIMAL.fullmatch(parts[1])
        if m is None:
            raise InvalidChain(text)

        value = int(m.group(1))
        if value > U16_MAX:
            raise InvalidChain(text)

        return cls.from_u16(value)

    @classmethod
    def default(cls) -> "Chain":
        return cls.ANY

    @property
    def is_known(self) -> bool:
        """
        False for chains without a named member
        """
        return self._name_ is not None

    def to_u16(self) -> int:
        return self._value_

    def __str__(self) -> str:
        try:
            return _NAMES[self._value_]
        except KeyError:
            return f"Unknown({self._value_})"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        name = self._name_ if self._name_ is not None else "UNKNOWN"
        return f"<{self.__class__.__name__}.{name}: {self._value_}>"

    def __reduce_ex__(self, proto):
        return self.__class__, (self._value_,)


DEFAULT_CHAIN = Chain.ANY
