#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

from typing import (
    Any,
    Optional,
)

from sqlalchemy import Integer
from sqlalchemy.types import TypeDecorator

from xchain.chain import Chain


class ChainType(TypeDecorator):
    """
    Store a chain id as a plain integer column

    Unknown chain ids are preserved, the column holds the numeric value.

    Usage:

    class Message(Base):
        __tablename__ = "message"

        id = Column(Integer, primary_key=True)
        emitter_chain = Column(ChainType, nullable=False)

    """
    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Optional[Chain], dialect: Any) -> Optional[int]:
        if value is None:
            return None
        return Chain.from_u16(value).to_u16()

    def process_result_value(self, value: Optional[int], dialect: Any) -> Optional[Chain]:
        if value is None:
            return None
        return Chain.from_u16(value)
