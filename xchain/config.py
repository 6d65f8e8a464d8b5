#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import os
import logging


DEFAULT = {
    # Logging settings
    "LOG_LEVEL": logging.INFO,
    "LOG_FORMAT": "%(asctime)s.%(msecs)04d %(levelname)-5s [%(threadName)-10s %(process)5d] %(name)s: %(message)s",
    "LOG_DATE_FORMAT": "%H:%M:%S",

    # Wire settings
    # Note: the embedding codec owns the byte order, the protocol frames use "big"
    "WIRE_BYTE_ORDER": os.getenv("XCHAIN_WIRE_BYTE_ORDER", "big"),

    # Database settings
    "DB_URL": os.getenv("XCHAIN_DB_URL", "sqlite:///:memory:"),
    "DB_DEBUG": False,
}

CONFIG = dict(DEFAULT)
