#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import logging
import pytest

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from xchain.config import CONFIG as C

log = logging.getLogger(__name__)


def pytest_configure(config):
    logging.basicConfig(level=C["LOG_LEVEL"], format=C["LOG_FORMAT"], datefmt=C["LOG_DATE_FORMAT"])


@pytest.fixture(scope="session")
def dbm() -> Engine:
    """
    In-memory SQlite database for testing
    """
    engine = create_engine(C["DB_URL"], echo=False, future=True)

    if C["DB_DEBUG"]:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.DEBUG)

    return engine
