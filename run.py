#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (C) 2022-2022 Riku Block
# All rights reserved.
#
# This file is part of XChain.

import sys

from xchain.cli import main

MIN_PYTHON = (3, 8)
if sys.version_info < MIN_PYTHON:
    sys.exit("Python {}.{} or later is required!".format(*MIN_PYTHON))


# Usage:
#   ./run.py 1 "Unknown(42)" any
#   ./run.py --byteorder little 30

if __name__ == "__main__":
    sys.exit(main())
