#
# Copyright (c) 2023 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os.path
import sys

from decimal import Decimal

import numpy as np
import pytest


here = os.path.dirname(__file__)
sys.path.insert(0, here)


def pytest_addoption(parser):
    parser.addoption("--solver-debug", action="store_true", default=False, help="Log solver iterations")


@pytest.fixture(autouse=True)
def solver_debug(request, caplog):
    if request.config.getoption("--solver-debug"):
        caplog.set_level("DEBUG", logger="solvers")


# One scalar type per representation
@pytest.fixture(params=[np.float32, np.float64, Decimal], ids=['float32', 'float64', 'decimal'])
def scalar(request):
    return request.param
