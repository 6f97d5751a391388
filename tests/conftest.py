"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import random

import pytest

from p224.crypto.curve import curve
from p224.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randScalar():
    def _randScalar(low=1, high=None):
        """
        A random int in [low, high]. high defaults to N - 1.
        """
        high = high if high is not None else curve.N.asInt() - 1
        return random.randint(low, high)

    return _randScalar


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()
