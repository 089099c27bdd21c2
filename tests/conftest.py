from __future__ import annotations

import os
import random

import numpy as np

DEFAULT_SEED = int(os.getenv("TINY_GRAPHSTATS_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)
