import numpy as np
import pytest


def pytest_addoption(parser):
    parser.addoption("--seed", action="store", default="0",
        help="seed for the randomly generated meshes")


@pytest.fixture
def rng(request):
    """Random generator, seeded from the command line so that failures on random meshes can be reproduced"""
    return np.random.RandomState(int(request.config.getoption("--seed")))
