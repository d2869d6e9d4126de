import numpy as np
import pytest

from game.meteors.assets import headless_assets
from game.meteors.config import GameConfig
from game.meteors.simulation import Simulation


@pytest.fixture
def assets():
    return headless_assets()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def sim(assets, config):
    return Simulation(assets, config=config, rng=np.random.default_rng(1234))
