import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from simulation import Simulation


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sim():
    return Simulation(400, 800, rng=random.Random(7))


@pytest.fixture
def running_sim(sim):
    sim.refill()
    return sim
