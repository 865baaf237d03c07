"""Shared test fixtures for the seam carver test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib
matplotlib.use('Agg')

import torch
import pytest


# Pixels of the 3x4 reference picture, rows top to bottom
REFERENCE_3X4 = [
    [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
    [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
    [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
    [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
]

# Squared dual-gradient energies of REFERENCE_3X4, indexed [y][x]
REFERENCE_3X4_ENERGY_SQ = [
    [20808, 52020, 20808],
    [20808, 52225, 21220],
    [20809, 52024, 20809],
    [20808, 52225, 21220],
]


def make_picture(rows):
    """(3, H, W) int64 picture from rows of (r, g, b) tuples."""
    return torch.tensor(rows, dtype=torch.long).permute(2, 0, 1).contiguous()


def make_random_picture(H, W, seed=0):
    """Random 8-bit picture (3, H, W)."""
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), generator=gen, dtype=torch.uint8)


def all_vertical_paths(H, W):
    """Every connected top-to-bottom path through an H x W grid."""
    for path in itertools.product(range(W), repeat=H):
        if all(abs(a - b) <= 1 for a, b in zip(path, path[1:])):
            yield list(path)


@pytest.fixture
def reference_picture():
    """The 3x4 reference picture."""
    return make_picture(REFERENCE_3X4)


@pytest.fixture
def uniform_picture():
    """3 wide, 4 tall, one solid colour."""
    return torch.full((3, 4, 3), 128, dtype=torch.uint8)
