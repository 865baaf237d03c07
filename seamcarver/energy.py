"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: squared colour differences between the
left/right and up/down neighbours of each pixel, with neighbours wrapping
around the picture edges so that border pixels need no special case.
"""

import math

import torch

from .errors import IndexOutOfRangeError


def _as_float(picture: torch.Tensor) -> torch.Tensor:
    # Integer pictures would overflow (uint8) when differenced
    return picture.to(torch.float64)


def dual_gradient_energy(picture: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy map of a picture.

    E(x, y) = sqrt(Δx²(x, y) + Δy²(x, y)), where

        Δx² = Σ_c (I_c(x-1, y) - I_c(x+1, y))²
        Δy² = Σ_c (I_c(x, y-1) - I_c(x, y+1))²

    and coordinates wrap cyclically at the borders.

    Args:
        picture: RGB picture tensor (3, H, W)

    Returns:
        Energy map (H, W), float64
    """
    p = _as_float(picture)

    # torch.roll gives the cyclic neighbours in one shot
    left = torch.roll(p, shifts=1, dims=2)
    right = torch.roll(p, shifts=-1, dims=2)
    up = torch.roll(p, shifts=1, dims=1)
    down = torch.roll(p, shifts=-1, dims=1)

    grad_x_sq = ((left - right) ** 2).sum(dim=0)
    grad_y_sq = ((up - down) ** 2).sum(dim=0)

    return torch.sqrt(grad_x_sq + grad_y_sq)


def pixel_energy(picture: torch.Tensor, x: int, y: int) -> float:
    """Dual-gradient energy of the single pixel at column x, row y.

    Raises:
        IndexOutOfRangeError: if (x, y) lies outside the picture.
    """
    _, H, W = picture.shape
    if not (0 <= x < W and 0 <= y < H):
        raise IndexOutOfRangeError(
            f"Pixel ({x}, {y}) outside {W}x{H} picture")

    p = _as_float(picture)
    left = p[:, y, (x - 1) % W]
    right = p[:, y, (x + 1) % W]
    up = p[:, (y - 1) % H, x]
    down = p[:, (y + 1) % H, x]

    grad_x_sq = ((left - right) ** 2).sum().item()
    grad_y_sq = ((up - down) ** 2).sum().item()
    return math.sqrt(grad_x_sq + grad_y_sq)
