"""
Seam computation and removal.

The minimum-energy seam is a shortest path on a DAG layered by row: each
pixel links to the (up to) three pixels below it. Because edges only go from
row r to row r+1, one top-to-bottom sweep relaxes every edge in order and no
priority queue is needed.
"""

import torch
from typing import Sequence, Union

from .errors import InvalidArgumentError

SeamLike = Union[torch.Tensor, Sequence[int]]


def dp_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Compute the minimum-energy seam by dynamic programming.

    Ties are resolved towards the lowest index, both when picking the
    predecessor of a pixel and when picking the end of the seam, so results
    are reproducible.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    if direction == 'vertical':
        return _dp_vertical(energy)
    elif direction == 'horizontal':
        # Horizontal seam in the energy map == vertical seam in its transpose
        return _dp_vertical(energy.t())
    else:
        raise ValueError(f"Invalid direction: {direction}")


def _dp_vertical(energy: torch.Tensor) -> torch.Tensor:
    H, W = energy.shape
    device = energy.device
    inf = float('inf')

    dist_to = torch.full((H, W), inf, dtype=energy.dtype, device=device)
    edge_to = torch.zeros(H, W, dtype=torch.long, device=device)

    dist_to[0] = energy[0]
    edge_to[0] = torch.arange(W, device=device)

    cols = torch.arange(W, device=device)

    for r in range(1, H):
        prev = dist_to[r - 1]
        below = energy[r]

        # Candidates from up-left, straight up and up-right, in that order
        candidates = torch.full((3, W), inf, dtype=energy.dtype, device=device)
        candidates[0, 1:] = prev[:-1] + below[1:]
        candidates[1] = prev + below
        candidates[2, :-1] = prev[1:] + below[:-1]

        # argmin returns the first minimum: lowest predecessor column wins
        choice = torch.argmin(candidates, dim=0)
        dist_to[r] = candidates.gather(0, choice.unsqueeze(0)).squeeze(0)
        edge_to[r] = cols + choice - 1

    seam = torch.zeros(H, dtype=torch.long, device=device)
    col = torch.argmin(dist_to[H - 1]).item()
    for r in range(H - 1, -1, -1):
        seam[r] = col
        col = edge_to[r, col].item()

    return seam


def seam_energy(energy: torch.Tensor, seam: SeamLike,
                direction: str = 'vertical') -> float:
    """Total energy of the pixels along a seam."""
    seam = torch.as_tensor(seam, dtype=torch.long, device=energy.device)
    if direction == 'vertical':
        idx = torch.arange(energy.shape[0], device=energy.device)
        return energy[idx, seam].sum().item()
    elif direction == 'horizontal':
        idx = torch.arange(energy.shape[1], device=energy.device)
        return energy[seam, idx].sum().item()
    else:
        raise ValueError(f"Invalid direction: {direction}")


def validate_seam(seam: SeamLike, height: int, width: int,
                  direction: str = 'vertical') -> torch.Tensor:
    """
    Check that a seam can be removed from a height x width picture.

    Args:
        seam: Seam indices (tensor or sequence of ints)
        height, width: picture dimensions
        direction: 'vertical' or 'horizontal'

    Returns:
        The seam as a 1-D long tensor on the CPU

    Raises:
        InvalidArgumentError: if the seam is missing or malformed, or the
            picture is already one pixel wide (vertical) / tall (horizontal).
    """
    if direction == 'vertical':
        length, extent = height, width
    elif direction == 'horizontal':
        length, extent = width, height
    else:
        raise ValueError(f"Invalid direction: {direction}")

    if seam is None:
        raise InvalidArgumentError("Seam is None")

    try:
        seam = torch.as_tensor(seam).cpu()
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidArgumentError(f"Seam is not a sequence of ints: {e}") from e

    if seam.dim() != 1 or seam.dtype.is_floating_point or seam.dtype.is_complex \
            or seam.dtype == torch.bool:
        raise InvalidArgumentError("Seam must be a 1-D sequence of ints")

    if extent == 1:
        raise InvalidArgumentError(
            f"Cannot remove a {direction} seam from a picture of size "
            f"{width}x{height}")

    if seam.numel() != length:
        raise InvalidArgumentError(
            f"{direction.capitalize()} seam has length {seam.numel()}, "
            f"expected {length}")

    seam = seam.long()
    if (seam < 0).any() or (seam > extent - 1).any():
        raise InvalidArgumentError(
            f"Seam index out of range [0, {extent - 1}]: {seam.tolist()}")

    if length > 1 and (seam[1:] - seam[:-1]).abs().max().item() > 1:
        raise InvalidArgumentError(
            f"Adjacent seam indices differ by more than 1: {seam.tolist()}")

    return seam


def remove_seam(image: torch.Tensor, seam: SeamLike,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    The seam is validated first; the input image is never modified.

    Args:
        image: Image tensor (C, H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one row/column removed
    """
    C, H, W = image.shape
    seam = validate_seam(seam, H, W, direction)

    if direction == 'vertical':
        # Remove one pixel from each row
        carved = torch.zeros(C, H, W - 1, dtype=image.dtype, device=image.device)

        for i in range(H):
            col = seam[i].item()
            carved[:, i, :col] = image[:, i, :col]
            carved[:, i, col:] = image[:, i, col + 1:]

    else:
        # Remove one pixel from each column
        carved = torch.zeros(C, H - 1, W, dtype=image.dtype, device=image.device)

        for j in range(W):
            row = seam[j].item()
            carved[:, :row, j] = image[:, :row, j]
            carved[:, row:, j] = image[:, row + 1:, j]

    return carved
