"""
High-level carving functions that run the find/remove loop.
"""

import torch
from typing import Callable, Optional

from .carver import SeamCarver
from .errors import InvalidArgumentError


def remove_seams(carver: SeamCarver, n_seams: int, direction: str = 'vertical',
                 progress: Optional[Callable[[int, int], None]] = None) -> None:
    """
    Remove n_seams seams from the carver's picture in place.

    Args:
        carver: SeamCarver to shrink
        n_seams: Number of seams to remove
        direction: 'vertical' or 'horizontal'
        progress: Called as progress(done, n_seams) after each removal

    Raises:
        InvalidArgumentError: if n_seams is negative
    """
    if direction == 'vertical':
        find, remove = carver.find_vertical_seam, carver.remove_vertical_seam
    elif direction == 'horizontal':
        find, remove = carver.find_horizontal_seam, carver.remove_horizontal_seam
    else:
        raise ValueError(f"Invalid direction: {direction}")

    if n_seams < 0:
        raise InvalidArgumentError(f"Cannot remove {n_seams} seams")

    for i in range(n_seams):
        # Energy is recomputed from the shrunken picture on every find
        remove(find())
        if progress is not None:
            progress(i + 1, n_seams)


def carve_image(image: torch.Tensor, n_seams: int,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove n_seams minimum-energy seams from an image.

    Args:
        image: Image tensor (3, H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image
    """
    carver = SeamCarver(image)
    remove_seams(carver, n_seams, direction)
    return carver.picture()


def carve_to_size(image: torch.Tensor, width: Optional[int] = None,
                  height: Optional[int] = None) -> torch.Tensor:
    """
    Shrink an image to width x height, columns first, then rows.

    Args:
        image: Image tensor (3, H, W)
        width: Target width (None keeps the current width)
        height: Target height (None keeps the current height)

    Returns:
        Carved image (3, height, width)

    Raises:
        InvalidArgumentError: if a target is below 1 or above the current size
    """
    carver = SeamCarver(image)
    W, H = carver.width(), carver.height()
    width = W if width is None else width
    height = H if height is None else height

    if not 1 <= width <= W:
        raise InvalidArgumentError(f"Target width {width} not in [1, {W}]")
    if not 1 <= height <= H:
        raise InvalidArgumentError(f"Target height {height} not in [1, {H}]")

    remove_seams(carver, W - width, 'vertical')
    remove_seams(carver, H - height, 'horizontal')
    return carver.picture()
