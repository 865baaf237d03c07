"""
The seam carver: owns a picture and shrinks it one seam at a time.
"""

import torch

from .energy import dual_gradient_energy, pixel_energy
from .errors import InvalidArgumentError
from .seam import SeamLike, dp_seam, remove_seam


class SeamCarver:
    """
    Content-aware resizing of a single picture.

    The carver keeps its own copy of the picture; callers construct it,
    then alternate ``find_*_seam`` and ``remove_*_seam`` until the picture
    reaches the size they want, and read the result with ``picture()``.

    Not thread-safe: removal replaces the internal picture, so concurrent
    callers must serialise access themselves.

    Args:
        picture: RGB picture (3, H, W) as a tensor, numpy array or nested
            lists. Integer values in [0, 255] or normalized floats.

    Raises:
        InvalidArgumentError: if picture is None or not a non-empty
            (3, H, W) array of finite values.
    """

    def __init__(self, picture):
        if picture is None:
            raise InvalidArgumentError("Picture is None")

        try:
            picture = torch.as_tensor(picture)
        except (TypeError, ValueError, RuntimeError) as e:
            raise InvalidArgumentError(f"Cannot read picture: {e}") from e

        if picture.dim() != 3 or picture.shape[0] != 3:
            raise InvalidArgumentError(
                f"Picture must have shape (3, H, W), got {tuple(picture.shape)}")
        if picture.shape[1] == 0 or picture.shape[2] == 0:
            raise InvalidArgumentError(
                f"Picture must be at least 1x1, got {tuple(picture.shape)}")
        if picture.dtype.is_floating_point and not torch.isfinite(picture).all():
            raise InvalidArgumentError("Picture contains inf or NaN values")

        # as_tensor may share memory with the caller's array
        self._picture = picture.clone()

    def picture(self) -> torch.Tensor:
        """Copy of the current picture (3, H, W)."""
        return self._picture.clone()

    def width(self) -> int:
        return self._picture.shape[2]

    def height(self) -> int:
        return self._picture.shape[1]

    def energy(self, x: int, y: int) -> float:
        """Dual-gradient energy of the pixel at column x, row y."""
        return pixel_energy(self._picture, x, y)

    def energy_map(self) -> torch.Tensor:
        """Energy of every pixel (H, W), recomputed from the current picture."""
        return dual_gradient_energy(self._picture)

    def find_vertical_seam(self) -> torch.Tensor:
        """Column index per row of the minimum-energy top-to-bottom seam."""
        return dp_seam(self.energy_map(), direction='vertical')

    def find_horizontal_seam(self) -> torch.Tensor:
        """Row index per column of the minimum-energy left-to-right seam."""
        return dp_seam(self.energy_map(), direction='horizontal')

    def remove_vertical_seam(self, seam: SeamLike) -> None:
        """Remove a vertical seam, making the picture one column narrower.

        Raises:
            InvalidArgumentError: if the seam is invalid or the picture is
                already one column wide. The picture is unchanged.
        """
        self._picture = remove_seam(self._picture, seam, direction='vertical')

    def remove_horizontal_seam(self, seam: SeamLike) -> None:
        """Remove a horizontal seam, making the picture one row shorter.

        Raises:
            InvalidArgumentError: if the seam is invalid or the picture is
                already one row tall. The picture is unchanged.
        """
        self._picture = remove_seam(self._picture, seam, direction='horizontal')

    def __repr__(self):
        return f"SeamCarver(width={self.width()}, height={self.height()})"
