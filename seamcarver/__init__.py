"""
Content-aware image resizing by seam carving.

Repeatedly finds and removes the minimum-energy seam (a connected
one-pixel-wide path) using the dual-gradient energy.
"""

__version__ = "0.1.0"

from .errors import InvalidArgumentError, IndexOutOfRangeError
from .energy import dual_gradient_energy, pixel_energy
from .seam import dp_seam, remove_seam, seam_energy, validate_seam
from .carver import SeamCarver
from .carving import carve_image, carve_to_size, remove_seams

__all__ = [
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'dual_gradient_energy',
    'pixel_energy',
    'dp_seam',
    'remove_seam',
    'seam_energy',
    'validate_seam',
    'SeamCarver',
    'carve_image',
    'carve_to_size',
    'remove_seams',
]
