"""
Picture helpers: load, save, display, and draw a seam on a picture.

Pictures are RGB tensors (3, H, W). Loaded pictures are float32 in [0, 1].
"""

import numpy as np
import torch
from PIL import Image
import matplotlib.pyplot as plt


def load_picture(path: str, device='cpu') -> torch.Tensor:
    """Load image and convert to torch tensor."""
    img = Image.open(path).convert('RGB')
    img_array = np.array(img, dtype=np.float32) / 255.0
    img_tensor = torch.from_numpy(img_array).permute(2, 0, 1).to(device)
    return img_tensor


def _to_uint8(picture: torch.Tensor) -> np.ndarray:
    img_array = picture.permute(1, 2, 0).cpu().numpy()
    if picture.dtype.is_floating_point:
        img_array = (img_array * 255).round()
    return np.ascontiguousarray(img_array.clip(0, 255).astype(np.uint8))


def save_picture(picture: torch.Tensor, path: str):
    """Save a picture tensor as an image file (format from the extension)."""
    Image.fromarray(_to_uint8(picture)).save(path)


def visualize_seam(picture: torch.Tensor, seam: torch.Tensor,
                   direction: str = 'vertical') -> torch.Tensor:
    """Return a copy of the picture with the seam painted red."""
    img_vis = picture.clone()
    full = 1.0 if picture.dtype.is_floating_point else 255
    red = torch.tensor([full, 0, 0], dtype=picture.dtype, device=picture.device)

    if direction == 'vertical':
        for i, col in enumerate(seam):
            img_vis[:, i, int(col)] = red
    elif direction == 'horizontal':
        for j, row in enumerate(seam):
            img_vis[:, int(row), j] = red
    else:
        raise ValueError(f"Invalid direction: {direction}")

    return img_vis


def show_picture(picture: torch.Tensor, title: str = None):
    """Display a picture in a matplotlib window."""
    fig, ax = plt.subplots()
    ax.imshow(_to_uint8(picture))
    ax.axis('off')
    if title:
        ax.set_title(title)
    plt.show()
    plt.close(fig)
