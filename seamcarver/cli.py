"""
Command-line seam carving.

    python -m seamcarver picture.png --width 300 --output carved.png

Without --width/--height, removes two horizontal and then two vertical seams.
"""

import argparse
import sys

from .carver import SeamCarver
from .carving import remove_seams
from .errors import InvalidArgumentError
from .picture import load_picture, save_picture, show_picture, visualize_seam
from .seam import seam_energy


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='seamcarver',
        description='Shrink a picture by removing minimum-energy seams.')
    parser.add_argument('image', help='Input picture file')
    parser.add_argument('--width', type=int, default=None,
                        help='Target width (default: current width - 2)')
    parser.add_argument('--height', type=int, default=None,
                        help='Target height (default: current height - 2)')
    parser.add_argument('--output', '-o', default=None,
                        help='Where to save the carved picture')
    parser.add_argument('--seams-output', default=None,
                        help='Where to save the original picture with its first '
                             'vertical and horizontal seams drawn in red')
    parser.add_argument('--progress-every', type=int, default=20,
                        help='Report progress every N seams')
    parser.add_argument('--show', action='store_true',
                        help='Display the carved picture')
    return parser.parse_args(argv)


def _report_progress(direction, every):
    def report(done, total):
        if every and done % every == 0:
            print(f"  Removed {done}/{total} {direction} seams")
    return report


def run(args):
    print(f"Loading {args.image}...")
    carver = SeamCarver(load_picture(args.image))
    W, H = carver.width(), carver.height()
    print(f"Width: {W}")
    print(f"Height: {H}")
    if args.show:
        show_picture(carver.picture(), title=f"{W} x {H}")

    energy = carver.energy_map()
    h_seam = carver.find_horizontal_seam()
    v_seam = carver.find_vertical_seam()
    print(f"Horizontal seam: {' '.join(str(i) for i in h_seam.tolist())} "
          f"(energy {seam_energy(energy, h_seam, 'horizontal'):.2f})")
    print(f"Vertical seam: {' '.join(str(i) for i in v_seam.tolist())} "
          f"(energy {seam_energy(energy, v_seam, 'vertical'):.2f})")

    if args.seams_output:
        with_seams = visualize_seam(carver.picture(), v_seam, 'vertical')
        with_seams = visualize_seam(with_seams, h_seam, 'horizontal')
        save_picture(with_seams, args.seams_output)
        print(f"Saved: {args.seams_output}")

    width = max(W - 2, 1) if args.width is None else args.width
    height = max(H - 2, 1) if args.height is None else args.height
    if not 1 <= width <= W:
        raise InvalidArgumentError(f"Target width {width} not in [1, {W}]")
    if not 1 <= height <= H:
        raise InvalidArgumentError(f"Target height {height} not in [1, {H}]")

    print(f"Removing {H - height} horizontal and {W - width} vertical seams...")
    remove_seams(carver, H - height, 'horizontal',
                 progress=_report_progress('horizontal', args.progress_every))
    remove_seams(carver, W - width, 'vertical',
                 progress=_report_progress('vertical', args.progress_every))
    print(f"New width: {carver.width()}")
    print(f"New height: {carver.height()}")

    if args.output:
        save_picture(carver.picture(), args.output)
        print(f"Saved: {args.output}")
    if args.show:
        show_picture(carver.picture(), title=f"{carver.width()} x {carver.height()}")


def main(argv=None):
    args = parse_args(argv)
    try:
        run(args)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
