"""Tests for the command-line driver."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
import torch
from PIL import Image
from seamcarver import cli
from seamcarver.carver import SeamCarver
from seamcarver.cli import main, parse_args
from seamcarver.picture import load_picture, save_picture

from conftest import make_random_picture


@pytest.fixture
def picture_path(tmp_path):
    path = str(tmp_path / 'input.png')
    save_picture(make_random_picture(6, 8, seed=21), path)
    return path


class TestCLI:
    def test_default_removes_two_each_way(self, picture_path, tmp_path, capsys):
        output = str(tmp_path / 'out.png')
        assert main([picture_path, '--output', output]) == 0

        out = capsys.readouterr().out
        assert "Width: 8" in out
        assert "Height: 6" in out
        assert "Vertical seam:" in out
        assert "Horizontal seam:" in out
        assert "New width: 6" in out
        assert "New height: 4" in out
        with Image.open(output) as img:
            assert img.size == (6, 4)

    def test_target_size_and_seams_output(self, picture_path, tmp_path, capsys):
        output = str(tmp_path / 'out.png')
        seams = str(tmp_path / 'seams.png')
        argv = [picture_path, '--width', '3', '--height', '5', '-o', output,
                '--seams-output', seams, '--progress-every', '1']
        assert main(argv) == 0

        out = capsys.readouterr().out
        assert "Removed 5/5 vertical seams" in out
        assert "Removed 1/1 horizontal seams" in out
        with Image.open(output) as img:
            assert img.size == (3, 5)
        with Image.open(seams) as img:
            assert img.size == (8, 6)

    def test_target_too_large(self, picture_path, capsys):
        assert main([picture_path, '--width', '9']) == 1
        assert "Target width 9" in capsys.readouterr().err

    def test_parse_args_defaults(self):
        args = parse_args(['picture.png'])
        assert args.image == 'picture.png'
        assert args.width is None and args.height is None
        assert args.output is None
        assert not args.show

    @pytest.mark.parametrize('seed', range(4))
    def test_default_removes_horizontal_seams_first(self, tmp_path, seed):
        """Default run carves rows, rows, columns, columns in that order."""
        path = str(tmp_path / 'input.png')
        output = str(tmp_path / 'out.png')
        save_picture(make_random_picture(6, 8, seed=seed), path)
        assert main([path, '--output', output]) == 0

        carver = SeamCarver(load_picture(path))
        carver.remove_horizontal_seam(carver.find_horizontal_seam())
        carver.remove_horizontal_seam(carver.find_horizontal_seam())
        carver.remove_vertical_seam(carver.find_vertical_seam())
        carver.remove_vertical_seam(carver.find_vertical_seam())
        assert torch.equal(load_picture(output), carver.picture())

    def test_show_displays_before_and_after(self, picture_path, monkeypatch):
        shown = []
        monkeypatch.setattr(cli, 'show_picture',
                            lambda picture, title=None: shown.append(tuple(picture.shape)))
        assert main([picture_path, '--show']) == 0
        assert shown == [(3, 6, 8), (3, 4, 6)]
