import argparse

import pytest

from ansipic.charsets import BLOCKS, DEFAULT
from ansipic.config import RenderOptions


def test_defaults():
    options = RenderOptions(width=10)
    assert options.height is None
    assert options.alpha_threshold == 0
    assert options.ramp == DEFAULT
    assert options.colour is True
    assert options.corrected is False


@pytest.mark.parametrize("threshold", [-1, 256])
def test_threshold_out_of_range(threshold):
    with pytest.raises(ValueError, match="Alpha threshold"):
        RenderOptions(width=1, alpha_threshold=threshold)


def test_empty_ramp():
    with pytest.raises(ValueError, match="ramp"):
        RenderOptions(width=1, ramp="")


def test_from_args_resolves_charset():
    args = argparse.Namespace(
        width=None, height=12, threshold=40, charset="blocks", colour=False, corrected_luminance=True
    )
    options = RenderOptions.from_args(args)
    assert options == RenderOptions(height=12, alpha_threshold=40, ramp=BLOCKS, colour=False, corrected=True)
