"""
Conversions between zoom levels, map scales and world pixel widths
"""

__all__ = [
    'SCALE_DENOMINATORS', 'pixel_width_at_zoom', 'scale_for_zoom', 'zoom_for_scale'
]

import numpy as np

from mapprojection._const import REFERENCE_ZOOM, TILE_SIZE
from mapprojection.utils.logging import warn_once

# Scale denominator for each integer zoom level, 0 through 20
SCALE_DENOMINATORS = tuple(float(2 ** zoom) for zoom in range(REFERENCE_ZOOM + 1))


def _exp2(value: float) -> float:
    """2 ** value, saturating to inf or 0.0 instead of raising"""
    with np.errstate(over='ignore', under='ignore'):
        return float(np.exp2(value))


def scale_for_zoom(zoom: float) -> float:
    """The map scale (1 / denominator) at a zoom level"""
    return _exp2(-zoom)


def zoom_for_scale(scale: float, strict: bool = False) -> float:
    """
    Find the (possibly fractional) zoom level for a map scale.

    The scale's denominator is located within one of the octaves of SCALE_DENOMINATORS
    and interpolated linearly within it, so fractional results are an approximation of
    log2(1 / scale) rather than an exact inverse of scale_for_zoom. Integer zoom levels
    are recovered exactly.

    Args:
        scale:
            The map scale, e.g. the fraction of the world's width that is visible

        strict:
            (Default False) If True, raise a ValueError for scales which fall outside of
            zoom levels 0 through 21 instead of returning 0.

    Returns:
        The zoom level, or 0.0 if the scale is out of range and strict is False
    """
    denominator = 1 / scale if scale else float('inf')

    for zoom, lower in enumerate(SCALE_DENOMINATORS):
        if lower <= denominator <= lower * 2:
            return zoom + (denominator - lower) / lower

    if strict:
        raise ValueError(
            f'Scale {scale} is outside of the supported zoom range '
            f'(0 to {len(SCALE_DENOMINATORS)}).'
        )

    warn_once(
        'zoom_for_scale() received a scale outside of the supported zoom range; '
        'returning zoom 0. (this warning will not repeat)'
    )
    return 0.


def pixel_width_at_zoom(zoom: float) -> float:
    """The width, in pixels, of the entire world at a zoom level"""
    return _exp2(zoom) * TILE_SIZE
