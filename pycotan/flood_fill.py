"""Flood fill of sparse scalar data on a regular 3d grid

Given a field with values known only on some samples (for instance, a narrow band of
signed distances around a surface), every connected region of unknown samples is given the
value of a known sample on its border. If the known data forms a consistently signed band,
the filled regions thus end up with the correct sign.
"""

import logging

import numpy as np
import numpy_indexed as npi
from scipy import ndimage

logger = logging.getLogger(__name__)


def _borders(unknown):
    """Yield pairs of slices selecting unknown samples and their direct neighbours along each axis"""
    for axis in range(unknown.ndim):
        lo = [slice(None)] * unknown.ndim
        hi = [slice(None)] * unknown.ndim
        lo[axis] = slice(None, -1)
        hi[axis] = slice(1, None)
        yield tuple(lo), tuple(hi)
        yield tuple(hi), tuple(lo)


def flood_fill(shape, field):
    """Fill the nans of a scalar field on a grid

    Parameters
    ----------
    shape : tuple of int, (nx, ny, nz)
        resolution of the grid
    field : ndarray, [nx * ny * nz], float
        scalar values, with x varying fastest and z slowest; nan for unknown samples

    Returns
    -------
    ndarray, [nx * ny * nz], float
        copy of field, where each 6-connected component of nans is filled with the value of
        the known sample adjacent to it that comes first in memory order.
        Components without any known neighbour remain nan.
    """
    shape = tuple(int(s) for s in shape)
    if len(shape) != 3:
        raise ValueError('expected a 3d grid shape; got {}'.format(shape))
    field = np.array(field, dtype=np.float64).ravel()
    if field.size != np.prod(shape):
        raise ValueError('field of size {} does not match grid of shape {}'.format(field.size, shape))

    grid = field.reshape(shape[::-1])
    unknown = np.isnan(grid)
    labels, n_components = ndimage.label(unknown)
    if n_components == 0:
        return field

    index = np.arange(grid.size).reshape(grid.shape)
    components, sources = [], []
    for u, k in _borders(unknown):
        border = unknown[u] & ~unknown[k]
        components.append(labels[u][border])
        sources.append(index[k][border])
    components = np.concatenate(components)
    sources = np.concatenate(sources)

    fill = np.full(n_components + 1, np.nan)
    if len(components):
        label, first = npi.group_by(components).min(sources)
        fill[label] = field[first]
    grid[unknown] = fill[labels[unknown]]

    logger.debug(
        'Flood filled %d samples in %d components; %d remain unknown',
        unknown.sum(), n_components, np.isnan(grid).sum())
    return field
