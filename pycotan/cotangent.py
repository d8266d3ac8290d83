"""Cotangent weights of triangle and tetrahedral meshes

The weights returned here are the off-diagonal entries of the per-element stiffness
matrices; scattering them onto the edges given by TRIANGLE_EDGES or TETRAHEDRON_EDGES
and summing yields the cotangent laplacian. The factor 1/2 of the stiffness matrix
is already folded in; it should not be applied again during assembly.
"""

import logging

import numpy as np

from pycotan.geometry import euclidian
from pycotan.topology import index_dtype, as_simplices, UnsupportedSimplexSize, DegenerateElement

logger = logging.getLogger(__name__)


# column k of the triangle weights belongs to the edge opposite corner k
TRIANGLE_EDGES = np.array([[1, 2], [2, 0], [0, 1]], dtype=index_dtype)

# with corners (a, b, c, d); edges bc, ca, ab, da, db, dc
TETRAHEDRON_EDGES = np.array([[1, 2], [2, 0], [0, 1], [3, 0], [3, 1], [3, 2]], dtype=index_dtype)


def cotangent_triangles(corners):
    """Cotangent weights of triangles

    Parameters
    ----------
    corners : ndarray, [n_triangles, 3, n_dim], float
        vertex coordinates of each triangle

    Returns
    -------
    ndarray, [n_triangles, 3], float
        half the cotangent of the angle opposite to each edge, ordered as TRIANGLE_EDGES
    """
    l = euclidian.edge_lengths(corners)
    dbl_area = euclidian.triangle_double_areas(l)
    l2 = l ** 2
    # law of cosines; l1² + l2² - l0² = 2 l1 l2 cos(a0), and dblA = l1 l2 sin(a0)
    numerator = l2.sum(axis=-1, keepdims=True) - 2 * l2
    with np.errstate(divide='ignore', invalid='ignore'):
        return numerator / dbl_area[:, None] / 4.0


def cotangent_tetrahedra(corners):
    """Cotangent weights of tetrahedra

    Following the definition in the appendix of
    ``Interactive Topology-aware Surface Reconstruction``, Sharf et al.

    Parameters
    ----------
    corners : ndarray, [n_tetrahedra, 4, 3], float
        vertex coordinates of each tetrahedron

    Returns
    -------
    weights : ndarray, [n_tetrahedra, 6], float
        off-diagonal terms of the element stiffness matrices, ordered as TETRAHEDRON_EDGES
    diagonal : ndarray, [n_tetrahedra, 4], float
        diagonal terms of the element stiffness matrices
    """
    volume = euclidian.tetrahedron_volumes(corners)
    E = euclidian.tetrahedron_gradients(corners)
    with np.errstate(invalid='ignore', over='ignore'):
        K = np.einsum('...ki,...kj->...ij', E, E) * volume[:, None, None]
    i, j = TETRAHEDRON_EDGES.T
    return K[:, i, j], np.diagonal(K, axis1=-2, axis2=-1)


def cotangent(vertices, simplices, check_degenerate=False):
    """Compute the cotangent weights of a triangle or tetrahedral mesh

    Parameters
    ----------
    vertices : ndarray, [n_vertices, n_dim], float
        vertex positions; n_dim must be 3 for tetrahedra
    simplices : ndarray, [n_simplices, 3 or 4], int
        triangles or tetrahedra, as indices into vertices
    check_degenerate : bool
        if True, raise if any simplex produces non-finite weights;
        if False, such rows are returned as is, and the other rows are unaffected

    Returns
    -------
    ndarray, [n_simplices, 3 or 6], float
        for triangles, column k is the weight of the edge opposite corner k;
        for tetrahedra, columns are ordered as in TETRAHEDRON_EDGES.
        If all tetrahedra have a strictly positive stiffness diagonal,
        the sign of all tetrahedral weights is flipped

    Raises
    ------
    UnsupportedSimplexSize
        if simplices are not triangles or tetrahedra
    IndexOutOfRange
        if simplices refer to non-existing vertices
    DegenerateElement
        if check_degenerate is set and some simplex is degenerate
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    if vertices.ndim != 2:
        raise ValueError('vertices should be a 2d array; got shape {}'.format(vertices.shape))
    n_corners = np.shape(simplices)[-1] if np.ndim(simplices) else 0
    if np.ndim(simplices) != 2 or n_corners not in (3, 4):
        logger.error('Simplex size (%d) not supported', n_corners)
        raise UnsupportedSimplexSize(n_corners)
    simplices = as_simplices(simplices, len(vertices))
    corners = vertices[simplices]

    if n_corners == 3:
        weights = cotangent_triangles(corners)
    else:
        weights, diagonal = cotangent_tetrahedra(corners)
        # the decision to flip depends on the full batch; reduce before touching the weights
        if len(simplices) and np.all(diagonal > 0):
            logger.info('Flipping sign of cotangent, so that cots are positive')
            weights *= -1

    degenerate = np.flatnonzero(~np.all(np.isfinite(weights), axis=1))
    if len(degenerate):
        if check_degenerate:
            raise DegenerateElement(degenerate)
        logger.warning('%d degenerate simplices have non-finite cotangent weights', len(degenerate))
    return weights
