"""Some routines for geometric calculations on simplices in euclidian space

All functions are vectorized over any number of leading axes; degenerate simplices
are not special-cased, and yield whatever the floating point arithmetic produces
"""

import numpy as np
import scipy.special

from pycotan.math import linalg


def edge_vectors(vertices):
    """Edge vectors of triangles, numbered after the opposite vertex

    Parameters
    ----------
    vertices : ndarray, [..., 3, n_dim], float
        set of triangles described by the coordinates of its vertices

    Returns
    -------
    ndarray, [..., 3, n_dim], float
        the i-th edge points from vertex i+2 to vertex i+1, modulo 3,
        and is thus opposite to the i-th vertex
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    return np.roll(vertices, -1, axis=-2) - np.roll(vertices, +1, axis=-2)


def edge_lengths(vertices):
    """Edge lengths of triangles, numbered after the opposite vertex

    Parameters
    ----------
    vertices : ndarray, [..., 3, n_dim], float

    Returns
    -------
    ndarray, [..., 3], float
    """
    return np.linalg.norm(edge_vectors(vertices), axis=-1)


def triangle_double_areas(lengths):
    """Twice the area of triangles, from their edge lengths using Heron's formula

    Parameters
    ----------
    lengths : ndarray, [..., 3], float
        edge lengths of each triangle

    Returns
    -------
    ndarray, [...], float
        Note that round-off can make the radicand negative for near-degenerate triangles;
        this is not clamped, and results in nan.
    """
    l = np.asarray(lengths, dtype=np.float64)
    s = l.sum(axis=-1, keepdims=True) / 2
    radicand = s[..., 0] * np.prod(s - l, axis=-1)
    with np.errstate(invalid='ignore'):
        return 2 * np.sqrt(radicand)


def triangle_angles(vertices):
    """Compute interior angles for each triangle-vertex

    Parameters
    ----------
    vertices : ndarray, [..., 3, n_dim], float
        set of triangles described by the coordinates of its vertices in euclidian space

    Returns
    -------
    ndarray, [..., 3], float, radians
        interior angle of each vertex of each triangle
        the i-th angle is the angle corresponding to the i-th vertex of the triangle
    """
    edges = edge_vectors(vertices)
    edges = edges / np.linalg.norm(edges, axis=-1, keepdims=True)
    return np.arccos(-linalg.dot(np.roll(edges, -1, axis=-2), np.roll(edges, +1, axis=-2)))


def tetrahedron_jacobians(vertices):
    """Transposed jacobians of the affine maps from the reference tetrahedron

    Parameters
    ----------
    vertices : ndarray, [..., 4, 3], float
        corners a, b, c, d of each tetrahedron

    Returns
    -------
    ndarray, [..., 3, 3], float
        rows are a - d, b - d, c - d
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    if vertices.shape[-2:] != (4, 3):
        raise ValueError('expected tetrahedra in 3-space; got shape {}'.format(vertices.shape))
    head, tail = np.split(vertices, [3], axis=-2)
    return head - tail


def tetrahedron_gradients(vertices):
    """Gradients of the barycentric coordinates of tetrahedra

    Solves JT . E = [I | -1], with the last column encoding the fourth
    barycentric coordinate as one minus the sum of the others

    Parameters
    ----------
    vertices : ndarray, [..., 4, 3], float
        corners a, b, c, d of each tetrahedron

    Returns
    -------
    ndarray, [..., 3, 4], float
        the i-th column is the gradient of the barycentric coordinate of the i-th corner.
        Singular tetrahedra give non-finite gradients
    """
    rhs = np.concatenate([np.eye(3), -np.ones((3, 1))], axis=1)
    inv = linalg.inverse(tetrahedron_jacobians(vertices))
    with np.errstate(invalid='ignore'):
        return np.einsum('...ij,jk->...ik', inv, rhs)


def unsigned_volume(pts):
    """Unsigned volume of M-simplices embedded in N-dimensional space, from their Gram determinant

    Parameters
    ----------
    pts : ndarray, [..., M + 1, N], float
        coordinates of the corners of each simplex

    Returns
    -------
    ndarray, [...], float
        Points (M == 0) are assigned unit volume
    """
    pts = np.asarray(pts, dtype=np.float64)

    M = pts.shape[-2] - 1
    if M < 0 or M > pts.shape[-1]:
        raise ValueError('array has invalid shape')
    if M == 0:
        return np.ones_like(pts[..., 0, 0])

    head, tail = np.split(pts, [1], axis=-2)
    A = tail - head
    gram = np.einsum('...ji,...ki->...jk', A, A)
    return np.sqrt(np.abs(np.linalg.det(gram))) / scipy.special.factorial(M)


def tetrahedron_volumes(vertices):
    """Unsigned volumes of tetrahedra, as |det(JT)| / 6

    Parameters
    ----------
    vertices : ndarray, [..., 4, 3], float

    Returns
    -------
    ndarray, [...], float
    """
    return np.abs(linalg.determinant(tetrahedron_jacobians(vertices))) / 6
