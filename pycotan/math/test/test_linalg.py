import numpy as np
import numpy.testing as npt

from pycotan.math import linalg


def test_dot(rng):
    a = rng.normal(size=(5, 3))
    b = rng.normal(size=(5, 3))
    npt.assert_allclose(linalg.dot(a, b), (a * b).sum(axis=1))


def test_determinant(rng):
    A = rng.normal(size=(10, 3, 3))
    npt.assert_allclose(linalg.determinant(A), np.linalg.det(A))


def test_inverse(rng):
    A = rng.normal(size=(10, 3, 3))
    npt.assert_allclose(linalg.inverse(A), np.linalg.inv(A), atol=1e-6)
    npt.assert_allclose(np.einsum('...ij,...jk->...ik', A, linalg.inverse(A)), np.broadcast_to(np.eye(3), A.shape), atol=1e-6)


def test_adjoint():
    A = np.diag([1., 2., 3.])
    npt.assert_allclose(linalg.adjoint(A), np.diag([6., 3., 2.]))
    npt.assert_allclose(linalg.dot(linalg.adjoint(A), A), [6., 6., 6.])


def test_inverse_singular():
    """singular matrices do not raise, but only poison their own entry"""
    A = np.array([
        np.eye(3),
        [[1, 0, 0], [0, 1, 0], [1, 1, 0]],
    ])
    I = linalg.inverse(A)
    npt.assert_allclose(I[0], np.eye(3))
    assert not np.all(np.isfinite(I[1]))
