import numpy as np


def dot(a, b):
    """Compute the dot products over the last axes of two arrays of vectors

    Parameters
    ----------
    a : ndarray, [..., n], float
        array of vectors
    b : ndarray, [..., n], float
        array of vectors

    Returns
    -------
    ndarray, [...], float
        dot products over the last axes of a and b
    """
    return np.einsum('...i,...i->...', a, b)


def adjoint(A):
    """Compute 3x3 adjoint matrices

    Parameters
    ----------
    A : ndarray, [..., 3, 3]
        (array of) 3 x 3 matrices

    Returns
    -------
    AI : ndarray, [..., 3, 3]
        adjoints of (array of) 3 x 3 matrices, such that dot(AI, A) is the determinant

    """
    A = np.asarray(A, dtype=np.float64)
    AI = np.empty_like(A)
    for i in range(3):
        AI[..., i, :] = np.cross(A[..., i-2, :], A[..., i-1, :])
    return AI


def determinant(A):
    """Determinants of 3x3 matrices, by expansion along the first row

    Parameters
    ----------
    A : ndarray, [..., 3, 3]
        (array of) 3 x 3 matrices

    Returns
    -------
    ndarray, [...], float
    """
    A = np.asarray(A, dtype=np.float64)
    return dot(A[..., 0, :], np.cross(A[..., 1, :], A[..., 2, :]))


def inverse_transpose(A):
    """Efficiently compute the inverse-transpose of 3x3 matrices

    Singular matrices do not raise; their inverse-transpose is non-finite

    Parameters
    ----------
    A : ndarray, [..., 3, 3]
        (array of) 3 x 3 matrices

    Returns
    -------
    I : ndarray, [..., 3, 3]
        inverse-transpose of (array of) 3 x 3 matrices

    """
    I = adjoint(A)
    det = determinant(A)
    with np.errstate(divide='ignore', invalid='ignore'):
        return I / det[..., None, None]


def inverse(A):
    """Inverse of 3x3 matrices

    Parameters
    ----------
    A : ndarray, [..., 3, 3]
        (array of) 3 x 3 matrices

    Returns
    -------
    I : ndarray, [..., 3, 3]
        inverses of (array of) 3 x 3 matrices

    """
    return np.swapaxes(inverse_transpose(A), -1, -2)
