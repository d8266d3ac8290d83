"""Simplicial element arrays; index conventions and validation

"""
import numpy as np

# dtypes enforced for indices referring to elements;
# 16 bits is too few for many applications, but 32 should suffice for almost all
# these types are used globally throughout the package; changing them here should change them everywhere
index_dtype = np.int32


class SimplexException(Exception):
    pass


class UnsupportedSimplexSize(SimplexException, ValueError):
    """Element array does not describe triangles or tetrahedra"""
    def __init__(self, n_corners):
        self.n_corners = n_corners
        super(UnsupportedSimplexSize, self).__init__(
            'Simplex size ({}) not supported'.format(n_corners))


class IndexOutOfRange(SimplexException, IndexError):
    pass


class DegenerateElement(SimplexException, ArithmeticError):
    """Raised for elements whose weights are not finite

    Attributes
    ----------
    elements : ndarray, [n_degenerate], int
        indices of the offending elements
    """
    def __init__(self, elements):
        self.elements = np.asarray(elements, dtype=index_dtype)
        super(DegenerateElement, self).__init__(
            '{} degenerate element(s): {}'.format(len(self.elements), self.elements.tolist()))


def as_simplices(simplices, n_vertices):
    """Validate an array of simplices against the vertices it indexes

    Parameters
    ----------
    simplices : array_like, [n_simplices, n_corners], int
        vertex indices of each simplex
    n_vertices : int
        number of vertices the simplices may refer to

    Returns
    -------
    simplices : ndarray, [n_simplices, n_corners], index_dtype

    Raises
    ------
    UnsupportedSimplexSize
        if simplices is not a 2d array
    IndexOutOfRange
        if simplices is not of integer type, or refers to non-existing vertices
    """
    simplices = np.asarray(simplices)
    if simplices.ndim != 2:
        raise UnsupportedSimplexSize(simplices.shape[-1] if simplices.ndim else 0)
    if simplices.size == 0:
        return simplices.astype(index_dtype)
    if not np.issubdtype(simplices.dtype, np.integer):
        raise IndexOutOfRange('simplices should be of integer type; got {}'.format(simplices.dtype))
    lo, hi = simplices.min(), simplices.max()
    if lo < 0 or hi >= n_vertices:
        raise IndexOutOfRange(
            'simplices refer to vertices in range [{}, {}]; only {} vertices exist'.format(lo, hi, n_vertices))
    return simplices.astype(index_dtype)
