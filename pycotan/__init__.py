"""
Cotangent weights of simplicial meshes in python

Computes the per-element weights from which discrete Laplace-Beltrami and stiffness matrices
are assembled; for triangle meshes as well as tetrahedral meshes.

As throughout, all operations are fully vectorized over the elements of the mesh.
"""
