from setuptools import find_packages, setup

setup(
    name='pycotan',
    version='0.1.0',
    description='Cotangent weights of triangle and tetrahedral meshes',
    packages=find_packages(),
    install_requires=[
        'numpy',
        'scipy>=1.9',
        'numpy-indexed',
    ],
    extras_require={
        'test': ['pytest'],
    },
    license='LGPL',
    platforms='any',
    zip_safe=False,
)
