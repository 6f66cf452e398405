from __future__ import annotations

from setuptools import find_packages, setup

install_requires = [
    "numpy",
]

extras_require = {
    "numba": ["numba"],
    "test": ["pytest"],
}

setup(
    name="pyinterp2d",
    version="0.1.0",
    description="Bilinear interpolation on rectangular, non-uniform 2-D grids",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require=extras_require,
)
