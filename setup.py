from setuptools import setup

import os

here = os.path.dirname(os.path.abspath(__file__))

# read version and author without importing the package (dependencies may not be installed yet)
about = {}
with open(os.path.join(here, "lattice_reduction_estimation", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__") or line.startswith("__author__"):
            key, value = line.split("=")
            about[key.strip()] = value.strip().strip('"')

setup(
    name="lattice-reduction-estimation",
    version=about["__version__"],
    packages=["lattice_reduction_estimation"],
    author=about["__author__"],
    description="Cost models for BKZ lattice reduction, root Hermite factor and basis profile simulators",
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
        "doc": ["sphinx", "sphinx_rtd_theme", "sphinxcontrib-bibtex"],
    },
)
