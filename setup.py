"""Setup script for the social network statistics project."""

from setuptools import find_packages, setup

setup(
    name="socnet-stats",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "polars>=0.19.0",
        "kedro>=0.19.0",
        "networkx>=3.0",
        "matplotlib>=3.7.0",
        "numpy>=1.24.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.0.265",
        ],
    },
    python_requires=">=3.11",
    description="Degree, triangle, density, centrality and component statistics for social network edge lists",
)
