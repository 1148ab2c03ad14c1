from setuptools import setup, find_packages
import os

setup(
    name="VECtools",
    version="0.1.0",
    author="James R. Beattie and Collaborators",
    author_email="james.beattie@princeton.edu",
    description="Immutable N-dimensional vector arithmetic with zero-padded broadcasting",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
    ],
    extras_require={
        # Test runner
        "test": [
            "pytest>=7.0",
        ],
    },
    zip_safe=False,
)
