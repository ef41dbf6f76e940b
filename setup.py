# setup.py
from setuptools import setup, find_packages

setup(
    name="meshdata",
    version="1.0.0",
    description="OBJ / PLY / glTF mesh normalizer (interleaved VBO + triangle EBO)",
    packages=find_packages(include=["meshdata", "meshdata.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "pygltflib>=1.15.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["meshdata=meshdata.__main__:main"],
    },
)
