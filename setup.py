from setuptools import setup, find_packages

setup(
    name="rubikcage",
    version="0.1.0",
    packages=find_packages(include=["rubikcage", "rubikcage.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "lmdb>=1.4.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rubikcage=rubikcage.cli:main",
        ],
    },
)
