from setuptools import find_packages, setup

setup(
    name="cache-properties",
    version="1.0.0",
    packages=find_packages(include=["cache_properties", "cache_properties.*"]),
    install_requires=[line for line in open("requirements-core.txt").read().splitlines() if line],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
)
