from setuptools import setup, find_packages

from skewheap import __version__

setup(
    name="skewheap",
    version=__version__,
    description="Persistent, mergeable priority queues built on skew heaps",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.6",
    license="MIT"
)
