from setuptools import setup, find_packages

setup(
    name="polyfinder",
    version="1.0",
    description="PolyFinder: polynomial regression with automatic degree selection",
    author="marcu",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    install_requires=["numpy", "polars", "tqdm"],
    extras_require={"test": ["pytest"]},
)
