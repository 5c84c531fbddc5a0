from setuptools import setup, find_packages

# Setup the package
setup(
    name="annicorr",
    version="0.1.0",
    description="Finite-geometry asymmetry of Compton scattered annihilation radiation",
    author="Jure Cerar",
    license="GPL-3.0-or-later",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    include_package_data=True,
    extras_require={
        "test": ["pytest"],
    }
)
