from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "env": ["gymnasium"],  # connectfour.game.env for scripted play
        "test": ["pytest", "gymnasium"],
    },
)
