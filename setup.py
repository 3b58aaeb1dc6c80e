from setuptools import setup, find_packages

setup(
    name="tictactoe-movetree",
    version="0.1.0",
    packages=find_packages(include=["game", "gametree", "endgame", "utils"]),
    py_modules=["config", "main"],
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
