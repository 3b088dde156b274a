from setuptools import find_packages, setup

setup(
    name="seqcursor",
    version="0.1.0",
    description="Restartable cursor iterators over sequences and pre-order tree walks",
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=["pydantic>=2", "omegaconf", "typer", "pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["seqcursor-walk=seqcursor.walk:main"]},
)
