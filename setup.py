from setuptools import find_namespace_packages, setup

setup(
    name="treepeek",
    version="0.1.0",
    description="Walk nested JSON/TOML data in the terminal and peek values back out.",
    python_requires=">=3.12",
    packages=find_namespace_packages(include=["treepeek", "treepeek.*"]),
    install_requires=[
        "typer>=0.12",
        "rich>=13.7",
        "textual>=0.80",
        "result>=0.17",
        "structlog>=24.1",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": ["treepeek=treepeek.cli.app:cli"],
    },
)
