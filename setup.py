# setup.py
from setuptools import setup, find_packages

setup(
    name="rsa-keyloader",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyyaml",
        "typer",
        "tabulate",
        "cryptography",
        "pyasn1",
        "pyasn1-modules",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "rsa-keyloader = rsa_keyloader.cli.main:main",
            "rsa_keyloader = rsa_keyloader.cli.main:main"
        ]
    },
)
