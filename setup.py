""" hdkeychain build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import hdkeychain

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=hdkeychain.name,
    version=hdkeychain.__version__,
    license=hdkeychain.__license__,
    author=hdkeychain.__author__,
    author_email=hdkeychain.__author_email__,
    description="BIP32 hierarchical deterministic private key derivation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"hdkeychain": ["_data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    keywords="bitcoin bip32 hd-wallet secp256k1 elliptic-curves base58",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
