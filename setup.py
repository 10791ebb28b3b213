""" ecdhlib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecdhlib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecdhlib.name,
    version=ecdhlib.__version__,
    license=ecdhlib.__license__,
    author=ecdhlib.__author__,
    author_email=ecdhlib.__author_email__,
    description="Elliptic curve Diffie-Hellman key agreement from first principles",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves ecdh diffie-hellman prime-field "
        "sec1 secp192k1 secp192r1 ansi-x9.63-kdf"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
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
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
