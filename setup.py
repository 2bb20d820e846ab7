import pathlib
import re
import sys

from setuptools import setup

if sys.version_info < (3, 8):
    raise RuntimeError("cookiestr requires Python 3.8+")


HERE = pathlib.Path(__file__).parent

txt = (HERE / "cookiestr" / "__init__.py").read_text("utf-8")
try:
    version = re.findall(r'^__version__ = "([^"]+)"\r?$', txt, re.M)[0]
except IndexError:
    raise RuntimeError("Unable to determine version.")


install_requires = [
    "attrs>=17.3.0",
    "multidict>=4.5,<7.0",
]

tests_require = [
    "pytest",
    "pytest-mock",
]


setup(
    name="cookiestr",
    version=version,
    description="Cookie header string parsing and emitting",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
    ],
    license="Apache 2",
    packages=["cookiestr"],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={"test": tests_require},
    entry_points={"console_scripts": ["cookiestr = cookiestr.cli:main"]},
    include_package_data=True,
)
