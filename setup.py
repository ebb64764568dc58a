import os
import re

from setuptools import setup

ROOT = os.path.dirname(__file__)

with open(os.path.join(ROOT, "README.rst"), "rb") as fd:
    README = fd.read().decode("utf8")

with open(os.path.join(ROOT, "georecords", "__init__.py"), "rb") as fd:
    georecords_text = fd.read().decode("utf8")
    VERSION = (
        re.compile(r".*__version__ = \"(.*?)\"", re.S).match(georecords_text).group(1)
    )


def find_packages(location):
    packages = []
    for pkg in ["georecords"]:
        for _dir, subdirectories, files in os.walk(os.path.join(location, pkg)):
            if "__init__.py" in files:
                tokens = _dir.split(os.sep)[len(location.split(os.sep)) :]
                packages.append(".".join(tokens))
    return packages


setup(
    name="georecords",
    version=VERSION,
    description="Typed GeoIP2 and GeoLite2 records on top of the MaxMind DB reader",
    long_description=README,
    long_description_content_type="text/x-rst",
    license="Apache License, Version 2.0",
    packages=find_packages(ROOT or "."),
    package_data={"georecords": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=["maxminddb>=2.5.0"],
    extras_require={"test": ["mmdb-writer>=0.2.5", "netaddr"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Topic :: Internet",
        "Topic :: Internet :: Proxy Servers",
    ],
)
