# setup.py
from setuptools import setup, find_packages

setup(
    name="clrs",
    version="0.1.0",
    packages=find_packages(include=["clrs", "clrs.*"]),
    package_data={"clrs": ["prelude/*.clrs"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
