import os

from setuptools import find_packages, setup

setup(
    name="lawful",
    version="0.1.0",
    packages=find_packages(include=["lawful", "lawful.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Lawful Contributors",
    description="Type classes for Python, with laws checked on generated samples",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
