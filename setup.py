import os
from setuptools import setup, find_packages

# Read the contents of README.md for the long description
long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()

requirements = [
    "click>=8.1.7",
    "rich>=13.8.1",
]

test_requirements = [
    "pytest>=8.3.2",
    "python-dotenv>=1.0.0",
]

setup(
    name="demo-math",
    version="0.1.0",
    description="Integer addition exercised by fact, inline-data and class-data tests",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={"test": test_requirements},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: Software Development :: Testing",
    ],
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "demo-math=demo_math.cli:main",
        ],
    },
    include_package_data=True,
    keywords=[
        "unit testing",
        "parameterized tests",
        "pytest",
    ],
    license="MIT",
)
