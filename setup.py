import pycubie
from setuptools import setup, find_packages

with open("./README.md", "r") as f:
    description = f.read()

with open("./requirements.txt", 'r') as f:
    requirements = f.read()

setup(
    name="pycubie",
    version=pycubie.__version__,
    author=pycubie.__author__,
    description="A cubie-level data model of the 3x3 Rubik's cube, with face, row, column and corner views",
    long_description=description,
    long_description_content_type="text/markdown",
    license='MIT',
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.10',
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": ["pytest"]
    }
)
