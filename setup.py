from setuptools import setup

# https://packaging.python.org/en/latest/guides/making-a-pypi-friendly-readme/
# read the contents of your README file
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="unordered-expectations",
    version="0.1.0",
    description=("Order-insensitive set and map equality expectations for "
                 "unit tests"),
    long_description=long_description,
    long_description_content_type='text/markdown',
    author="Louis Wust",
    author_email="louiswust@fastmail.fm",
    packages=["unordered_expectations"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Testing",
        "Topic :: Utilities"
    ],
    license="MIT License",
    package_dir={"": "src"},
    install_requires=[],
    python_requires=">= 3.6"
)
