from setuptools import find_packages, setup  # type: ignore
from version import __version__

setup(
    name="semantic-pipelines",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"semantic": ["py.typed"]},
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    license="Apache 2.",
    description="Lazy, composable sequence pipelines with collectors, statistics and windows",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
