"""Setup script for the validate_json_schema package."""

import re
from pathlib import Path

from setuptools import find_packages, setup  # type: ignore

HERE = Path(__file__).resolve().parent
VERSION_RE = re.compile(r'^__version__\s*=\s*[\'"]([^\'"]+)[\'"]', re.MULTILINE)


def read_version() -> str:
    """Read ``__version__`` from the package without importing it.

    Importing would pull in the runtime dependencies before they are installed.
    """
    init_text = (HERE / "validate_json_schema" / "__init__.py").read_text(
        encoding="utf-8"
    )
    match = VERSION_RE.search(init_text)
    if match is None:
        raise RuntimeError("Unable to find __version__ in validate_json_schema")
    return match.group(1)


setup(
    name="validate-json-schema",
    version=read_version(),
    description="Validate YAML and JSON files against local or remote JSON schemas",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0.0",
        "jsonschema>=4.18.0",
        "platformdirs>=3.0.0",
        "python-dotenv>=1.0.0",
        "PyYAML>=6.0",
        "referencing>=0.28.0",
        "requests>=2.28.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "validate-json-schema=validate_json_schema.__main__:main",
        ],
    },
)
