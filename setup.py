#!/usr/bin/env python3
"""
Setup script for argchain; metadata is read from pyproject.toml.
"""

import sys
from pathlib import Path

from setuptools import find_packages, setup


def _requirements(deps: dict) -> list[str]:
    requires = []
    for dep, version_spec in deps.items():
        if dep == "python":
            continue
        if isinstance(version_spec, str) and version_spec != "*":
            requires.append(f"{dep}{version_spec}")
        else:
            requires.append(dep)
    return requires


# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open(Path(__file__).parent / "pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]
    name = poetry["name"]
    version = poetry["version"]
    description = poetry["description"]
    authors = poetry["authors"]
    license_text = poetry["license"]

    install_requires = _requirements(poetry["dependencies"])
    extras_require = {
        group: _requirements(data.get("dependencies", {}))
        for group, data in poetry.get("group", {}).items()
    }
    console_scripts = [f"{script}={target}" for script, target in poetry.get("scripts", {}).items()]

    # Get packages
    packages = find_packages(where="src")
    package_dir = {"": "src"}

    setup(
        name=name,
        version=version,
        description=description,
        author=authors[0] if isinstance(authors, list) else authors,
        license=license_text,
        packages=packages,
        package_dir=package_dir,
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={"console_scripts": console_scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
