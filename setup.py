#!/usr/bin/env python3

from pathlib import Path

from setuptools import find_packages, setup

packages = find_packages(exclude=("tests*",))
package_data = {pkg: ("py.typed",) for pkg in packages}
install_requires = Path("requirements.txt").read_text().splitlines()

setup(
    name="vscode-gen",
    python_requires=">=3.8.2",
    version="0.1.0",
    description="VS Code snippet generator",
    long_description=Path("README.md").read_text(),
    long_description_content_type="text/markdown",
    packages=packages,
    package_data=package_data,
    install_requires=install_requires,
    entry_points={"console_scripts": ("vscode-gen = vscode_gen.__main__:main",)},
)
