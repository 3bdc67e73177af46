"""
setup.py for the caro build driver

Build Requirements (for the project being built, not for this package):
- CMake and Ninja
- git (submodules under external/ are initialized on first build)
- clang-format / clang-tidy for --format / --lint (versions 21, 19, 18 or unversioned)

Parallel Build Support:
- Automatically uses all CPU cores available to the process
- Override with: caro-build --jobs N
- Or set environment: export CARO_BUILD_JOBS=N (falls back to MAX_JOBS or CPU count)

Build Directory:
- Defaults to build/ under the project root
- Override with --build-dir DIR or CARO_BUILD_DIR
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="caro-build",
    version="1.0.0",
    description="Build driver for the caro Vulkan application: CMake/Ninja, clang-format and clang-tidy",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["caro_build", "caro_build.*"]),
    package_data={
        "caro_build.config": ["defaults.yaml"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "caro-build=caro_build.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: C++",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
    ],
)
