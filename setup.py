from setuptools import find_packages, setup

setup(
    name="sir",
    version="0.3.0",
    description="Smart Image Renamer - note-named images with consistent links",
    packages=find_packages(include=["sir", "sir.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration models and output schemas
        "typer>=0.16,<0.26",  # CLI (0.26+ vendors click; the code uses click contexts directly)
        "click>=8.2",  # CLI context and usage errors (typer's base)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting
        "watchdog",  # File system monitoring
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "sirc=sir.cli:main",
        ],
    },
)
