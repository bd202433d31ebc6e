from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent
README = ROOT / "README.md"


setup(
    name="reserved-usernames",
    version="0.1.0",
    description="Reserved username registry: lookup, search, validation and suggestions",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy>=1.24",
        "httpx>=0.24",
        "fastapi>=0.100",
        "uvicorn>=0.22",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "reserved-usernames=reserved_usernames.__main__:main",
        ],
    },
)
