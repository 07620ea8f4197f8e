"""Setup script for roggle"""

from setuptools import setup, find_packages
from pathlib import Path

readme = Path(__file__).parent / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

setup(
    name="roggle",
    version="1.0.0",
    author="kcenon",
    author_email="kcenon@naver.com",
    description="Pretty single-line logging facade with caller resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/kcenon/roggle",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "docs"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[
        "sentry-sdk>=2.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0", "pytest-cov>=4.0.0", "black>=23.0.0"],
        "test": ["pytest>=7.0.0", "pytest-cov>=4.0.0"],
    },
)
