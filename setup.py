"""
Setup script for the reveal-referee package.

Installs the match core, the Discord adapter and the ``reveal-referee``
console command from the ``src/`` layout.
"""

from setuptools import setup, find_packages

setup(
    name="reveal-referee",
    version="1.0.0",
    description="Simultaneous reveal matches for two players in private Discord threads",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "discord.py>=2.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "reveal-referee=reveal_referee.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
