from setuptools import setup, find_packages

setup(
    name="nbapath",
    version="0.1.0",
    description="Bidirectional NBA* shortest-path search over weighted graphs",
    author="Routing Platform Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "duckdb>=1.0.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "h3>=4.0.0",
        "networkx>=3.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nbapath=nbapath.cli:main",
        ],
    },
)
