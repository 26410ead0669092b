from setuptools import setup, find_packages

setup(
    name="discord-archive-search",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "elasticsearch>=8.0.0,<9.0.0",
        "requests>=2.31.0",
        "pyyaml>=6.0",
        "python-dotenv>=1.0.0",
        "click>=8.0.0",
        "rich>=13.0.0",
        "tabulate>=0.9.0",
        "flask>=3.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "archive-search=src.presentation.cli.main:cli",
            "archive-search-server=src.presentation.http.app:main",
        ],
    },
    python_requires=">=3.10",
)
