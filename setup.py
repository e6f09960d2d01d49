"""
Setup script for the overcookied-client package.

Installs the ``overcookied_client`` package from ``src/`` and the
``overcookied-client`` console script.
"""

from setuptools import setup, find_packages

setup(
    name="overcookied-client",
    version="1.0.0",
    description="Overcookied client - join and play two-player clicker matches over WebSocket",
    author="Overcookied Team",
    license="MIT",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.6.0",
        "websockets>=12.0",
        "requests>=2.31.0",
        "PyJWT>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "overcookied-client=overcookied_client.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: AsyncIO",
    ],
)
