"""Setup file for the grocery package."""
from setuptools import setup, find_namespace_packages

setup(
    name="grocery",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["grocery*"]),
    install_requires=[
        "SQLAlchemy>=2.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "streamlit>=1.31",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
