"""Package setup for IFTA Fuel Tax Engine."""

from setuptools import setup, find_packages

setup(
    name="ifta-fuel-tax-engine",
    version="1.0.0",
    description="Quarterly IFTA fuel tax calculation for interstate trucking",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["fuel_tax_engine", "fuel_tax_engine.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "pandas>=2.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "fuel-tax=fuel_tax_engine.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Financial and Insurance Industry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Financial :: Accounting",
    ],
    keywords="ifta fuel-tax trucking compliance quarterly kyu",
)
