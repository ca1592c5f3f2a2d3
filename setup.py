from setuptools import setup, find_packages

setup(
    name="decimal-weight",
    version="1.0.0",
    description="Exact decimal weights with unit conversion and arithmetic",
    author="Your Name",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "structlog>=23.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "decimal-weight=decimal_weight.main:main",
        ],
    },
)
