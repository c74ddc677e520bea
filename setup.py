from setuptools import setup, find_packages

setup(
    name="bagelpay-sdk",
    version="1.0.3",
    description="Python SDK for the BagelPay payments API",
    author="BagelPay Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.10",
)
