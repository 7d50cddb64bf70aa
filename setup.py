# setup.py
from setuptools import setup, find_packages

setup(
    name="evm-wallet-api",
    version="0.1.0",  # Match evm_wallet_api.__version__
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "web3>=7.0.0",
        "eth-account>=0.13.0",
        "mnemonic>=0.20",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "httpx>=0.24.0",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.1",
            "pytest-mock>=3.10",
            "pytest-asyncio>=0.21",
            "black>=23.0",
            "isort>=5.12",
            "flake8>=6.0",
            "mypy>=1.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "evm-wallet-api=evm_wallet_api.cli.cli:main",
        ],
    },
    description="HTTP API for EVM wallets, balances and native transfers",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
