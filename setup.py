from setuptools import setup, find_packages

setup(
    name="passenger-service",
    version="0.1.0",
    packages=find_packages(include=["passenger_service", "passenger_service.*"]),
    py_modules=["app"],
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite",
        "asyncpg",
        "pydantic>=2.0",
        "pydantic-settings",
        "python-dotenv",
        "httpx",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-cov",
        ],
    },
)
