from setuptools import setup, find_packages

setup(
    name="todo-tracker",
    version="0.1.0",
    packages=find_packages(include=["todo_tracker", "todo_tracker.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite",
        "asyncpg",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
)
