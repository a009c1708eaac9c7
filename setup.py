from setuptools import find_packages, setup

setup(
    name="slidesmith-backend",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app", "bootloader", "database"],
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite>=0.19",
        "asyncpg>=0.29",
        "pydantic>=2.5",
        "openai>=1.30",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
        ],
    },
    include_package_data=True,
    package_data={"services.generation.config": ["*.yaml"]},
    description="Backend package for SlideSmith (AI slide generation, editing and playback)",
    author="Andreas Malathouras",
    author_email="steelstridertgm@gmail.com",
)
