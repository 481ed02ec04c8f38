from setuptools import setup, find_packages

setup(
    name="mentorhub",
    version="1.0.0",
    packages=find_packages(include=["mentorhub", "mentorhub.*"]),
    package_data={
        "mentorhub": ["templates/*.html", "templates/*/*.html"],
    },
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt<4.1",  # passlib 1.7 breaks on newer bcrypt releases
        "python-multipart",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "jinja2",
        "alembic",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
