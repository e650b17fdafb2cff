from setuptools import setup, find_packages

setup(
    name="tag_matchers",
    version="0.1",
    packages=find_packages(include=["tag_matchers", "tag_matchers.*"]),
    python_requires=">=3.8",
    install_requires=[
        "beautifulsoup4",
        "pydantic>=2",
        "python-dotenv",
        "PyHamcrest"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock"
        ]
    },
)
