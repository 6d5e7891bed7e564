from setuptools import find_packages, setup

setup(
    name="optgrid",
    version="0.1.0",
    description="Declarative option tables: validation, argument classification "
    "and column-aligned help.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "prompt_toolkit>=3.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["optgrid=optgrid.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
