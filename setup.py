from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "beautifulsoup4>=4.12.0",
    "flask>=2.3.0",
    "flask-cors>=4.0.0",
    "pydantic>=2.0.0",
    "requests>=2.28.2",
    "typer>=0.9.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1,<9.0.0",
]

setup(
    name="logos",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "logos=logos.cli:app",
        ],
    },
    python_requires=">=3.9",
    description="Ancient Greek and Latin word lookup backed by Morpheus and Wiktionary",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
