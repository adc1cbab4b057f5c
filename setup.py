from setuptools import setup, find_packages

# Read README for long description
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Subset construction of DFAs from epsilon-NFA transition tables"

setup(
    name="nfa-determinizer",
    version="0.1.0",
    description="Subset construction of DFAs from epsilon-NFA transition tables",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["nfa_determinizer", "nfa_determinizer.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-cov",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "nfa-determinizer=nfa_determinizer.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="automata, nfa, dfa, subset construction, epsilon closure",
)
