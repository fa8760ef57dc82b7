from setuptools import setup, find_packages

setup(
    name="coedit",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml",
        # Structural region extraction
        "tree-sitter>=0.22",
        "tree-sitter-javascript",
        "tree-sitter-typescript",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "coedit=coedit.cli:main",
        ],
    },
    author="Uday Kanth",
    description="Region partitioning and hunk-level diffs for concurrent code editing.",
)
