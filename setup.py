"""Setup configuration for the SoloForge menu shell."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="soloforge",
    version="0.1.0",
    description="SoloForge - keyboard-driven terminal shell for solo tabletop play",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="SoloForge Team",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests"]),
    py_modules=["cli"],
    install_requires=[
        "rich>=13.0.0",
        "pyfiglet>=0.8",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "soloforge=cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Games/Entertainment :: Role-Playing",
    ],
)
