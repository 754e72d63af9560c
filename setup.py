"""
Setup script for MASLD-Viz package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="masldviz",
    version="0.1.0",
    description="Browse MASLD model-evaluation results in a Gradio dashboard",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["masldviz", "masldviz.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.5.0",
        "tqdm>=4.60.0",
        "pydantic>=2.0.0",
        "requests>=2.25.0",
        "gradio>=4.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "masldviz=masldviz.vis_gradio.launcher:main",
        ],
    },
)
