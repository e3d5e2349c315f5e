"""Setup script for the screenaware package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="screenaware",
    version="0.1.0",
    description="Screen-time awareness: activity logging, usage statistics, insights and a habits quiz",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Screen Time Awareness Team",
    packages=find_packages(exclude=["tests*", "docs*", "app*"]),
    python_requires=">=3.9",
    install_requires=[
        "pandas>=2.2.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black",
            "flake8",
            "mypy",
        ],
        "ui": [
            "streamlit>=1.37.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "screenaware-log=scripts.log_activity:main",
            "screenaware-goal=scripts.set_goal:main",
            "screenaware-dashboard=scripts.show_dashboard:main",
            "screenaware-export=scripts.export_data:main",
            "screenaware-quiz=scripts.take_quiz:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
