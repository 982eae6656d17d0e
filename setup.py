# setup.py
from setuptools import setup, find_packages

setup(
    name="treescribe",
    version="1.0.0",
    description="Sketch a virtual folder/file tree from slash-delimited paths and export it as indented text",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "treescribe": ["interface/locales/*.json"],
    },
    install_requires=[
        "customtkinter>=5.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "gui_scripts": [
            "treescribe=treescribe.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
