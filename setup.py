# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirsize",
    version="0.1.0",
    description="List directory entries with their recursive sizes, sorted by size",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirsize*"]),
    package_data={
        "dirsize.interface.locales": ["*.json"],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirsize=dirsize.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
