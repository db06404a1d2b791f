# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="navshell",
    version="1.0.0",
    description="Filesystem navigation and directory tree inspection from the Python REPL",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["navshell", "navshell.*"]),
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Clipboard access (paste / copy)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'navshell=navshell.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
