# setup.py
from setuptools import setup, find_packages

setup(
    name="fundot",
    version="0.1.0",
    description="Reader and minimal evaluator for a small dynamically typed value notation",
    packages=find_packages(include=["fundot", "fundot.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["fundot=fundot.repl:main"],
    },
    zip_safe=False,
)
