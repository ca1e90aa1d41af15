# setup.py
from setuptools import setup, find_packages

setup(
    name="corelang",
    version="0.1.0",
    description="Evaluator for a minimal expression language with letrec and for-loop desugaring",
    packages=find_packages(include=["corelang", "corelang.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
