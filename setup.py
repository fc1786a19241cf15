from setuptools import find_packages, setup

setup(
    name="resub",
    version="1.0.0",
    description="Regex search & replace over directory trees or stdin",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["resub = resub.cli:main"]},
)
