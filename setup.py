from setuptools import find_packages, setup

setup(
    name="type-detective",
    version="0.1.0",
    description="Scaffolding TypeScript type declarations from sample values",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=["click~=8.1", "tqdm>=4.0.0"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["type-detective=type_detective.cli:cli"],
    },
)
