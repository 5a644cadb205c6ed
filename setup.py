from setuptools import setup, find_packages

setup(
    name="grid_solver",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "grid_solver.tests", "grid_solver.tests.*"]),
    package_data={"grid_solver": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid-solver=grid_solver.scripts.run_solver:main",
        ]
    },
)
