import setuptools

setuptools.setup(
    name="oneiros",
    version="0.1.0",
    description="Fast grammar-based input generation for fuzzing",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "networkx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "oneiros = oneiros.cli:main",
        ],
    },
)
