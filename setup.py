from setuptools import setup, find_packages

setup(
    name="go_minimax",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "go-minimax=go_minimax.play:main",
        ],
    },
)
