from setuptools import setup, find_packages

setup(
    name="block_dodger",
    version="0.1.0",
    description="A terminal game where you dodge blocks falling from the top of the screen",
    author="Your Name",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "block-dodger=block_dodger.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console :: Curses",
        "Operating System :: POSIX",
    ],
)
