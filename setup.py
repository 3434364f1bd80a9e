from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("requirements.txt", "r") as fh:
    reqs = fh.read()

setup(
    name="med-imagemaker",
    version="0.1.0",
    author="med-imagemaker developers",
    description="Synthesize blank N-dimensional images with explicit geometry and write them to disk.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=reqs,
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={
        "test": ["pytest"],
    },
    entry_points={"console_scripts": ["imgmaker = imgmaker.cli.__main__:cli"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Apache Software License",
        "Development Status :: 2 - Pre-Alpha",
    ],
    python_requires=">=3.10",
)
