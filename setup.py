import setuptools

with open("README.md", "rt") as f:
    long_description = f.read()

setuptools.setup(
    name="enhanced-access",
    version="0.1.1",
    author="Olafur Arason",
    description="Composable accessors for traversing and updating nested mappings and key-value lists",
    license="Apache 2.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/olafura/enhanced_access",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=['pyparsing>=3.0', 'structlog>=21.2'],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['eaccess=enhanced_access.cli.main:main'],
    },
)
