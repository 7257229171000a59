from setuptools import setup, find_packages

setup(
    name='rdf-jsonld',
    version='0.1.0',
    description='Serialize RDF quads as JSON-LD',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["test_jsonld", "test_jsonld.*"]),
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'rdfjsonld=rdfjsonld.cmd.rdfjsonld_cmd:run',
        ],
    },

    license='Apache License 2.0',
    install_requires=[
        "rdflib>=7.0.0",
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        'test': [
            'pytest',
            'PyLD',
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
