from setuptools import setup, find_packages

setup(
    name="remote-element",
    version="1.0.0",
    packages=find_packages(include=["remote_element", "remote_element.*"]),
    install_requires=[
        "pyyaml>=5.4",
        "jsonschema>=4.0.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    package_data={
        "remote_element": ["schemas/*.json"],
    },
)
