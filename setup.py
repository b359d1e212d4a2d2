from setuptools import setup, find_packages

setup(
    name='pagenav',
    version='0.1.0',
    license="Apache 2.0",
    description="Wait-aware page navigation on top of Playwright",
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"pagenav": ["configs/*.yaml"]},
    install_requires=[
        "playwright>=1.40",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-httpserver>=1.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
