# setup.py
from pathlib import Path
from setuptools import setup, find_packages

readme_path = Path(__file__).parent / "README.md"

setup(
    name='termhost',
    version='0.1.0',
    description='Host bindings that let a declarative element tree drive a retained terminal scene graph.',
    long_description=readme_path.read_text(encoding="utf-8") if readme_path.exists() else "",
    long_description_content_type='text/markdown',

    # `termhost` (the library) and `termhost_cli` (the command line app)
    packages=find_packages(include=["termhost", "termhost.*", "termhost_cli", "termhost_cli.*"]),
    include_package_data=True,

    install_requires=[
        'PySide6',
        'typer',
        'PyYAML',
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },

    # Creates an executable script named `termhost` that calls the `app`
    # object inside `termhost_cli.main`.
    entry_points={
        'console_scripts': [
            'termhost = termhost_cli.main:app',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: User Interfaces',
    ],
    python_requires='>=3.10',
)
