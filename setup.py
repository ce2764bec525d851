import os

from setuptools import find_packages, setup

CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))

version = {}
with open(os.path.join(CURRENT_DIR, 'src/spanformat/_version.py')) as f:
    exec(f.read(), version)

setup(
    name='spanformat',
    version=version['__version__'],
    description='printf-style formatting for styled text that keeps the styles of template and arguments',
    python_requires='>=3.8',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=[
        'platformdirs',
        'PyQt6',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
        ],
    },
)
