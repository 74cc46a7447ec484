"""Setup script for mmc_rom package."""

from setuptools import setup, find_packages

setup(
    name='mmc_rom',
    version='1.0',
    description='Rule-of-mixtures property estimates for metal matrix composites',
    packages=find_packages(include=['mmc_rom', 'mmc_rom.*']),
    package_data={
        'mmc_rom': ['config/defaults.yaml', 'data/constituents.yaml'],
    },
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'matplotlib>=3.3.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'mmc-rom=mmc_rom.cli:main',
        ],
    },
)
