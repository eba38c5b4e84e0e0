from setuptools import setup, find_packages

setup(
    name='escapehtml',
    version='0.1.0',
    description='Escape the HTML entities in a file or a directory tree',
    author='Elias Bachaalany',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'escapehtml = escapehtml.cli:main',
        ],
    }
)
