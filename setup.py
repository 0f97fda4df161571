from setuptools import setup
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name='unitconv',
    version='1.0.0',
    packages=['unitconv'],
    url='',
    license='',
    long_description_content_type="text/markdown",
    long_description=long_description,
    description='single shot command line unit converter',
    python_requires='>=3.9',
    install_requires=['fuzzywuzzy==0.18.0', 'python-Levenshtein'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['unitconv=unitconv.unitconv:main']},
)
