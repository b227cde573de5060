import sys

from setuptools import setup

if sys.version_info < (3, 9):
    print('Sorry, vcfsample2info requires Python version 3.9+.')
    sys.exit()

with open('README.md') as fh:
    long_description = fh.read()

setup(
    name='vcfsample2info',
    version='0.1',

    description='Summarize per-sample VCF fields into a site-level INFO field',
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=['sample2info', 'sample2info.core', 'sample2info.utils'],
    python_requires='>=3.9',
    install_requires=['numpy', 'pysam'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['vcfsample2info=sample2info.core.sample2info:entry'],
    },
)
