#!/usr/bin/env python3

from setuptools import setup


def read_requirements(filename):
    with open(filename, 'r') as f:
        return [line for line in f.readlines() if not line.startswith('-')]


setup(
    name='cpeparser',
    version='0.0.0',
    description='Common Platform Enumeration names validation, conversion and matching',
    author='Dmitry Marakasov',
    author_email='amdmi3@amdmi3.ru',
    license='GNU General Public License v3 or later (GPLv3+)',
    packages=[
        'cpeparser',
    ],
    scripts=[
        'cpe-tool.py',
    ],
    classifiers=[
        'Topic :: Security',
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
    ],
    python_requires='>=3.8',
    install_requires=read_requirements('requirements.txt')
)
