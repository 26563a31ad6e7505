#!/usr/bin/env python3
from __future__ import annotations

import os
import setuptools
import pathlib
import sys
import toml

__prefix__ = os.getenv('TEXTALIGN_PREFIX') or ''
__minver__ = '3.8'
__author__ = 'The textalign developers'
__slogan__ = 'Wrap plain text into fixed-width lines that are left-aligned, right-aligned, or justified.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Environment :: Console',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Text Processing',
    'Topic :: Text Processing :: General',
]


def get_config():
    sys.path.insert(0, str(pathlib.Path(__file__).parent.absolute()))

    import textalign

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = pathlib.Path(__file__).parent.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            return README.read()

    def get_setup_common() -> dict:
        return dict(
            version=textalign.__version__,
            long_description=get_setup_readme(),
            author=__author__,
            description=__slogan__,
            long_description_content_type='text/markdown',
            python_requires=F'>={__minver__}',
            classifiers=__topics__,
        )

    ppcfg: dict[str, dict[str, list[str]]] = toml.load('pyproject.toml')
    requirements = [
        requirement for requirement in ppcfg['build-system']['requires']
        if not requirement.startswith(('setuptools', 'wheel'))
    ]

    config = get_setup_common()
    config.update(
        name=textalign.__distribution__,
        packages=setuptools.find_packages(include=('textalign*',)),
        install_requires=requirements,
        extras_require={
            'test': ['pytest'],
            'lint': ['flake8'],
        },
        include_package_data=True,
        entry_points={'console_scripts': [F'{__prefix__}textalign=textalign.cli:entry']},
    )

    return config


if __name__ == '__main__':
    setuptools.setup(**get_config())
