#!/usr/bin/env python

from os import walk
from setuptools import setup
from svnx.svn2git import __version__ as VERSION

setup(name='svn2git',
      version=VERSION,
      packages=[dirpath.replace('/', '.') for dirpath, dirnames, filenames
                in walk('svnx')
                if not dirpath.startswith('svnx/tests')
                and '__init__.py' in filenames],
      scripts=['svn2git.py'],
      python_requires='>=3.6',
      extras_require={'test': ['pytest']},
      description='A tool to turn a Subversion repository into an '
      'idiomatic git repository.',
      long_description="""\
Using git-svn to mirror the Subversion history, this tool converts the
Subversion tags into real git tags, the Subversion branches into local
git branches and the trunk into the default branch.

The conversion is driven either by command line options or by a
configuration file describing several projects.
""",
      classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: Unix',
        'Topic :: Software Development :: Version Control',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        ]
    )
