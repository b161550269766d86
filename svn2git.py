#! /usr/bin/env python3
# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Frontend
# :Creato:   sab 17 ott 2026 13:30:02 CEST
#

"""Turn a Subversion repository into an idiomatic git repository.

This script drives ``git svn`` to mirror a Subversion repository, then
converts the remote tag branches into real git tags, the other remote
branches into local branches and the trunk into the default branch.

Examples::

  # Clone a repository with the standard trunk/branches/tags layout
  $ svn2git.py http://svn.server/Product

  # Custom layout, translating the authors and dropping the "release-"
  # prefix from the tag names
  $ svn2git.py --trunk=dev --branches=feature --tags=rel \\
               --authors=~/authors.txt --strip-tag-prefix=release- \\
               http://svn.server/Product

  # Convert an existing mirror, showing each executed command
  $ cd ~/git/product && svn2git.py -v --noclone --force-tag

  # Convert every project described in a configuration file
  $ svn2git.py -c ~/svn2git.ini
"""

__docformat__ = 'reStructuredText'

if __name__ == '__main__':
    import sys

    if len(sys.argv)>1 and sys.argv[1] == 'test':
        del sys.argv[1]
        from svnx.tests import main
        main()
    else:
        from svnx.svn2git import main

        if len(sys.argv) == 1:
            sys.argv.append('--help')

        sys.exit(main())
