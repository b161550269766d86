# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx - Subversion layout eXporter
# :Creato:   sab 17 ott 2026 09:41:12 CEST
# :Licenza:  GNU General Public License
#

"""
svnx - Subversion layout eXporter
=================================

This package encapsulates the machinery needed to turn a ``git svn``
mirror of a Subversion repository into an idiomatic git repository:
tag branches become real tags, the other remote branches become local
branches and the trunk becomes the default branch.
"""

__docformat__ = 'reStructuredText'


class Svn2gitException(Exception):
    "Common base for svn2git exceptions"

class Svn2gitBug(Svn2gitException):
    "svn2git bug (please report)"
