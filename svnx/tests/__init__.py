# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Test suite
# :Creato:   sab 17 ott 2026 14:02:44 CEST
# :Licenza:  GNU General Public License
#

import sys
from unittest import TestProgram, TestSuite

from svnx.tests.test_shwrap import *
from svnx.tests.test_config import *
from svnx.tests.test_branches import *
from svnx.tests.test_converter import *
from svnx.tests.test_git import *
from svnx.tests.test_frontend import *

class Svn2gitTest(TestProgram):
    """A command-line program that runs a set of tests; this is primarily
       for making test modules conveniently executable.

       Besides the standard unittest options, ``-l`` or ``--list`` lists
       the available tests without running them.
    """

    def __init__(self):
        TestProgram.__init__(self, module='svnx.tests', argv=sys.argv)

    def parseArgs(self, argv):
        listonly = '-l' in argv[1:] or '--list' in argv[1:]
        if listonly:
            argv = [a for a in argv if a not in ('-l', '--list')]

        TestProgram.parseArgs(self, argv)

        if listonly:
            def listsuite(suite):
                tcount = 0
                scount = 0
                tclass = None
                for t in suite._tests:
                    if isinstance(t, TestSuite):
                        tc,sc = listsuite(t)
                        tcount += tc
                        scount += sc + 1
                    else:
                        tcount += 1
                        if tclass != t.__class__:
                            tclass = t.__class__
                            title = tclass.__name__
                            if tclass.__doc__:
                                title += ': ' + tclass.__doc__.strip()
                            print()
                            print(title)
                            print('='*len(title))
                        print(t._testMethodName, '--', t.shortDescription())
                return tcount, scount
            tcount, scount = listsuite(self.test)
            print()
            print("%d tests in %d suites" % (tcount,scount))
            sys.exit(0)

main = Svn2gitTest
