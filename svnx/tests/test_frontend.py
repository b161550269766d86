# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Command line frontend tests
# :Creato:   sab 17 ott 2026 17:05:13 CEST
# :Licenza:  GNU General Public License
#

from svnx.shwrap import ExternalCommand
from svnx.svn2git import main
from svnx.tests.test_git import ScratchMirror


class Frontend(ScratchMirror):
    """Exercise the command line entry point"""

    def testMissingURL(self):
        """Verify that cloning without SVN_URL is an usage error"""

        self.assertEqual(main(['-C', self.TESTDIR]), 1)

    def testTooManyArguments(self):
        """Verify that a single SVN_URL is accepted"""

        self.assertRaises(SystemExit, main, ['svn://a', 'svn://b'])

    def testNoClone(self):
        """Verify the conversion of an existing mirror"""

        self.assertEqual(main(['--noclone', '-C', self.TESTDIR,
                               '--strip-tag-prefix', 'release-']), 0)
        self.assertEqual(self.rev('refs/tags/1.1'), self.new)
        self.assertEqual(self.rev('refs/heads/feature'), self.old)
        self.assertEqual(self.rev('refs/heads/master'), self.new)

    def testPercentInStripPrefix(self):
        """Verify that a percent sign in the strip prefix is taken literally"""

        self.git('update-ref', 'refs/remotes/tags/50%-2.0', self.new)

        self.assertEqual(main(['--noclone', '-C', self.TESTDIR,
                               '--strip-tag-prefix=50%-']), 0)
        self.assertEqual(self.rev('refs/tags/2.0'), self.new)
        self.assertEqual(self.rev('refs/tags/50%-2.0'), None)

    def testExistingTag(self):
        """Verify that the exit status of the failed command is returned"""

        self.assertEqual(main(['--noclone', '-C', self.TESTDIR]), 0)
        self.assertEqual(main(['--noclone', '-C', self.TESTDIR]), 128)
        self.assertEqual(main(['--noclone', '-C', self.TESTDIR,
                               '--force-tag']), 0)

    def testDirtyWorkingTree(self):
        """Verify that pending changes are refused"""

        from os.path import join

        with open(join(self.TESTDIR, 'README'), 'w') as f:
            f.write('First\n')
        self.git('add', 'README')

        self.assertEqual(main(['--noclone', '-C', self.TESTDIR]), 1)
        self.assertEqual(self.rev('refs/tags/1.0'), None)

    def testNotARepository(self):
        """Verify that a plain directory is refused"""

        from tempfile import mkdtemp
        from shutil import rmtree

        plain = mkdtemp(prefix='svn2git-tests-')
        try:
            self.assertNotEqual(main(['--noclone', '-C', plain]), 0)
        finally:
            rmtree(plain, ignore_errors=True)

    def testDryRun(self):
        """Verify that --dry-run does not touch the repository"""

        self.assertEqual(main(['-n', '--noclone', '-C', self.TESTDIR]), 0)
        self.assertFalse(ExternalCommand.DRY_RUN)
        self.assertEqual(self.rev('refs/tags/1.0'), None)
        self.assertEqual(self.rev('refs/heads/master'), self.old)

    def testConfigFile(self):
        """Verify the conversion of the projects in a configuration file"""

        from os.path import join

        cfgname = join(self.TESTDIR, '.git', 'svn2git.ini')
        with open(cfgname, 'w') as f:
            f.write("[DEFAULT]\n"
                    "clone = False\n"
                    "\n"
                    "[mirror]\n"
                    "root-directory = %s\n"
                    "default-branch = main\n" % self.TESTDIR)

        self.assertEqual(main(['-c', cfgname]), 0)
        self.assertEqual(self.rev('refs/heads/main'), self.new)
        self.assertEqual(self.rev('refs/tags/1.0'), self.old)

    def testUnknownProject(self):
        """Verify that an unknown project is reported"""

        from os.path import join

        cfgname = join(self.TESTDIR, '.git', 'svn2git.ini')
        with open(cfgname, 'w') as f:
            f.write("[mirror]\nclone = False\n")

        self.assertEqual(main(['-c', cfgname, 'other']), 1)
