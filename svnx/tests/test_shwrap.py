# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Test shell wrappers
# :Creato:   sab 17 ott 2026 14:10:31 CEST
# :Licenza:  GNU General Public License
#

from unittest import TestCase
from svnx.shwrap import ExternalCommand, PIPE, STDOUT
from tempfile import gettempdir


class SystemCommand(TestCase):
    """Perform some basic tests of the wrapper"""

    def tearDown(self):
        ExternalCommand.DRY_RUN = False

    def testExitStatusForTrue(self):
        """Verify ExternalCommand exit_status of ``true``.
        """

        c = ExternalCommand(['true'])
        c.execute()
        self.assertEqual(c.exit_status, 0)

    def testExitStatusForFalse(self):
        """Verify ExternalCommand exit_status of ``false``.
        """

        c = ExternalCommand(['false'])
        c.execute()
        self.assertNotEqual(c.exit_status, 0)

    def testOkStatus(self):
        """Verify the log on exit_status"""

        class Logger:
            def warning(self, *args):
                raise Exception('should not happen: %s' % str(args))

            def info(self, *args):
                pass

            def debug(self, *args):
                pass

        c = ExternalCommand(['false'], ok_status=(0,1))
        c.log = Logger()
        c.execute()
        self.assertEqual(c.exit_status, 1)

    def testExitStatusUnknownCommand(self):
        """Verify ExternalCommand raise OSError for non existing command.
        """

        c = ExternalCommand(['/does/not/exist'])
        self.assertRaises(OSError, c.execute)

    def testMissingWorkingDir(self):
        """Verify ExternalCommand refuses a non existing working directory.
        """

        c = ExternalCommand(['true'], cwd='/does/not/exist')
        self.assertRaises(OSError, c.execute)

    def testStandardOutput(self):
        """Verify that ExternalCommand redirects stdout."""

        c = ExternalCommand(['echo'])
        out = c.execute("ciao", stdout=PIPE)[0]
        self.assertEqual(out.read(), "ciao\n")

        out = c.execute('-n', stdout=PIPE)[0]
        self.assertEqual(out.read(), '')

        out = c.execute("ciao")[0]
        self.assertEqual(out, None)

    def testStandardError(self):
        """Verify that ExternalCommand redirects stderr."""

        c = ExternalCommand(['sh', '-c', 'echo oops >&2'])
        out, err = c.execute(stdout=PIPE, stderr=PIPE)
        self.assertEqual(out.read(), '')
        self.assertEqual(err.read(), 'oops\n')

        out, err = c.execute(stdout=PIPE, stderr=STDOUT)
        self.assertEqual(out.read(), 'oops\n')
        self.assertEqual(err, None)
        self.assertTrue(str(c).endswith(' 2>&1'))

    def testEnvironment(self):
        """Verify that the environment is extended, not replaced."""

        c = ExternalCommand(['sh', '-c', 'echo "$SVN2GIT_TEST:$PATH"'])
        out = c.execute(stdout=PIPE, env={'SVN2GIT_TEST': 'yes'})[0]
        value, path = out.read().strip().split(':', 1)
        self.assertEqual(value, 'yes')
        self.assertTrue(path)

    def testWorkingDir(self):
        """Verify that the given command is executed in the specified
        working directory.
        """

        from os.path import realpath

        tempdir = gettempdir()
        c = ExternalCommand(['pwd'], tempdir)
        out = c.execute(stdout=PIPE)[0]
        self.assertEqual(realpath(out.read().strip()), realpath(tempdir))

    def testDryRun(self):
        """Verify that nothing gets executed in dry run mode"""

        ExternalCommand.DRY_RUN = True
        c = ExternalCommand(['false'])
        out, err = c.execute(stdout=PIPE)
        self.assertEqual(out, None)
        self.assertEqual(c.exit_status, None)

    def testStringification(self):
        """Verify the conversion from sequence of args to string"""

        c = ExternalCommand(['some spaces here'])
        self.assertEqual(str(c), '$ "some spaces here"')

        c = ExternalCommand(['a "double quoted" arg'])
        self.assertEqual(str(c), r'$ "a \"double quoted\" arg"')

        c = ExternalCommand([r'a \" backslashed quote mark\\'])
        self.assertEqual(str(c), r'$ "a \\\" backslashed quote mark\\\\"')

        c = ExternalCommand(['git', 'svn', 'init', '--prefix='], cwd='/tmp')
        self.assertEqual(str(c), '/tmp $ git svn init --prefix=')

        c = ExternalCommand(['git', 'config', 'user.name', ''])
        self.assertEqual(str(c), '$ git config user.name ""')
