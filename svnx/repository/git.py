# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Git repository hosting the git-svn mirror
# :Creato:   sab 17 ott 2026 12:05:27 CEST
# :Licenza:  GNU General Public License
#

"""
This module implements the backend driving ``git`` and ``git svn``.

Every git invocation goes thru either `GitRepository.runCommand()`, that
raises a `CommandFailure` as soon as a command exits with a non-zero
status, or `GitRepository.probeCommand()`, for the queries where a
failure is an acceptable answer.
"""

__docformat__ = 'reStructuredText'

from svnx import Svn2gitException
from svnx.repository import Repository
from svnx.shwrap import ExternalCommand, PIPE


class CommandFailure(Svn2gitException):
    "An external command exited with a non-zero status"

    def __init__(self, command, exit_status):
        Svn2gitException.__init__(self, "%s failed with status %s"
                                  % (command, exit_status))
        self.command = command
        self.exit_status = exit_status


class ToolNotFound(Svn2gitException):
    "A needed external tool is not available"


class GitRepository(Repository):
    METADIR = '.git'

    def _load(self, project):
        Repository._load(self, project)
        self.EXECUTABLE = project.git_command

    def runCommand(self, cmd, exception=CommandFailure, pipe=False):
        """
        Facility to run a git command in a controlled context.

        When `pipe` is true, return the lines printed by the command on
        its standard output.  A non-zero exit status raises `exception`.
        """

        c = ExternalCommand(command=self.command(*cmd), cwd=self.basedir)
        if pipe:
            output = c.execute(stdout=PIPE)[0]
        else:
            c.execute()
        if c.exit_status:
            raise exception(str(c), c.exit_status)
        if pipe:
            if output is None:
                return []
            return output.read().splitlines()

    def probeCommand(self, cmd, ok_status=(0, 1)):
        """
        Run a git query with silenced output, and return its exit status.

        Statuses in `ok_status` are expected answers and do not get
        logged as warnings.
        """

        c = ExternalCommand(command=self.command(*cmd), cwd=self.basedir,
                            ok_status=ok_status)
        c.execute(stdout=PIPE, stderr=PIPE)
        if c.exit_status is None:
            # Dry run
            return 0
        return c.exit_status

    def checkCapabilities(self):
        """
        Make sure that ``git svn`` is available.
        """

        status = self.probeCommand(['svn', '--version'], ok_status=(0,))
        if status:
            self.log.critical('"%s svn" is not available, is git-svn '
                              'installed?', self.EXECUTABLE)
            raise ToolNotFound('"%s svn --version" failed with status %s: '
                               'git-svn seems not installed'
                               % (self.EXECUTABLE, status))

    def svnInit(self, trunk=None, branches=None, tags=None, prefix='',
                username=None, metadata=True):
        """
        Initialize the mirror of the Subversion repository with
        ``git svn init``.

        When neither `trunk`, `branches` nor `tags` is given, the
        Subversion repository is assumed to have the standard layout.
        """

        cmd = ['svn', 'init', '--prefix=' + prefix]
        if username:
            cmd.append('--username=' + username)
        if not metadata:
            cmd.append('--no-metadata')
        if trunk or branches or tags:
            if trunk:
                cmd.append('--trunk=' + trunk)
            if branches:
                cmd.append('--branches=' + branches)
            if tags:
                cmd.append('--tags=' + tags)
        else:
            cmd.append('--stdlayout')
        cmd.append(self.url)
        self.runCommand(cmd)

    def setAuthorsFile(self, authors):
        """
        Register the `authors` mapping file in the mirror configuration.
        """

        self.runCommand(['config', 'svn.authorsfile', authors])

    def svnFetch(self, revision=None):
        """
        Fetch the history of the Subversion repository.
        """

        cmd = ['svn', 'fetch']
        if revision:
            cmd.extend(['-r', revision])
        self.runCommand(cmd)

    def gitDir(self):
        """
        Return the path of the git metadir, failing when the base
        directory is not a git repository.
        """

        lines = self.runCommand(['rev-parse', '--git-dir'], pipe=True)
        return lines and lines[0] or self.METADIR

    def localChanges(self):
        """
        Return the list of tracked files with pending changes.
        """

        return [l for l in self.runCommand(['status', '--porcelain',
                                            '--untracked-files=no'],
                                           pipe=True) if l.strip()]

    def remoteBranches(self):
        """
        Return the names of the remote branches, as listed by ``git branch -r``.
        """

        from svnx.branches import parse_branch_listing

        return parse_branch_listing(self.runCommand(['branch', '-r',
                                                     '--no-color'],
                                                    pipe=True))

    def isValidRemoteRef(self, branch):
        """
        Tell whether the remote `branch` resolves to a valid reference.
        """

        return self.probeCommand(['rev-parse', '--verify', '--quiet',
                                  'refs/remotes/' + branch],
                                 ok_status=(0, 1, 128)) == 0

    def hasLocalBranch(self, branch):
        """
        Tell whether a local `branch` exists.
        """

        return self.probeCommand(['show-ref', '--verify', '--quiet',
                                  'refs/heads/' + branch],
                                 ok_status=(0, 1, 128)) == 0

    def checkoutRemote(self, branch):
        """
        Switch the working tree to the remote `branch`, detaching HEAD.
        """

        self.runCommand(['checkout', 'refs/remotes/' + branch])

    def createTag(self, tag, force=False):
        """
        Create `tag` on the current commit, replacing an existing one
        only when `force` is true.
        """

        cmd = ['tag']
        if force:
            cmd.append('-f')
        cmd.append(tag)
        self.runCommand(cmd)

    def createBranch(self, branch, force=False):
        """
        Create a new local `branch` at the current commit and switch to it.
        """

        if force:
            self.runCommand(['checkout', '-f', '-B', branch])
        else:
            self.runCommand(['checkout', '-b', branch])

    def deleteBranch(self, branch):
        """
        Forcibly delete the local `branch`.
        """

        self.runCommand(['branch', '-D', branch])
