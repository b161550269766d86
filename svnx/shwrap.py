# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Tiny wrapper around external command
# :Creato:   sab 17 ott 2026 09:58:40 CEST
# :Licenza:  GNU General Public License
#

__docformat__ = 'reStructuredText'

from subprocess import Popen, PIPE, STDOUT


class ExternalCommand:
    """Wrap a single command to be executed by the shell."""

    DEBUG = False
    """Copy the output of the command to stderr, when PIPEd to the caller."""

    DRY_RUN = False
    """Don't really execute the command."""

    def __init__(self, command=None, cwd=None, ok_status=None):
        """
        Initialize a ExternalCommand instance, specifying the command
        to be executed and eventually the working directory.

        The instance will use the logger ``svn2git.shell``.
        """

        from logging import getLogger

        self.command = command
        """The command to be executed."""

        self.cwd = cwd
        """The working directory, go there before execution."""

        self.exit_status = None
        """Once the command has been executed, this is its exit status."""

        self.ok_status = ok_status is None and (0,) or ok_status
        """Used to determine which exit_status should not trigger warnings."""

        self._last_command = None
        """Last executed command."""

        self.capture_stderr = False

        self.log = getLogger('svn2git.shell')
        """The logger echoing the command lines."""

    def __str__(self):
        """
        Return a string representation of the command prefixed by working dir.
        """

        r = '$'+repr(self)
        if self.cwd:
            r = self.cwd + ' ' + r
        if self.capture_stderr:
            r = r + ' 2>&1'
        return r

    def __repr__(self):
        """
        Compute a reasonable shell-like representation of the external command.
        """

        result = []
        needquote = False
        for arg in self._last_command or self.command:
            bs_buf = []

            # Add a space to separate this argument from the others
            result.append(' ')

            needquote = (" " in arg) or ("\t" in arg) or not arg
            if needquote:
                result.append('"')

            for c in arg:
                if c == '\\':
                    # Don't know if we need to double yet.
                    bs_buf.append(c)
                elif c == '"':
                    # Double backspaces.
                    result.append('\\' * len(bs_buf)*2)
                    bs_buf = []
                    result.append('\\"')
                else:
                    # Normal char
                    if bs_buf:
                        result.extend(bs_buf)
                        bs_buf = []
                    result.append(c)

            # Add remaining backspaces, if any.
            if bs_buf:
                result.extend(bs_buf)

            if needquote:
                result.extend(bs_buf)
                result.append('"')

        return ''.join(result)

    def execute(self, *args, **kwargs):
        """
        Execute the command, appending `args` to it.

        The standard streams are inherited from the current process,
        unless the caller asks for them with ``stdout=PIPE`` and/or
        ``stderr=PIPE`` (or ``stderr=STDOUT`` to merge them).  Return a
        tuple ``(out, err)`` of ``StringIO`` instances, ``None`` for
        the streams that were not captured.
        """

        from sys import stderr
        from os import environ, getcwd
        from os.path import isdir
        from io import StringIO
        from errno import ENOENT

        self.exit_status = None

        if kwargs.get('stderr') == STDOUT:
            self.capture_stderr = True
        else:
            self.capture_stderr = False

        self._last_command = list(self.command)
        if len(args) == 1 and isinstance(args[0], list):
            self._last_command.extend(args[0])
        else:
            self._last_command.extend(args)

        self.log.info(self)

        if self.DRY_RUN:
            return None, None

        cwd = kwargs.setdefault('cwd', self.cwd or getcwd())
        if not isdir(cwd):
            raise OSError(ENOENT, "Working directory does not exist", cwd)

        self.log.debug("Executing %r (%r)", self, cwd)

        env = {}
        env.update(environ)
        if kwargs.get('env'):
            env.update(kwargs['env'])

        output = kwargs.get('stdout')
        error = kwargs.get('stderr')

        try:
            process = Popen(self._last_command,
                            stdout=output,
                            stderr=error,
                            env=env,
                            cwd=cwd,
                            universal_newlines=True)
        except OSError as e:
            if e.errno == ENOENT:
                raise OSError(ENOENT, "%r does not exist!" %
                              self._last_command[0])
            else:
                raise

        out, err = process.communicate()

        self.exit_status = process.returncode
        if self.exit_status in self.ok_status:
            self.log.debug("[Ok]")
        else:
            self.log.warning("[Status %s]", self.exit_status)

        # For debug purposes, copy the captured output to our stderr
        if self.DEBUG:
            if out and output == PIPE:
                stderr.write('Output stream:\n')
                stderr.write(out)
            if err and error == PIPE:
                stderr.write('Error stream:\n')
                stderr.write(err)

        if out is not None:
            out = StringIO(out)
        if err is not None:
            err = StringIO(err)

        return out, err
