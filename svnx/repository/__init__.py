# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Configuration details about the mirror repository
# :Creato:   sab 17 ott 2026 11:40:03 CEST
# :Licenza:  GNU General Public License
#

"""
This module holds a simple abstraction of what a repository is for
svn2git purposes.
"""

__docformat__ = 'reStructuredText'


class Repository(object):
    """
    Collector for the configuration of the repository hosting a mirror.
    """

    METADIR = None
    """
    The name of the "meta" directory used by this kind of repository.
    Subclasses should override this, obviously.
    """

    EXECUTABLE = None
    """
    The name of the external command line tool.
    """

    def __init__(self, project):
        """
        Initialize a new instance of Repository, associated to the
        given `project`.
        """

        from logging import getLogger

        self.name = project.name
        self.log = getLogger('svn2git.svnx.%s' % self.__class__.__name__)
        self._load(project)
        self._validateConfiguration()

    def _load(self, project):
        """
        Load the configuration for this repository.
        """

        self.basedir = project.rootdir
        self.url = project.url

    def _validateConfiguration(self):
        """
        Validate the configuration, possibly altering/completing it.

        Make sure the external command line tool can be found.
        """

        if self.EXECUTABLE:
            from os import getenv, pathsep
            from os.path import isabs, exists, join
            from svnx.config import ConfigurationError

            if isabs(self.EXECUTABLE):
                ok = exists(self.EXECUTABLE)
            else:
                ok = False
                for path in getenv('PATH', '').split(pathsep):
                    if exists(join(path, self.EXECUTABLE)):
                        ok = True
                        break
            if not ok:
                self.log.critical("Cannot find external command %r",
                                  self.EXECUTABLE)
                raise ConfigurationError("The command %r used "
                                         "by %r does not exist in %r!" %
                                         (self.EXECUTABLE, self.name,
                                          getenv('PATH')))

    def command(self, *args):
        """
        Return the base external command, a sequence suitable to be used
        to init an ExternalCommand instance.
        """

        cmd = [self.EXECUTABLE]
        cmd.extend(args)
        return cmd
