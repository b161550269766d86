# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Project details
# :Creato:   sab 17 ott 2026 10:47:19 CEST
# :Licenza:  GNU General Public License
#

"""
This module implements the Project class, that collects the settings of
a single conversion and gives access to the git repository hosting the
Subversion mirror.
"""

__docformat__ = 'reStructuredText'

from svnx import Svn2gitException
from svnx.config import ConfigurationError


class UnknownProjectError(Svn2gitException):
    "Project does not exist"


class Project(object):
    """
    This class collects the information related to a single conversion.
    All the setup comes from a section in the configuration file
    (.ini-like format) with the same name as the project, completed by
    its ``[DEFAULT]`` section.

    Recognized options are:

    repository
      The URL of the Subversion repository. It is mandatory when the
      mirror must be cloned.

    root-directory
      The directory that contains (or will contain) the ``git svn``
      mirror. It supports the conventional "~user" notation and
      defaults to the current directory.

    trunk, branches, tags
      The layout of the Subversion repository, relative to its URL.
      When none of them is given the standard layout is assumed.

    authors
      A file mapping Subversion user names to git authors.

    clone
      Whether the mirror must be created and fetched first, ``True`` by
      default.

    prefix
      The prefix of the remote references created by ``git svn``,
      empty by default.

    strip-tag-prefix
      A prefix removed from the start of every tag name.

    force-tag
      Overwrite existing tags with the same name.

    default-branch
      The branch that will be recreated from the trunk, ``master`` by
      default.

    username, metadata, revision
      Passed along to ``git svn init`` and ``git svn fetch``.
    """

    def __init__(self, name, config):
        """
        Initialize a new instance representing the project `name`.
        """

        from configparser import Error

        self.loghandler = None

        if not config.has_section(name):
            raise UnknownProjectError("'%s' is not a known project" % name)

        self.config = config
        self.name = name
        self._repository = None
        try:
            self._load()
        except Error as e:
            raise ConfigurationError('Invalid configuration in section %s: %s'
                                     % (self.name, str(e)))

    def _load(self):
        """
        Load relevant information from the configuration.
        """

        from os import makedirs
        from os.path import exists, expanduser, abspath
        from logging import getLogger, DEBUG, NOTSET, WARNING, FileHandler, \
             Formatter

        def cget(option, default=None, raw=False):
            return self.config.get(self.name, option, default, raw=raw)

        self.verbose = cget('verbose', False)
        self.debug = cget('debug', False)
        rootdir = cget('root-directory', '.')
        self.rootdir = abspath(expanduser(rootdir))

        self.url = cget('repository')
        self.clone = cget('clone', True)
        self.trunk = cget('trunk')
        self.branches = cget('branches')
        self.tags = cget('tags')
        self.authors = cget('authors')
        if self.authors:
            self.authors = abspath(expanduser(self.authors))
        self.prefix = cget('prefix', '')
        self.username = cget('username')
        self.metadata = cget('metadata', True)
        self.revision = cget('revision')
        self.strip_tag_prefix = cget('strip-tag-prefix')
        self.force_tag = cget('force-tag', False)
        self.default_branch = cget('default-branch', 'master')
        self.git_command = cget('git-command', 'git')

        if self.clone and not exists(self.rootdir):
            makedirs(self.rootdir)

        self.log = getLogger('svn2git.project.%s' % self.name)
        if self.debug:
            self.log.setLevel(DEBUG)

        self.logfile = cget('log-file')
        if self.logfile:
            formatter = Formatter(
                cget('log-format', '%(asctime)s %(levelname)8s: %(message)s',
                     raw=True),
                cget('log-datefmt', '%Y-%m-%d %H:%M:%S', raw=True))
            self.loghandler = FileHandler(abspath(expanduser(self.logfile)))
            self.loghandler.setFormatter(formatter)
            self.loghandler.setLevel(DEBUG)
            getLogger('svn2git').addHandler(self.loghandler)

        # Echo the executed commands only when verbose
        if self.verbose or self.debug:
            getLogger('svn2git.shell').setLevel(NOTSET)
        else:
            getLogger('svn2git.shell').setLevel(WARNING)

    def __del__(self):
        if self.loghandler is not None:
            from logging import getLogger
            getLogger('svn2git').removeHandler(self.loghandler)
            self.loghandler.close()

    @property
    def tags_prefix(self):
        """
        The prefix of the remote references ``git svn`` creates for the
        Subversion tags, ending with a slash.
        """

        from svnx.branches import normalize_prefix

        return normalize_prefix(self.prefix + 'tags')

    @property
    def trunk_name(self):
        """
        The name of the remote reference ``git svn`` creates for the trunk.
        """

        return self.prefix + 'trunk'

    def repository(self):
        """
        Return the GitRepository hosting the mirror.
        """

        from svnx.repository.git import GitRepository

        if self._repository is None:
            self._repository = GitRepository(self)
        return self._repository
