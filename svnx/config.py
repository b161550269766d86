# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Configuration bits
# :Creato:   sab 17 ott 2026 10:21:05 CEST
# :Licenza:  GNU General Public License
#

"""
Handle the configuration details.
"""

__docformat__ = 'reStructuredText'

from io import StringIO
from configparser import ConfigParser, RawConfigParser, DEFAULTSECT
from svnx import Svn2gitException


class ConfigurationError(Svn2gitException):
    """Configuration error"""


_UNSET = object()

LOGGING_SUPER_SECTION = '[[logging]]'
BASIC_LOGGING_CONFIG = """\
[formatters]
keys = console

[formatter_console]
format =  %(asctime)s [%(levelname).1s] %(message)s
datefmt = %H:%M:%S

[loggers]
keys = root

[logger_root]
level = INFO
handlers = console

[handlers]
keys = console

[handler_console]
class = StreamHandler
formatter = console
args = (sys.stdout,)
level = INFO
"""


class Config(ConfigParser):
    '''
    Syntactic sugar around standard ConfigParser, for easier access to
    the configuration.  Every section whose name does not contain a
    colon describes a conversion project; the ``[DEFAULT]`` section
    may restrict them with a ``projects`` entry.

    This is where the logging system gets initialized, possibly merging a
    logging specific configuration section, introduced by a *supersection*
    ``[[logging]]``.
    '''

    def __init__(self, fp, defaults):
        ConfigParser.__init__(self)

        loggingcfg = None
        if fp:
            config = fp.read()

            # Look for a [[logging]] separator, that introduce a
            # standard logging section
            cfgs = config.split(LOGGING_SUPER_SECTION)
            if len(cfgs) == 2:
                svn2gitcfg, loggingcfg = cfgs
            else:
                svn2gitcfg = cfgs[0]

            self.read_string(svn2gitcfg)

        # Override the defaults with the command line options
        if defaults:
            self.read_dict({DEFAULTSECT: defaults})

        self._setupLogging(loggingcfg and loggingcfg or BASIC_LOGGING_CONFIG)

    def _setupLogging(self, config):
        """
        Configure the logging system from an ini-style `config` string.

        When the ``debug`` default is set, the root logger and all its
        handlers are forced to the ``DEBUG`` level.
        """

        import logging
        from logging.config import fileConfig

        cp = RawConfigParser()
        cp.read_file(StringIO(config))
        fileConfig(cp, disable_existing_loggers=False)

        if self.get(DEFAULTSECT, 'debug', False):
            root = logging.getLogger()
            root.setLevel(logging.DEBUG)
            for h in root.handlers:
                h.setLevel(logging.DEBUG)

    def projects(self):
        """
        Return either the default projects or all the projects in the
        in the configuration.
        """

        defaultp = self.getTuple(DEFAULTSECT, 'projects')
        return defaultp or [s for s in self.sections() if not ':' in s]

    def get(self, section, option, default=None, raw=False, vars=None,
            fallback=_UNSET):
        """Get an option value for a given section or the default value.

        All % interpolations are expanded in the return values, based on the
        defaults passed into the constructor, unless the optional argument
        `raw` is true.  Additional substitutions may be provided using the
        `vars` argument.

        The literal values ``None``, ``True`` and ``False`` are converted
        to the corresponding Python objects.  Calls using the standard
        `fallback` keyword, like those made by the interpolation machinery,
        get the plain string value instead.
        """

        if fallback is not _UNSET:
            return ConfigParser.get(self, section, option, raw=raw,
                                    vars=vars, fallback=fallback)

        value = ConfigParser.get(self, section, option, raw=raw, vars=vars,
                                 fallback=default)

        if value == 'None':
            return default
        elif value == 'True':
            return True
        elif value == 'False':
            return False
        else:
            return value

    def getTuple(self, section, option, default=None):
        """
        Parse the requested option as a tuple, if its value starts with
        an open bracket, otherwise consider the value a single item
        tuple.
        """

        value = self.get(section, option, default)
        if value:
            if value.startswith('('):
                items = value.strip()[1:-1]
            else:
                items = value
            return [i.strip() for i in items.split(',')]
        else:
            return []
