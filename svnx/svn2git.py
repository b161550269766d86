# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Frontend capabilities
# :Creato:   sab 17 ott 2026 12:48:36 CEST
# :Licenza:  GNU General Public License
#

"""
Implement the frontend functionalities.
"""

__docformat__ = 'reStructuredText'

__version__ = '0.3.1'

from logging import getLogger
from optparse import OptionParser, OptionGroup, Option
from svnx import Svn2gitBug, Svn2gitException
from svnx.config import Config, ConfigurationError
from svnx.project import Project


class DirtyWorkingTree(Svn2gitException):
    "The working tree of the mirror has pending changes"


class Converter(Project):
    """
    A Converter turns the ``git svn`` mirror of a project into an
    idiomatic git repository, optionally creating and fetching the
    mirror first.

    The whole procedure is strictly sequential: the first failing
    command aborts it, leaving whatever has been done so far in place.
    """

    def bootstrap(self):
        """
        Create the mirror of the Subversion repository.

        Check that ``git svn`` is usable, initialize the mirror with the
        configured layout, register the authors file and fetch the whole
        history.
        """

        from os.path import exists

        if not self.clone:
            raise ConfigurationError('Project "%s" is not configured to '
                                     'clone its repository' % self.name)
        if not self.url:
            raise ConfigurationError('Project "%s" needs the URL of the '
                                     'Subversion repository' % self.name)
        if self.authors and not exists(self.authors):
            raise ConfigurationError('The authors file "%s" does not exist'
                                     % self.authors)

        self.log.info('Bootstrapping "%s" in "%s"', self.url, self.rootdir)

        repository = self.repository()
        repository.checkCapabilities()
        repository.svnInit(trunk=self.trunk, branches=self.branches,
                           tags=self.tags, prefix=self.prefix,
                           username=self.username, metadata=self.metadata)
        if self.authors:
            self.log.info('Using authors file "%s"', self.authors)
            repository.setAuthorsFile(self.authors)

        self.log.info("Fetching, this may take a while...")
        repository.svnFetch(self.revision)
        self.log.info("Bootstrap completed")

    def sanityCheck(self):
        """
        Make sure the root directory hosts a git repository; when working
        on an existing mirror, make sure there are no pending changes.
        """

        repository = self.repository()
        gitdir = repository.gitDir()
        self.log.debug('Using git directory "%s"', gitdir)

        if not self.clone:
            changes = repository.localChanges()
            if changes:
                self.log.critical('The working tree has pending changes:\n%s',
                                  '\n'.join(changes))
                raise DirtyWorkingTree('The working tree of "%s" must be clean'
                                       % self.rootdir)

    def materializeTags(self, candidates):
        """
        Replace each remote tag branch in `candidates` with a real tag.

        An invalid reference is reported and skipped, any other failure
        aborts the procedure.
        """

        from svnx.branches import tag_name

        repository = self.repository()
        for branch in candidates:
            if not repository.isValidRemoteRef(branch):
                self.log.warning('"%s" is not a valid reference, skipping',
                                 branch)
                continue

            tag = tag_name(branch, self.tags_prefix, self.strip_tag_prefix)
            self.log.info('Tagging "%s" as "%s"', branch, tag)
            repository.checkoutRemote(branch)
            repository.createTag(tag, force=self.force_tag)

    def materializeBranches(self, branches):
        """
        Create a local branch for each remote one, except the trunk.
        """

        from svnx.branches import local_name

        repository = self.repository()
        for branch in branches:
            if branch == self.trunk_name:
                continue

            local = local_name(branch, self.prefix)
            if repository.hasLocalBranch(local):
                self.log.info('Local branch "%s" already exists, skipping',
                              local)
                continue

            self.log.info('Creating branch "%s" from "%s"', local, branch)
            repository.checkoutRemote(branch)
            repository.createBranch(local)

    def promoteTrunk(self, branches):
        """
        Recreate the default branch from the trunk, if there is one
        among the remote `branches`.
        """

        if self.trunk_name not in branches:
            return

        self.log.info('Moving "%s" to "%s"', self.default_branch,
                      self.trunk_name)

        repository = self.repository()
        repository.checkoutRemote(self.trunk_name)
        if repository.hasLocalBranch(self.default_branch):
            repository.deleteBranch(self.default_branch)
        repository.createBranch(self.default_branch, force=True)

    def convert(self):
        """
        Convert tags, branches and trunk of the mirror.
        """

        from svnx.branches import classify

        self.log.info('Converting "%s"', self.rootdir)

        self.sanityCheck()

        branches = self.repository().remoteBranches()
        self.log.debug('Remote branches: %s', ', '.join(branches))

        tags, others = classify(branches, self.tags_prefix)
        self.materializeTags(tags)
        self.materializeBranches(others)
        self.promoteTrunk(others)

        self.log.info("Conversion completed")

    def __call__(self):
        from svnx.shwrap import ExternalCommand

        debug, dry_run = ExternalCommand.DEBUG, ExternalCommand.DRY_RUN
        ExternalCommand.DEBUG = self.debug
        ExternalCommand.DRY_RUN = self.config.get(self.name, 'dry-run', False)

        try:
            if self.clone:
                self.bootstrap()
            self.convert()
        except KeyboardInterrupt:
            self.log.warning('Leaving "%s" incomplete, stopped by user',
                             self.rootdir)
            raise
        except Svn2gitBug as e:
            self.log.fatal("Unexpected internal error, please report",
                           exc_info=e)
            raise
        finally:
            ExternalCommand.DEBUG = debug
            ExternalCommand.DRY_RUN = dry_run


class RecogOption(Option):
    """
    Make it possible to recognize an option explicitly given on the
    command line from those simply coming out for their default value.
    """

    def process (self, opt, value, values, parser):
        setattr(values, '__seen_' + self.dest, True)
        return Option.process(self, opt, value, values, parser)


GENERAL_OPTIONS = [
    RecogOption("-D", "--debug", dest="debug",
                action="store_true", default=False,
                help="Log everything, and copy the output of the queries "
                     "to stderr."),
    RecogOption("-v", "--verbose", dest="verbose",
                action="store_true", default=False,
                help="Be verbose, echoing each executed command."),
    RecogOption("-n", "--dry-run", dest="dry_run",
                action="store_true", default=False,
                help="Show the commands, without executing them."),
    RecogOption("-c", "--configfile", metavar="CONFNAME",
                help="Centralized storage of projects info.  With this "
                     "option and no other arguments svn2git will convert "
                     "every project found in the config file."),
]

LAYOUT_OPTIONS = [
    RecogOption("--trunk", metavar="PATH",
                help="Subpath to trunk from the repository URL."),
    RecogOption("--branches", metavar="PATH",
                help="Subpath to branches from the repository URL."),
    RecogOption("--tags", metavar="PATH",
                help="Subpath to tags from the repository URL.  When none "
                     "of --trunk, --branches and --tags is given, the "
                     "standard layout is assumed."),
]

CLONE_OPTIONS = [
    RecogOption("--clone", dest="clone", action="store_true", default=True,
                help="Create the mirror and fetch the Subversion history "
                     "(default)."),
    RecogOption("--noclone", dest="clone", action="store_false",
                help="Work on an already fetched mirror in the root "
                     "directory; SVN_URL is not needed."),
    RecogOption("-C", "--root-directory", dest="root_directory",
                metavar="DIR",
                help="Where the mirror lives, by default the current "
                     "directory."),
    RecogOption("--authors", metavar="FILE",
                help="File mapping Subversion users to git authors."),
    RecogOption("--username", metavar="NAME",
                help="Username for the transports that need it."),
    RecogOption("--no-metadata", dest="metadata", action="store_false",
                default=True,
                help="Do not add the git-svn-id line to the commit "
                     "messages."),
    RecogOption("--prefix", metavar="PREFIX",
                help="Prefix of the remote references created by "
                     "git svn, empty by default."),
    RecogOption("-r", "--revision", metavar="START[:END]",
                help="Fetch only the given range of Subversion revisions."),
]

CONVERSION_OPTIONS = [
    RecogOption("--strip-tag-prefix", dest="strip_tag_prefix",
                metavar="PREFIX",
                help="Remove PREFIX from the start of each tag name."),
    RecogOption("--force-tag", dest="force_tag", action="store_true",
                default=False,
                help="Replace the existing tags with the same name."),
    RecogOption("--default-branch", dest="default_branch", metavar="NAME",
                help="The branch recreated from the trunk, 'master' by "
                     "default."),
]


def main(argv=None):
    """
    Script entry point.

    Parse the command line options and arguments and execute the
    conversion, either of the given SVN_URL or of the projects described
    in the configuration file.  Return the exit status of the process.
    """

    import sys
    from os import getcwd
    from svnx.repository.git import CommandFailure

    usage = "usage: \n\
       1. %prog [options] SVN_URL\n\
       2. %prog [options] --noclone\n\
       3. %prog -c CONFNAME [options] [project ...]\n\
       4. %prog test [--help] [...]"
    parser = OptionParser(usage=usage,
                          version=__version__,
                          option_list=GENERAL_OPTIONS)

    layoutoptions = OptionGroup(parser, "Layout options")
    layoutoptions.add_options(LAYOUT_OPTIONS)

    cloneoptions = OptionGroup(parser, "Clone options")
    cloneoptions.add_options(CLONE_OPTIONS)

    convoptions = OptionGroup(parser, "Conversion options")
    convoptions.add_options(CONVERSION_OPTIONS)

    parser.add_option_group(layoutoptions)
    parser.add_option_group(cloneoptions)
    parser.add_option_group(convoptions)

    options, args = parser.parse_args(argv)

    defaults = {}
    for k,v in options.__dict__.items():
        if k.startswith('__'):
            continue
        if k != 'configfile' and hasattr(options, '__seen_' + k):
            defaults[k.replace('_', '-')] = str(v).replace('%', '%%')

    try:
        if options.configfile:
            with open(options.configfile) as fp:
                config = Config(fp, defaults)

            if not args:
                args = config.projects()
        else:
            if len(args) > 1:
                parser.error("too many arguments")

            config = Config(None, defaults)

            if options.clone and not args:
                parser.print_usage(sys.stderr)
                raise ConfigurationError("SVN_URL is needed, unless "
                                         "--noclone is given")

            config.add_section('project')
            config.set('project', 'root-directory',
                       (options.root_directory or getcwd()).replace('%', '%%'))
            if args:
                config.set('project', 'repository',
                           args[0].replace('%', '%%'))
            args = ['project']

        for projname in args:
            converter = Converter(projname, config)
            converter()
    except CommandFailure as e:
        getLogger('svn2git').critical("%s", e)
        return e.exit_status or 1
    except (Svn2gitException, EnvironmentError) as e:
        getLogger('svn2git').critical("%s", e)
        return 1

    return 0
