# -*- mode: python; coding: utf-8 -*-
# :Progetto: svnx -- Remote branches classification
# :Creato:   sab 17 ott 2026 11:12:50 CEST
# :Licenza:  GNU General Public License
#

"""
This module knows how to read the list of remote branches of a
``git svn`` mirror and how to tell the Subversion tags apart from the
real branches.

All the matching is done with plain string prefixes: the configured
paths may contain characters that would be special in a pattern.
"""

__docformat__ = 'reStructuredText'

from logging import getLogger

SYMBOLIC_REF_MARK = ' -> '


def normalize_prefix(prefix):
    """
    Return `prefix` terminated by a slash.
    """

    if not prefix.endswith('/'):
        prefix += '/'
    return prefix


def parse_branch_listing(lines):
    """
    Extract the branch names from the output of ``git branch -r``.

    `lines` is any iterable over the lines of the output.  Each name is
    stripped of the surrounding whitespace; empty lines and symbolic
    entries like ``origin/HEAD -> origin/trunk`` cannot name a branch,
    so they are logged and skipped.
    """

    log = getLogger('svn2git.branches')

    names = []
    for line in lines:
        name = line.strip()
        if not name:
            continue
        if SYMBOLIC_REF_MARK in name or name.startswith('*'):
            log.warning('Skipping unparseable remote branch entry "%s"', name)
            continue
        names.append(name)
    return names


def classify(branches, tags_prefix):
    """
    Partition the remote `branches` in two lists, ``(tags, others)``.

    A branch is a tag candidate when its name starts with `tags_prefix`,
    that gets terminated by a slash when it isn't already.  Both lists
    keep the original order, and each branch ends up in exactly one of
    them.
    """

    tags_prefix = normalize_prefix(tags_prefix)

    tags = []
    others = []
    for branch in branches:
        branch = branch.strip()
        if branch.startswith(tags_prefix):
            tags.append(branch)
        else:
            others.append(branch)
    return tags, others


def tag_name(branch, tags_prefix, strip_prefix=None):
    """
    Compute the name of the tag that will replace the remote `branch`.

    The `tags_prefix` is removed from the front of the branch name,
    and then `strip_prefix` as well, if the remainder starts with it.
    An empty result is returned as is, with a warning.
    """

    tags_prefix = normalize_prefix(tags_prefix)

    name = branch
    if name.startswith(tags_prefix):
        name = name[len(tags_prefix):]
    if strip_prefix and name.startswith(strip_prefix):
        name = name[len(strip_prefix):]
    if not name:
        getLogger('svn2git.branches').warning(
            'Remote branch "%s" yields an empty tag name', branch)
    return name


def local_name(branch, remote_prefix):
    """
    Return the name of the local branch corresponding to the remote
    `branch`, that is without the `remote_prefix` set on ``git svn init``.
    """

    if remote_prefix and branch.startswith(remote_prefix):
        return branch[len(remote_prefix):]
    return branch
