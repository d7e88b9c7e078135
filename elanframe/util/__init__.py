# Author: Eric Kow
# License: BSD3

"""
Helpers for the elan-util command line tool
"""


def add_subcommand(subparsers, module):
    """
    Subparser for a subcommand module, named after the module.

    The first line of the module docstring is the subcommand help; the
    rest of it, if any, goes in the epilog
    """
    name = module.__name__.rsplit('.', 1)[-1]
    first, _, rest = module.__doc__.strip().partition('\n')
    return subparsers.add_parser(name,
                                 help=first.strip(),
                                 epilog=rest.strip() or None)
