# Author: Eric Kow
# License: BSD3

"""
Utility functions and exceptions which are meant to be used by elanframe
but aren't expected to be too useful outside of it
"""

from contextlib import contextmanager

import pandas as pd


class ElanException(Exception):
    """
    Anything that goes wrong when reading an ELAN document into tables
    """
    def __init__(self, *args, **kw):
        Exception.__init__(self, *args, **kw)


class DocumentNotFound(ElanException, IOError):
    def __init__(self, path):
        ElanException.__init__(self, "file '%s' does not exist; "
                               "check working directory" % path)
        self.path = path


class InvalidArgument(ElanException, ValueError):
    pass


class NotSupported(ElanException, NotImplementedError):
    pass


class MissingRequiredAttribute(ElanException):
    """
    Node number `index` in a batch lacks the required attribute `attr`
    """
    def __init__(self, index, attr, tag=None):
        where = "node %d" % index if tag is None\
            else "%s node %d" % (tag, index)
        ElanException.__init__(self, "%s has no %s attribute" % (where, attr))
        self.index = index
        self.attr = attr


class MalformedTimeValue(ElanException, ValueError):
    def __init__(self, ts_id, raw):
        ElanException.__init__(self, "time slot %s has non-numeric "
                               "TIME_VALUE %r" % (ts_id, raw))
        self.ts_id = ts_id
        self.raw = raw


class UnknownTimeSlot(ElanException, KeyError):
    def __init__(self, ts_id):
        ElanException.__init__(self, "no time slot with id %s" % ts_id)
        self.ts_id = ts_id

    def __str__(self):
        # KeyError would otherwise show the repr of the message
        return self.args[0]


class UnresolvedTimeSlot(ElanException):
    def __init__(self, annotation_id, ts_id):
        ElanException.__init__(self, "annotation %s refers to unknown time "
                               "slot %s" % (annotation_id, ts_id))
        self.annotation_id = annotation_id
        self.ts_id = ts_id


class CyclicTierHierarchy(ElanException):
    def __init__(self, tier_id):
        ElanException.__init__(self, "tier %s is its own ancestor "
                               "(PARENT_REF cycle)" % tier_id)
        self.tier_id = tier_id


class UnknownParentTier(ElanException):
    def __init__(self, tier_id, parent_ref):
        ElanException.__init__(self, "tier %s has PARENT_REF %s, but there "
                               "is no such tier" % (tier_id, parent_ref))
        self.tier_id = tier_id
        self.parent_ref = parent_ref


@contextmanager
def scoped_string_options():
    """
    Keep string columns as plain python objects (and missing values as
    `None`) for the duration of the block.

    This temporarily switches off pandas' string dtype inference; the
    previous setting is restored on exit, whether or not the block
    raised
    """
    with pd.option_context('future.infer_string', False):
        yield


def node_text(node):
    """
    All the text inside an XML node, concatenated in document order
    and kept as is (whitespace included).  An element with no text at
    all gives the empty string
    """
    return ''.join(node.itertext())
