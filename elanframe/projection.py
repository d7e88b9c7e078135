# Author: Eric Kow
# License: BSD3

"""
Reading a batch of XML nodes into uniform records.

ELAN elements carry a varying subset of their possible attributes.  We
fix the shape once, here: every record has exactly the requested
attributes, in the requested order, with `None` standing in for any
optional attribute the node does not set
"""

from frozendict import frozendict
import pandas as pd

from elanframe.internalutil import (MissingRequiredAttribute,
                                    scoped_string_options)


def project_record(node, index, required, optional):
    """
    Read one node as a read-only mapping whose keys are exactly
    `required + optional` (in that order).

    :param index: position of the node in its batch (for error reports)
    :type index: int

    Raise `MissingRequiredAttribute` if the node lacks one of the
    required attributes
    """
    attrs = node.attrib
    fields = []
    for name in required:
        if name not in attrs:
            raise MissingRequiredAttribute(index, name, tag=node.tag)
        fields.append((name, attrs[name]))
    fields.extend((name, attrs.get(name)) for name in optional)
    return frozendict(fields)


def project_records(nodes, required, optional):
    """
    One record (see `project_record`) per node, in input order.

    A single node missing a required attribute fails the whole batch
    """
    return [project_record(node, i, required, optional)
            for i, node in enumerate(nodes)]


def project_attributes(nodes, required, optional):
    """Read a batch of nodes as a DataFrame.

    Parameters
    ----------
    nodes : iterable of Element
        XML nodes, one per row.

    required : list of str
        Attributes that every node must have.

    optional : list of str
        Attributes that may be missing; missing values are `None`.

    Returns
    -------
    df : DataFrame
        One row per node, in input order, with columns
        `required + optional` and nothing else.
    """
    columns = list(required) + list(optional)
    records = project_records(nodes, required, optional)
    with scoped_string_options():
        return pd.DataFrame([[rec[c] for c in columns] for rec in records],
                            columns=columns, dtype=object)
