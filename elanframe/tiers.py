# Author: Eric Kow
# License: BSD3

"""
Tiers and their hierarchy.

In ELAN a tier may be nested under a parent tier (`PARENT_REF`).  A
child tier which does not say who the participant, annotator or locale
is is generally understood to share them with its parent, so when
listing tiers we fill these in from the nearest ancestor that does
"""

import warnings

import pandas as pd

from elanframe.annotation import Tier, TIER_COLS
from elanframe.eaf import (TIER_REQ_ATTRS, TIER_OPT_ATTRS, COLUMN_NAMES,
                           tier_nodes)
from elanframe.internalutil import (CyclicTierHierarchy, UnknownParentTier,
                                    scoped_string_options)
from elanframe.projection import project_records


class TierHierarchyResolver(object):
    """
    Parent-child relationships between the tiers of a single document.

    :param tiers: tiers as they are written in the document
    :type tiers: [Tier]
    """
    def __init__(self, tiers):
        self.tiers = list(tiers)
        self._by_id = {}
        for tier in self.tiers:
            if tier.tier_id in self._by_id:
                warnings.warn('Duplicate tier %s (the first one is used as '
                              'parent)' % tier.tier_id)
                continue
            self._by_id[tier.tier_id] = tier

    @classmethod
    def from_nodes(cls, nodes):
        """
        Resolver for the tiers as written in a batch of `TIER` nodes

        Raise `MissingRequiredAttribute` if a node lacks its id or
        linguistic type
        """
        records = project_records(nodes, TIER_REQ_ATTRS, TIER_OPT_ATTRS)
        return cls(Tier(**{COLUMN_NAMES[k]: v for k, v in r.items()})
                   for r in records)

    def parent(self, tier):
        """
        The parent of a tier (None for a root tier)

        Raise `UnknownParentTier` if the parent is not in the document
        """
        if tier.parent_ref is None:
            return None
        try:
            return self._by_id[tier.parent_ref]
        except KeyError:
            raise UnknownParentTier(tier.tier_id, tier.parent_ref)

    def ancestors(self, tier):
        """
        The ancestors of a tier, nearest first.

        Raise `CyclicTierHierarchy` if the walk comes back to a tier
        it has already seen
        """
        visited = set([tier.tier_id])
        res = []
        current = self.parent(tier)
        while current is not None:
            if current.tier_id in visited:
                raise CyclicTierHierarchy(current.tier_id)
            visited.add(current.tier_id)
            res.append(current)
            current = self.parent(current)
        return res

    def inherit(self, tier):
        """
        Copy of the tier with any missing inheritable fields taken
        from its nearest ancestor that has them
        """
        chain = self.ancestors(tier)
        updates = {}
        for field in tier.missing():
            for ancestor in chain:
                val = getattr(ancestor, field)
                if val is not None:
                    updates[field] = val
                    break
        return tier._replace(**updates)

    def resolve(self):
        """
        All tiers, in document order, with missing fields inherited
        (see `inherit`).

        Every tier has its ancestry checked, so a cycle anywhere in the
        document is reported even if no tier on it needed anything
        """
        return [self.inherit(t) for t in self.tiers]


def read_tiers(doc, inherit_missing_attrs=True):
    """Read the list of tiers in an ELAN document.

    Parameters
    ----------
    doc : ElementTree
        Parsed ELAN document (see `elanframe.eaf.load_document`).

    inherit_missing_attrs : boolean, defaults to True
        If True, fill in missing participant, annotator and locale from
        the nearest ancestor tier that has them.

    Returns
    -------
    df : DataFrame
        One row per tier, in document order; missing values are None.
    """
    resolver = TierHierarchyResolver.from_nodes(tier_nodes(doc))
    tiers = resolver.resolve() if inherit_missing_attrs else resolver.tiers
    with scoped_string_options():
        return pd.DataFrame(tiers, columns=TIER_COLS, dtype=object)
