"""
Low-level representation of ELAN annotations, one record type per table
row.

As in the ELAN file itself, references between records are kept as plain
identifiers: a tier knows the id of its parent tier, a reference
annotation knows the id of the annotation it points to.  Nothing here
attempts to follow those references; see `elanframe.tiers` for the one
place where we do (inheriting tier metadata).

Absent optional values are `None`, never the empty string.
"""

# Author: Eric Kow
# License: CeCILL-B (French BSD3)

# pylint: disable=too-few-public-methods

from collections import namedtuple
from enum import Enum


class AnnotationKind(Enum):
    """
    The two shapes an ELAN annotation can take
    """
    ALIGNABLE = 'ALIGNABLE'
    "anchored to a pair of time slots"

    REF = 'REF'
    "pointing to another annotation instead of carrying its own times"

    @classmethod
    def coerce(cls, value):
        """
        Return the kind for either a `AnnotationKind` or its (case
        insensitive) name; `"REFERENCE"` is understood as `REF`

        Raise `ValueError` for anything else
        """
        if isinstance(value, cls):
            return value
        name = str(value).upper()
        if name == 'REFERENCE':
            name = 'REF'
        return cls(name)


class TimeSlot(namedtuple('TimeSlot', ['ts_id', 'time'])):
    """
    A named point in media time (milliseconds); `time` is `None` for
    unaligned slots
    """


class Tier(namedtuple('Tier',
                      ['tier_id',
                       'linguistic_type',
                       'participant',
                       'annotator',
                       'locale',
                       'parent_ref'])):
    """
    A named annotation track
    """
    INHERITABLE = ('participant', 'annotator', 'locale')
    "fields a tier may pick up from its ancestors"

    def missing(self):
        "inheritable fields that this tier does not set itself"
        return [f for f in self.INHERITABLE if getattr(self, f) is None]


class AlignableAnnotation(namedtuple('AlignableAnnotation',
                                     ['tier_id',
                                      'annotation_id',
                                      't0_id',
                                      't0',
                                      't1_id',
                                      't1',
                                      'value',
                                      'svg_ref',
                                      'ext_ref'])):
    """
    Time-anchored annotation, with its time slot references resolved
    (`t0_id` to `t0`, `t1_id` to `t1`)
    """


class RefAnnotation(namedtuple('RefAnnotation',
                               ['tier_id',
                                'annotation_id',
                                'annotation_ref',
                                'value',
                                'previous_annotation',
                                'ext_ref'])):
    """
    Annotation hanging off another one (`annotation_ref`), typically
    on an ancestor tier.  `previous_annotation` orders siblings
    """


TIME_SLOT_COLS = list(TimeSlot._fields)

TIER_COLS = list(Tier._fields)

ALIGNABLE_COLS = list(AlignableAnnotation._fields)

REF_COLS = list(RefAnnotation._fields)

ANNOTATION_COLS = {
    AnnotationKind.ALIGNABLE: ALIGNABLE_COLS,
    AnnotationKind.REF: REF_COLS,
}

TIME_COLS = ['t0', 't1']
"columns holding resolved times (floats, NaN when unaligned)"
