# Author: Eric Kow
# License: BSD3

"""
Time slots: the named points in media time that alignable annotations
refer to
"""

import math
import warnings

import pandas as pd

from elanframe.annotation import TimeSlot, TIME_SLOT_COLS
from elanframe.eaf import TIME_SLOT_ID, TIME_VALUE, time_slot_nodes
from elanframe.internalutil import (MalformedTimeValue, UnknownTimeSlot,
                                    scoped_string_options)
from elanframe.projection import project_records


def _parse_time(ts_id, raw):
    """
    Time value of a slot as a number, or None if the slot is
    unaligned
    """
    if raw is None:
        return None
    try:
        time = float(raw)
    except ValueError:
        raise MalformedTimeValue(ts_id, raw)
    if not math.isfinite(time):
        raise MalformedTimeValue(ts_id, raw)
    return time


class TimeSlotTable(object):
    """
    Lookup from time slot id to time value (ms).

    Build these with `TimeSlotTable.build`
    """
    def __init__(self, slots):
        self.slots = list(slots)
        self._times = {}
        for slot in self.slots:
            if slot.ts_id in self._times:
                warnings.warn('Duplicate time slot %s (keeping the first '
                              'one)' % slot.ts_id)
                continue
            self._times[slot.ts_id] = slot.time

    @classmethod
    def build(cls, nodes):
        """
        Read a table from `TIME_SLOT` nodes

        Raise `MalformedTimeValue` if a node has a `TIME_VALUE` that
        isn't a number
        """
        records = project_records(nodes, [TIME_SLOT_ID], [TIME_VALUE])
        return cls(TimeSlot(r[TIME_SLOT_ID],
                            _parse_time(r[TIME_SLOT_ID], r[TIME_VALUE]))
                   for r in records)

    def __len__(self):
        return len(self._times)

    def __contains__(self, ts_id):
        return ts_id in self._times

    def lookup(self, ts_id):
        """
        Time value for the given slot (None if it is unaligned)

        Raise `UnknownTimeSlot` if there is no such slot; whether that
        is fatal is up to the caller
        """
        try:
            return self._times[ts_id]
        except KeyError:
            raise UnknownTimeSlot(ts_id)

    def to_frame(self):
        "DataFrame with a row per slot, in document order"
        with scoped_string_options():
            return pd.DataFrame(self.slots, columns=TIME_SLOT_COLS)\
                     .astype({'ts_id': object, 'time': float})


def read_time_slots(doc):
    """
    Read in the time slots of an ELAN document

    :rtype: DataFrame (columns `ts_id`, `time`)
    """
    return TimeSlotTable.build(time_slot_nodes(doc)).to_frame()
