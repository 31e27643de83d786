"""
Items Module
------------
Default PEIRS item codes. The subscale grouping is informational only;
scoring always works on the flat item list.
"""
from typing import Dict, List, Tuple

PEIRS_SUBSCALES: Dict[str, Tuple[str, ...]] = {
    'pr': ('pr2', 'pr4', 'pr7', 'pr11', 'pr12', 'pr13', 'pr14'),
    't': ('t1', 't2', 't3', 't4', 't5', 't6', 't7'),
    'su': ('su1', 'su2', 'su3'),
    'be': ('be1', 'be2', 'be3'),
    'cn': ('cn1', 'cn2', 'cn3', 'cn4'),
    'fv': ('fv1', 'fv2', 'fv3'),
}

DEFAULT_ITEMS: Tuple[str, ...] = tuple(item for group in PEIRS_SUBSCALES.values() for item in group)


def peirs_items() -> List[str]:
    """Returns a fresh list of the 27 default PEIRS item names."""
    return list(DEFAULT_ITEMS)
