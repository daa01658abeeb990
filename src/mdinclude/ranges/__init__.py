"""Range selection module.

Exports ``RangeSelector``, ``Selection`` and the ``select_range``
convenience function.
"""
from __future__ import annotations

from mdinclude.ranges.selector import RangeSelector, Selection, select_range

__all__ = ["RangeSelector", "Selection", "select_range"]
