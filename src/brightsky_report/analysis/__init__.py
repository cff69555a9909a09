"""Joins between decoded observations and stations.

This is the domain logic layer between ``schemas`` and ``renderers``.

Dependency rule: analysis/ imports from ``schemas`` only.
It never reads input or produces text.

Modules:
  - association: observations + stations -> (observation, station) pairs
"""

from brightsky_report.analysis.association import associate, find_owning_station

__all__ = ["associate", "find_owning_station"]
