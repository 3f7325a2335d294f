"""
geopath.pathfinding

Path-finding strategies.

Responsibilities:
- The corridor grid every strategy searches.
- A*, Dijkstra, and BFS behind one `find_path` contract.
- A registry that maps algorithm ids to strategies.
"""

# Package marker; import strategies from their submodules.


# --- Module Notes -----------------------------------------------------------
# Strategies are pure CPU work with no I/O; the service runs them off the event loop.
