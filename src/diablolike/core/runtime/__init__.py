"""
Runtime: settings, the World aggregate and the fixed-step main loop.

Nothing is re-exported here; import from the submodules directly.
"""
