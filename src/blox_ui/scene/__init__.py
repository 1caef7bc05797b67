"""
Scene Package.

The normalized design-node contract and its mapping onto entity records.
"""
