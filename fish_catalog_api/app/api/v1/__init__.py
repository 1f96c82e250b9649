"""
Version 1 of the API.

The fish catalog serves its routes at the root (``/fishes``,
``/admin``) rather than under a version prefix; the package layout is
kept so that a future version can be mounted beside it.
"""
