"""Selection tree: the state engine behind directory picking and export.

This package provides the node model of a picked directory, its asynchronous
construction from a directory source, row-unit sizing for layout, and flattening of
the enabled files into the ordered path list that is exported.
"""
