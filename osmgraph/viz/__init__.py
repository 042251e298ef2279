"""
Visualization for osmgraph road graphs.

Requires the ``viz`` extra: ``pip install osmgraph[viz]``

Example::

    from osmgraph.viz import GraphPreview
"""

from osmgraph.viz.preview import GraphPreview, highway_color

__all__ = [
    "GraphPreview",
    "highway_color",
]
