"""
pgscript - Project graph to dialogue script converter

Converts node graphs exported by a visual graph editor (text nodes joined
by directed associations) into normalized script documents: a named,
versioned script with a role table and a tree of content entities.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pgscript")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from pgscript.graph.factory import ConversionOptions, convert_document, convert_graph
from pgscript.graph.kinds import NodeKind
from pgscript.graph.models import Entity, GraphDocument, Role, ScriptDocument

__all__ = [
    "__version__",
    "ConversionOptions",
    "convert_document",
    "convert_graph",
    "Entity",
    "GraphDocument",
    "NodeKind",
    "Role",
    "ScriptDocument",
]
