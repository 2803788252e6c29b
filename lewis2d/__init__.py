"""
Lewis2D Package
===============

A Python package that lays out and draws 2D Lewis structures (bonds,
lone-pair dots and element labels) for small molecules loaded from
PubChem, SDF text or SMILES.

Main Functions:
    draw_lewis(molecule, **kwargs): Drawing commands for a Molecule
    lewis(identifier, **kwargs): Resolve a CID, SMILES or name and return SVG
    get_compound_info(name_or_cid): Load a compound and its metadata from PubChem
    autocomplete(query): Compound name suggestions for a search box
    format_properties(molecule): Info panel property rows
    format_info_text(molecule): Info panel description text
    format_weight(weight): Molecular weight label
"""

from .core import (
    draw_lewis,
    lewis,
    load_molecule,
)
from .errors import (
    CompoundNotFoundError,
    Lewis2DError,
    StructureLookupError,
    StructureParseError,
)
from .formatting import format_info_text, format_properties, format_weight
from .model import Atom, Bond, Molecule, Point2D
from .pubchem import autocomplete, get_compound_info
from .svg import ops_to_svg

__version__ = "1.0.0"
__all__ = [
    'draw_lewis',
    'lewis',
    'load_molecule',
    'get_compound_info',
    'autocomplete',
    'format_properties',
    'format_info_text',
    'format_weight',
    'ops_to_svg',
    'Atom',
    'Bond',
    'Molecule',
    'Point2D',
    'Lewis2DError',
    'StructureLookupError',
    'CompoundNotFoundError',
    'StructureParseError',
]
