"""
Core Module
===========

Entry points: draw a Lewis structure for a molecule, or resolve any
chemical identifier first and return the drawing as SVG.
"""

import logging

from . import pubchem
from .errors import StructureParseError
from .model import Molecule
from .render import CANVAS_HEIGHT, CANVAS_WIDTH, LABEL_BACKGROUND, build_lewis_ops
from .sdf import molecule_from_smiles
from .svg import ops_to_svg


log = logging.getLogger(__name__)


def draw_lewis(molecule, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, **options):
    """
    Lay out and draw the Lewis structure of ``molecule``.

    Every call starts from scratch, so it can be repeated for each newly
    loaded molecule or style change.

    Args:
        molecule (Molecule): Molecule to draw; None or empty draws nothing
        width (float): Drawing surface width (default: 300)
        height (float): Drawing surface height (default: 250)
        **options: See ``render.build_lewis_ops``

    Returns:
        list: Drawing commands in layer order
    """
    return build_lewis_ops(molecule, width, height, **options)


def load_molecule(identifier):
    """
    Turn a chemical identifier into a Molecule.

    Recognized, in order:
    - Molecule instances (returned as is)
    - PubChem CID (int or numeric string, e.g. 962)
    - SMILES strings (e.g. 'CCO'), parsed locally with RDKit
    - Compound names (e.g. 'caffeine'), looked up on PubChem

    Raises:
        CompoundNotFoundError: If the name matches no compound
        StructureLookupError: If PubChem cannot provide the structure
    """
    if isinstance(identifier, Molecule):
        return identifier
    text = str(identifier).strip()
    if (isinstance(identifier, int) and not isinstance(identifier, bool)) or text.isdigit():
        return pubchem.get_compound_info(int(text))
    try:
        return molecule_from_smiles(text)
    except StructureParseError:
        log.debug("%r is not SMILES, looking it up by name", text)
    return pubchem.get_compound_info(text)


def lewis(identifier, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, **options):
    """
    Resolve an identifier and return its Lewis structure as SVG.

    Args:
        identifier: Molecule, CID, SMILES or compound name
        width (float): Drawing surface width (default: 300)
        height (float): Drawing surface height (default: 250)
        **options: Options:
            - background (str): Surface color (default: '#1a1a2e')
            - padding (float): Margin around the drawing (default: 25)
            - use_2d_coords (bool): Use supplied 2D coordinates (default: True)
            - bond_length (float): VSEPR bond length (default: 35)

    Returns:
        str: SVG document
    """
    molecule = load_molecule(identifier)
    ops = draw_lewis(molecule, width, height, **options)
    return ops_to_svg(ops, width, height, options.get('background', LABEL_BACKGROUND))
