"""
SDF Module
==========

Builds Molecule records from chemical table text (MOL blocks / SDF) and
from SMILES, using RDKit for the parsing.
"""

import logging

from rdkit import Chem
from rdkit import RDLogger
from rdkit.Chem import AllChem

from .errors import StructureParseError
from .model import Atom, Bond, Molecule, Point2D


log = logging.getLogger(__name__)

SDF_RECORD_END = '$$$$'


def _first_record(text):
    return text.split(SDF_RECORD_END, 1)[0]


def _atoms_and_bonds(mol, flat=False):
    conf = mol.GetConformer()
    atoms = []
    for atom in mol.GetAtoms():
        pos = conf.GetAtomPosition(atom.GetIdx())
        atoms.append(Atom(element=atom.GetSymbol(), x=pos.x, y=pos.y,
                          z=0.0 if flat else pos.z))
    bonds = [Bond(begin=b.GetBeginAtomIdx(), end=b.GetEndAtomIdx(),
                  order=int(round(b.GetBondTypeAsDouble())) or 1)
             for b in mol.GetBonds()]
    return atoms, bonds


def parse_sdf(text, is_2d=False):
    """
    Parse the first record of an SDF (or a bare MOL block).

    Hydrogens are kept and no sanitization is done, so the atom list
    matches the record line for line.

    Args:
        text (str): SDF or MOL block text
        is_2d (bool): The record holds a 2D depiction; z is set to 0

    Returns:
        Molecule: Atoms and bonds of the record

    Raises:
        StructureParseError: If RDKit cannot read the record
    """
    RDLogger.DisableLog('rdApp.*')
    try:
        mol = Chem.MolFromMolBlock(_first_record(text or ''), sanitize=False, removeHs=False)
    except (RuntimeError, ValueError) as exc:
        raise StructureParseError("Could not parse chemical table text") from exc
    finally:
        RDLogger.EnableLog('rdApp.*')
    if mol is None:
        raise StructureParseError("Could not parse chemical table text")
    if mol.GetNumConformers() == 0:
        raise StructureParseError("Chemical table has no coordinates")

    atoms, bonds = _atoms_and_bonds(mol, flat=is_2d)
    log.debug("Parsed %d atoms and %d bonds (2D=%s)", len(atoms), len(bonds), is_2d)
    return Molecule(atoms=atoms, bonds=bonds, is_2d=is_2d)


def molecule_from_smiles(smiles):
    """
    Build a Molecule from SMILES with explicit hydrogens and 2D coordinates.

    Args:
        smiles (str): SMILES string

    Returns:
        Molecule: 2D molecule whose ``atoms2d`` carry the depiction

    Raises:
        StructureParseError: If the SMILES is not valid
    """
    RDLogger.DisableLog('rdApp.*')
    try:
        mol = Chem.MolFromSmiles(smiles)
    finally:
        RDLogger.EnableLog('rdApp.*')
    if mol is None:
        raise StructureParseError(f"Invalid SMILES: {smiles}")

    mol_with_h = Chem.AddHs(mol)
    AllChem.Compute2DCoords(mol_with_h)
    Chem.Kekulize(mol_with_h, clearAromaticFlags=True)

    atoms, bonds = _atoms_and_bonds(mol_with_h, flat=True)
    return Molecule(
        atoms=atoms,
        bonds=bonds,
        atoms2d=[Point2D(a.x, a.y) for a in atoms],
        smiles=smiles,
        charge=Chem.GetFormalCharge(mol),
        is_2d=True,
    )
