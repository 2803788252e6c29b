"""
PubChem Module
==============

Fetches compound records from PubChem through PubChemPy and assembles
the Molecule the Lewis renderer and the info panel consume: 3D conformer
atoms for the 3D view, 2D depiction coordinates for the Lewis drawing,
and the usual descriptive properties.
"""

import json
import logging
import re
from urllib.error import URLError
from urllib.parse import quote
from urllib.request import urlopen

import pubchempy as pcp

from .errors import CompoundNotFoundError, StructureLookupError
from .model import Point2D
from .sdf import parse_sdf


log = logging.getLogger(__name__)

PROPERTIES = [
    'MolecularFormula',
    'MolecularWeight',
    'IUPACName',
    'Title',
    'Charge',
    'XLogP',
    'TPSA',
    'HBondDonorCount',
    'HBondAcceptorCount',
    'RotatableBondCount',
    'Complexity',
    'SMILES',
    'InChI',
    'ExactMass',
]

AUTOCOMPLETE_URL = 'https://pubchem.ncbi.nlm.nih.gov/rest/autocomplete/compound/{query}/json?limit={limit}'
AUTOCOMPLETE_TIMEOUT = 10

MAX_DESCRIPTION_SENTENCES = 3
MAX_DESCRIPTION_LENGTH = 300

_TRANSPORT_ERRORS = (pcp.PubChemHTTPError, URLError)


def _to_float(value):
    if value is None or value == '':
        return None
    return float(value)


def search_by_name(query, max_results=10):
    """
    Search compounds by name.

    Args:
        query (str): Compound name
        max_results (int): Maximum number of compounds returned

    Returns:
        list: Property dicts, as from ``get_compound_properties``
    """
    try:
        cids = pcp.get_cids(query, 'name')
    except _TRANSPORT_ERRORS as exc:
        log.warning("Search for %r failed: %s", query, exc)
        return []
    if not cids:
        return []
    return get_compound_properties(cids[:max_results])


def autocomplete(query, max_results=8):
    """
    Suggest compound names starting with ``query``.

    PubChemPy does not wrap PubChem's autocomplete service, so it is read
    directly. Failures give no suggestions.

    Args:
        query (str): Partial compound name
        max_results (int): Maximum number of suggestions

    Returns:
        list: Compound names
    """
    if not query or not query.strip():
        return []
    url = AUTOCOMPLETE_URL.format(query=quote(query.strip(), safe=''), limit=int(max_results))
    try:
        with urlopen(url, timeout=AUTOCOMPLETE_TIMEOUT) as response:
            data = json.loads(response.read().decode())
    except (URLError, ValueError) as exc:
        log.warning("Autocomplete for %r failed: %s", query, exc)
        return []
    return (data.get('dictionary_terms') or {}).get('compound', [])[:max_results]


def get_compound_properties(cids):
    """Fetch the property table rows for one CID or a list of CIDs."""
    try:
        return pcp.get_properties(PROPERTIES, cids, 'cid') or []
    except _TRANSPORT_ERRORS as exc:
        log.warning("Property fetch for %s failed: %s", cids, exc)
        return []


def get_2d_structure(cid):
    """
    Fetch the 2D depiction record of a compound.

    Raises:
        CompoundNotFoundError: If PubChem has no record for the CID
        StructureLookupError: If the record cannot be retrieved
    """
    try:
        sdf = pcp.get_sdf(cid, 'cid')
    except _TRANSPORT_ERRORS as exc:
        raise StructureLookupError(f"2D structure of CID {cid} not available") from exc
    if not sdf:
        raise CompoundNotFoundError(f"Compound not found: CID {cid}")
    return parse_sdf(sdf, is_2d=True)


def get_3d_structure(cid):
    """
    Fetch a 3D conformer, falling back to the 2D record when none exists.

    Raises:
        StructureLookupError: If neither structure is available
    """
    try:
        sdf = pcp.get_sdf(cid, 'cid', record_type='3d')
    except _TRANSPORT_ERRORS as exc:
        log.warning("3D structure of CID %s failed (%s), trying 2D", cid, exc)
        sdf = None
    if not sdf:
        log.warning("3D structure of CID %s not available, trying 2D", cid)
        return get_2d_structure(cid)
    return parse_sdf(sdf)


def _shorten_description(text):
    sentences = re.findall(r'[^.!?]+[.!?]+', text) or [text]
    desc = ' '.join(s.strip() for s in sentences[:MAX_DESCRIPTION_SENTENCES]).strip()
    if len(desc) > MAX_DESCRIPTION_LENGTH:
        desc = desc[:MAX_DESCRIPTION_LENGTH - 3] + '...'
    return desc


def get_description(cid):
    """Return a short description of the compound, or None."""
    try:
        data = pcp.get_json(cid, 'cid', 'compound', 'description')
    except _TRANSPORT_ERRORS as exc:
        log.warning("Description of CID %s failed: %s", cid, exc)
        return None
    if not data:
        return None
    for info in data.get('InformationList', {}).get('Information', []):
        if info.get('Description'):
            return _shorten_description(info['Description'])
    return None


def _resolve_cid(name_or_cid):
    if (isinstance(name_or_cid, int) and not isinstance(name_or_cid, bool)) or re.match(r'^\d+$', str(name_or_cid)):
        return int(name_or_cid)
    try:
        cids = pcp.get_cids(name_or_cid, 'name')
    except _TRANSPORT_ERRORS as exc:
        raise StructureLookupError(f"Lookup of {name_or_cid!r} failed") from exc
    if not cids:
        raise CompoundNotFoundError(f"Compound not found: {name_or_cid}")
    return cids[0]


def get_compound_info(name_or_cid):
    """
    Resolve a compound and assemble everything needed to display it.

    Args:
        name_or_cid (str or int): Compound name, or PubChem CID

    Returns:
        Molecule: 3D atoms and bonds (2D when no conformer exists), the 2D
        depiction in ``atoms2d`` and the descriptive properties

    Raises:
        CompoundNotFoundError: If the name or CID matches no compound
        StructureLookupError: If the structure cannot be retrieved
    """
    cid = _resolve_cid(name_or_cid)
    log.info("Loading CID %s", cid)

    properties = get_compound_properties(cid)
    props = properties[0] if properties else {}

    molecule = get_3d_structure(cid)
    depiction = molecule if molecule.is_2d else get_2d_structure(cid)

    molecule.atoms2d = [Point2D(a.x, a.y) for a in depiction.atoms]
    molecule.cid = cid
    molecule.name = props.get('Title') or props.get('IUPACName') or str(name_or_cid)
    molecule.iupac_name = props.get('IUPACName')
    molecule.formula = props.get('MolecularFormula')
    molecule.weight = _to_float(props.get('MolecularWeight'))
    molecule.exact_mass = _to_float(props.get('ExactMass'))
    molecule.charge = props.get('Charge')
    molecule.xlogp = _to_float(props.get('XLogP'))
    molecule.tpsa = _to_float(props.get('TPSA'))
    molecule.hbond_donors = props.get('HBondDonorCount')
    molecule.hbond_acceptors = props.get('HBondAcceptorCount')
    molecule.rotatable_bonds = props.get('RotatableBondCount')
    molecule.complexity = _to_float(props.get('Complexity'))
    molecule.smiles = props.get('SMILES') or props.get('IsomericSMILES')
    molecule.inchi = props.get('InChI')
    molecule.description = get_description(cid)
    return molecule


def pubchem_url(cid):
    return f"https://pubchem.ncbi.nlm.nih.gov/compound/{cid}"
