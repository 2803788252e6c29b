"""Exceptions raised by the structure loaders."""


class Lewis2DError(Exception):
    """Base class for lewis2d errors."""


class StructureLookupError(Lewis2DError):
    """Raised when a structure could not be retrieved from PubChem."""


class CompoundNotFoundError(StructureLookupError):
    """Raised when no compound matches the given name or CID."""


class StructureParseError(Lewis2DError):
    """Raised when chemical table or SMILES text cannot be parsed."""
