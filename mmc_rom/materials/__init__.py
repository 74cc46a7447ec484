"""Constituent property inputs.

Module structure:
    descriptor: PropertyId, PROPERTY_DESCRIPTORS, PropertyValue, PropertyInput
    registry: ConstituentRegistry and global convenience functions

Example usage:
    >>> from mmc_rom.materials import get_constituent, list_constituents
    >>> sic = get_constituent("SiC")
    >>> sic.get("youngs_modulus")
    410.0
"""

from .descriptor import (
    PROPERTY_DESCRIPTORS,
    PropertyDescriptor,
    PropertyId,
    PropertyInput,
    PropertyValue,
    check_physical_inputs,
)
from .registry import (
    ConstituentRegistry,
    get_constituent,
    get_global_registry,
    list_constituents,
    register_constituent,
)

__all__ = [
    # Descriptor classes
    "PropertyId",
    "PropertyDescriptor",
    "PropertyValue",
    "PropertyInput",
    "PROPERTY_DESCRIPTORS",
    "check_physical_inputs",
    # Registry classes
    "ConstituentRegistry",
    "get_global_registry",
    # Convenience functions
    "get_constituent",
    "list_constituents",
    "register_constituent",
]
