"""
Core infrastructure for PyLinalg.

This module provides the numeric capability model and the conventions
shared by the Vector and Matrix entities.

Key components:
    capabilities: Capability string constants
    protocols: Structural Number / Integer / Float protocols
    traits: Capability witnesses and the element-type registry
    promotion: Result-type table for heterogeneous operations
    exceptions: Exception and warning hierarchy
    validation: Dimension, index and shape validators
    formatting: Text rendering
    tolerances: Float comparison tiers
"""

from pylinalg.core.protocols import Number, Integer, Float
from pylinalg.core.traits import (
    NumberTraits,
    register_number,
    unregister_number,
    require_capability,
    traits_for,
)
from pylinalg.core.promotion import (
    clear_promotions,
    register_promotion,
    result_type,
)
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    InvalidNormOrderError,
    ElementTypeError,
    CapabilityError,
    PromotionError,
    NumericalError,
    PyLinalgWarning,
    SignedNormWarning,
    TrailingValuesWarning,
)

__all__ = [
    # Protocols
    "Number",
    "Integer",
    "Float",
    # Witnesses
    "NumberTraits",
    "register_number",
    "unregister_number",
    "require_capability",
    "traits_for",
    # Promotion
    "clear_promotions",
    "register_promotion",
    "result_type",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "InvalidNormOrderError",
    "ElementTypeError",
    "CapabilityError",
    "PromotionError",
    "NumericalError",
    # Warnings
    "PyLinalgWarning",
    "SignedNormWarning",
    "TrailingValuesWarning",
]
