"""
PyLinalg: generic fixed-size vectors and matrices for Python.

Vectors and matrices over any element type that satisfies the numeric
capabilities (Number, Integer, Float), with heterogeneous arithmetic whose
result element type follows the element operations themselves.

Submodules:
    core: Capabilities, witnesses, promotion, validation, exceptions
    vector: Vector container and algebra (dot product, norm, normalize)
    matrix: Matrix container and algebra (matrix product)
"""

__version__ = "0.1.0"

from pylinalg.core import (
    Number,
    Integer,
    Float,
    NumberTraits,
    register_number,
    unregister_number,
    require_capability,
    traits_for,
    register_promotion,
    clear_promotions,
    result_type,
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
from pylinalg.vector import Vector, dot_product, norm, normalize
from pylinalg.matrix import Matrix

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    # Vector algebra
    "dot_product",
    "norm",
    "normalize",
    # Capabilities
    "Number",
    "Integer",
    "Float",
    "NumberTraits",
    "register_number",
    "unregister_number",
    "require_capability",
    "traits_for",
    # Promotion
    "register_promotion",
    "clear_promotions",
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
    "PyLinalgWarning",
    "SignedNormWarning",
    "TrailingValuesWarning",
]
