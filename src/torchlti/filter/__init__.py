"""Digital filter representations and conversions between them."""

from ._biquad_filter import BiquadFilter, biquad_filter, biquad_scale
from ._biquad_to_tf import biquad_to_tf
from ._constants import DEFAULT_FREQUENCY_POINTS, IMAGINARY_PART_TOLERANCE
from ._convert import FILTER_TYPES, Filter, convert
from ._dtypes import complex_dtype, promote_dtypes, real_dtype
from ._exceptions import (
    ComplexCoefficientWarning,
    DimensionMismatchError,
    FilterError,
    InvalidFilterError,
    UnsupportedConversionError,
)
from ._frequency_response import frequency_response
from ._sos_filter import SOSFilter, sos_filter
from ._sos_to_zpk import sos_to_zpk
from ._tf_filter import (
    TFFilter,
    denominator_coefficients,
    numerator_coefficients,
    tf_filter,
)
from ._tf_to_biquad import tf_to_biquad
from ._tf_to_zpk import tf_to_zpk
from ._zpk_filter import ZPKFilter, zpk_filter
from ._zpk_to_sos import zpk_to_sos
from ._zpk_to_tf import zpk_to_tf

__all__ = [
    # Representations
    "BiquadFilter",
    "Filter",
    "FILTER_TYPES",
    "SOSFilter",
    "TFFilter",
    "ZPKFilter",
    "biquad_filter",
    "sos_filter",
    "tf_filter",
    "zpk_filter",
    # Accessors and operators
    "biquad_scale",
    "denominator_coefficients",
    "numerator_coefficients",
    # Conversions
    "biquad_to_tf",
    "convert",
    "sos_to_zpk",
    "tf_to_biquad",
    "tf_to_zpk",
    "zpk_to_sos",
    "zpk_to_tf",
    # Analysis
    "frequency_response",
    # Dtype utilities
    "complex_dtype",
    "promote_dtypes",
    "real_dtype",
    # Constants
    "DEFAULT_FREQUENCY_POINTS",
    "IMAGINARY_PART_TOLERANCE",
    # Exceptions
    "ComplexCoefficientWarning",
    "DimensionMismatchError",
    "FilterError",
    "InvalidFilterError",
    "UnsupportedConversionError",
]
