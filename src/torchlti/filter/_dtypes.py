"""Dtype helpers shared by the filter representations."""

from typing import Any

import torch
from torch import Tensor

_REAL_TO_COMPLEX = {
    torch.float16: torch.complex32,
    torch.bfloat16: torch.complex64,
    torch.float32: torch.complex64,
    torch.float64: torch.complex128,
}

_COMPLEX_TO_REAL = {
    torch.complex32: torch.float16,
    torch.complex64: torch.float32,
    torch.complex128: torch.float64,
}


def real_dtype(dtype: torch.dtype) -> torch.dtype:
    """Real component dtype of ``dtype`` (identity for real dtypes)."""
    return _COMPLEX_TO_REAL.get(dtype, dtype)


def complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Complex dtype whose components have the precision of ``dtype``.

    Integer and boolean dtypes map to complex128.
    """
    if dtype.is_complex:
        return dtype

    return _REAL_TO_COMPLEX.get(dtype, torch.complex128)


def promote_dtypes(*dtypes: torch.dtype) -> torch.dtype:
    """Common dtype of ``dtypes``, promoted to float64 if not inexact."""
    result = dtypes[0]
    for dtype in dtypes[1:]:
        result = torch.promote_types(result, dtype)

    if not (result.is_floating_point or result.is_complex):
        return torch.float64

    return result


def as_coefficients(x: Any) -> Tensor:
    """Coerce an array-like to an inexact coefficient tensor.

    Tensors keep their dtype unless it is integral or boolean, in which case
    they become float64. Anything else (Python scalars and sequences, numpy
    arrays) becomes float64, or complex128 when it holds complex values.
    """
    if isinstance(x, Tensor):
        if x.is_floating_point() or x.is_complex():
            return x

        return x.to(torch.float64)

    probe = torch.as_tensor(x)
    if probe.is_complex():
        return torch.as_tensor(x, dtype=torch.complex128)

    return torch.as_tensor(x, dtype=torch.float64)
