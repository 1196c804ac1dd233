"""Conversion between filter representations."""

from typing import Callable, Dict, Tuple, Type, Union

from ._biquad_filter import BiquadFilter
from ._biquad_to_tf import biquad_to_tf
from ._sos_filter import SOSFilter
from ._sos_to_zpk import sos_to_zpk
from ._tf_filter import TFFilter
from ._tf_to_biquad import tf_to_biquad
from ._tf_to_zpk import tf_to_zpk
from ._zpk_filter import ZPKFilter
from ._zpk_to_sos import zpk_to_sos
from ._zpk_to_tf import zpk_to_tf

Filter = Union[ZPKFilter, TFFilter, BiquadFilter, SOSFilter]

FILTER_TYPES = (ZPKFilter, TFFilter, BiquadFilter, SOSFilter)

_DIRECT: Dict[Tuple[type, type], Callable] = {
    (ZPKFilter, TFFilter): zpk_to_tf,
    (TFFilter, ZPKFilter): tf_to_zpk,
    (TFFilter, BiquadFilter): tf_to_biquad,
    (BiquadFilter, TFFilter): biquad_to_tf,
    (ZPKFilter, SOSFilter): zpk_to_sos,
    (SOSFilter, ZPKFilter): sos_to_zpk,
}

# Intermediate form for every pair without a direct rule
_PIVOT: Dict[Tuple[type, type], type] = {
    (BiquadFilter, ZPKFilter): TFFilter,
    (ZPKFilter, BiquadFilter): TFFilter,
    (SOSFilter, TFFilter): ZPKFilter,
    (SOSFilter, BiquadFilter): ZPKFilter,
    (TFFilter, SOSFilter): ZPKFilter,
    (BiquadFilter, SOSFilter): ZPKFilter,
}


def convert(target: Type[Filter], f: Filter) -> Filter:
    """Convert a filter to another representation.

    Parameters
    ----------
    target : type
        One of ``ZPKFilter``, ``TFFilter``, ``BiquadFilter`` or
        ``SOSFilter``.
    f : Filter
        Filter to convert.

    Returns
    -------
    Filter
        Equivalent filter of type ``target``. ``f`` itself if it already
        has that type.

    Raises
    ------
    TypeError
        If ``target`` or ``f`` is not a filter representation.
    UnsupportedConversionError
        If ``f`` is of order higher than two and ``target`` is
        ``BiquadFilter``.
    DimensionMismatchError
        If ``f`` has more zeros than poles and ``target`` is
        ``SOSFilter``.

    Notes
    -----
    Only six conversions are implemented directly: ZPK <-> TF,
    TF <-> biquad and ZPK <-> SOS. Biquad <-> ZPK goes through TF and every
    other SOS conversion goes through ZPK.

    Examples
    --------
    >>> tf = tf_filter([1.0, 2.0, 1.0], [1.0, -1.0, 0.5])
    >>> biquad = convert(BiquadFilter, tf)
    >>> sos = convert(SOSFilter, biquad)
    """
    if target not in FILTER_TYPES:
        raise TypeError(
            f"target must be one of "
            f"{', '.join(t.__name__ for t in FILTER_TYPES)}, got {target!r}"
        )

    source = type(f)
    if source not in FILTER_TYPES:
        raise TypeError(
            f"cannot convert object of type {source.__name__}; expected a "
            f"filter representation"
        )

    if source is target:
        return f

    rule = _DIRECT.get((source, target))
    if rule is not None:
        return rule(f)

    return convert(target, convert(_PIVOT[(source, target)], f))
