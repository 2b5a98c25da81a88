# MIT License (see LICENSE)
"""
Pairwise intersection dispatch for the closed set of shape variants.

Each unordered pair of shape types has exactly one owning implementation,
registered with :func:`register` next to the owning class:

    Line      x Line       -> Line
    Circle    x Line       -> Circle
    Circle    x Circle     -> Circle
    Rectangle x Line       -> Rectangle
    Rectangle x Circle     -> Rectangle
    Rectangle x Rectangle  -> Rectangle
    Polygon   x Line       -> Polygon
    Polygon   x Circle     -> Polygon
    Polygon   x Rectangle  -> Polygon
    Polygon   x Polygon    -> Polygon

A query for the reversed pair is answered by the same implementation with
the operands swapped, so the two directions cannot drift apart and the
delegation never recurses. Pairs with no registered owner (including
``None`` or arbitrary objects) answer ``False``.
"""
from __future__ import annotations
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

PairTest = Callable[[Any, Any], bool]

_OWNERS: dict[tuple[type, type], PairTest] = {}


def register(type_a: type, type_b: type) -> Callable[[PairTest], PairTest]:
    """
    Decorator recording ``fn(a: type_a, b: type_b) -> bool`` as the owner
    of the unordered pair {type_a, type_b}.

    Raises:
        ValueError: if either orientation of the pair already has an owner.
    """
    def decorator(fn: PairTest) -> PairTest:
        if (type_a, type_b) in _OWNERS or (type_b, type_a) in _OWNERS:
            raise ValueError(
                f"Intersection of {type_a.__name__} and {type_b.__name__} is already registered"
            )
        _OWNERS[(type_a, type_b)] = fn
        return fn
    return decorator


def owner_of(type_a: type, type_b: type) -> tuple[PairTest, bool] | None:
    """
    Find the implementation for a pair of types.

    Returns:
        ``(fn, swapped)`` where ``swapped`` tells whether the operands must be
        reversed before calling ``fn``, or None when no owner exists.
    """
    for ta in type_a.__mro__:
        for tb in type_b.__mro__:
            fn = _OWNERS.get((ta, tb))
            if fn is not None:
                return fn, False
            fn = _OWNERS.get((tb, ta))
            if fn is not None:
                return fn, True
    return None


def intersects(a: Any, b: Any) -> bool:
    """
    Narrow-phase test: do shapes ``a`` and ``b`` share at least one point?

    Total over all inputs: unknown or missing operands yield False.
    """
    if a is None or b is None:
        return False
    found = owner_of(type(a), type(b))
    if found is None:
        logger.debug(
            "No intersection test for %s and %s, reporting no intersection",
            type(a).__name__, type(b).__name__,
        )
        return False
    fn, swapped = found
    return bool(fn(b, a) if swapped else fn(a, b))
