"""Provides the DerivativeKit API.

This class is a lightweight front end over gradkit's derivative engines.
You provide the function to differentiate and the point `x0`, then choose a
backend by name (``"finite"`` or ``"local_fit"``).

Adding methods
--------------
New engines can be registered without modifying this class by calling
``register_method``.

Examples:
    Basic usage:

        >>> import numpy as np
        >>> from gradkit.derivative_kit import DerivativeKit
        >>> dk = DerivativeKit(function=np.sin, x0=1.0)
        >>> d = dk.differentiate(method="finite", step=1e-5)

Notes:
    - Method names are case/spacing/punctuation insensitive.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping, Protocol, Type

from gradkit.exceptions import InvalidArgumentError
from gradkit.finite.finite_difference import FiniteDifferenceDerivative
from gradkit.logger import gradkit_logger
from gradkit.scattered.local_fit import LocalFitDerivative


class DerivativeEngine(Protocol):
    """Protocol each derivative engine must satisfy.

    An engine is constructed with a target function and a point ``x0`` and
    exposes a ``differentiate(...)`` method doing the actual computation.
    """
    def __init__(self, function: Callable[[float], Any], x0: float):
        """Initialize the engine with a target function and expansion point."""
        ...
    def differentiate(self, *args: Any, **kwargs: Any) -> Any:
        """Compute the derivative using the engine's algorithm."""
        ...


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, Type[DerivativeEngine], list[str]]] = [
    ("finite", FiniteDifferenceDerivative, ["finite-difference", "finite_difference", "fd"]),
    ("local_fit", LocalFitDerivative, ["local-fit", "least-squares", "lsq"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, Type[DerivativeEngine]], tuple[str, ...]]:
    """Construct and cache lookup tables for derivative methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to engine classes and ``canonical_names``
        lists the sorted canonical method names.
    """
    method_map: dict[str, Type[DerivativeEngine]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = cls
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = cls
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    cls: Type[DerivativeEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new derivative method.

    Args:
        name: Canonical public name of the method.
        cls: Engine class implementing the DerivativeEngine protocol.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> Type[DerivativeEngine]:
    """Resolve a user-provided method name or alias to an engine class."""
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise InvalidArgumentError(
            f"Unknown derivative method '{method}'. Choose one of {{{opts}}}."
        ) from None


class DerivativeKit:
    """Unified interface for computing numerical derivatives.

    Attributes:
        function: The callable to differentiate.
        x0: The point at which the derivative is evaluated.
        default_method: The backend used when no method is specified.
    """

    def __init__(self, function: Callable[[float], Any], x0: float):
        """Initializes the DerivativeKit with a target function and point.

        Args:
            function: The function to be differentiated. Must accept a single
                float and return a float.
            x0: Point at which to evaluate the derivative.
        """
        self.function = function
        self.x0 = x0
        self.default_method = "finite"

    def differentiate(self,
                      *,
                      method: str | None = None,
                      **kwargs: Any) -> Any:
        """Compute a derivative using the chosen method.

        Forwards all keyword arguments to the engine's `.differentiate()`.

        Args:
            method: Method name or alias (e.g., "finite", "fd", "local_fit").
                Default is "finite".
            **kwargs: Passed through to the chosen engine.

        Returns:
            The derivative result from the underlying engine.

        Raises:
            InvalidArgumentError: If `method` is not recognized.
        """
        chosen = method or self.default_method
        Engine = _resolve(chosen)
        gradkit_logger.debug("[DerivativeKit] method=%s engine=%s", chosen, Engine.__name__)
        return Engine(self.function, self.x0).differentiate(**kwargs)


def available_methods() -> list[str]:
    """List canonical method names exposed by this API."""
    _, canon = _method_maps()
    return list(canon)
