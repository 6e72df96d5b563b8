from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Tuple, Union

from quiz_statistics.analyzers.metrics.errors import InvalidKeySpecError

Calculator = Callable[..., Any]


@dataclass(frozen=True)
class Simple:
    """Key spec for a metric without context dependencies."""

    key: str


@dataclass(frozen=True)
class WithDeps:
    """Key spec for a metric that receives context variables, in order."""

    key: str
    deps: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable of names, store an immutable tuple
        object.__setattr__(self, "deps", _normalize_deps(self.key, self.deps))


KeySpec = Union[Simple, WithDeps, str, Mapping[str, Union[str, Iterable[str]]]]


@dataclass(frozen=True)
class MetricDefinition:
    """
    One registered metric calculator.

    - key: name of the value in the output report
    - context_deps: context variable names passed to the calculator, in order
    - calculator: called as ``calculator(responses, *context values)``
    """

    key: str
    context_deps: Tuple[str, ...]
    calculator: Calculator

    @property
    def requires_context(self) -> bool:
        return bool(self.context_deps)

    def copy(self) -> "MetricDefinition":
        return dataclasses.replace(self)


def _normalize_key(spec: Any, key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeySpecError(spec, f"key must be a string, got {type(key).__name__}")
    if not key.strip():
        raise InvalidKeySpecError(spec, "key must not be empty")
    return key


def _normalize_deps(spec: Any, deps: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    if isinstance(deps, str):
        deps = (deps,)
    try:
        names = tuple(deps)
    except TypeError:
        raise InvalidKeySpecError(spec, "dependencies must be a name or a list of names")
    for name in names:
        if not isinstance(name, str) or not name:
            raise InvalidKeySpecError(spec, f"invalid dependency name {name!r}")
    return names


def parse_key_spec(spec: KeySpec) -> Tuple[str, Tuple[str, ...]]:
    """Normalize a key spec into ``(key, context_deps)``.

    Accepted shapes:
      - ``Simple("key")`` or a bare ``"key"``: no dependencies
      - ``WithDeps("key", ["a", "b"])``
      - ``{"key": "a"}`` or ``{"key": ["a", "b"]}``: single-entry mapping

    Raises:
        InvalidKeySpecError: if the spec has any other shape.
    """
    if isinstance(spec, WithDeps):
        return _normalize_key(spec, spec.key), spec.deps
    if isinstance(spec, Simple):
        return _normalize_key(spec, spec.key), ()
    if isinstance(spec, str):
        return _normalize_key(spec, spec), ()
    if isinstance(spec, Mapping):
        if len(spec) != 1:
            raise InvalidKeySpecError(spec, "mapping spec must have exactly one entry")
        ((key, deps),) = spec.items()
        return _normalize_key(spec, key), _normalize_deps(spec, deps)
    raise InvalidKeySpecError(spec, f"unsupported spec type {type(spec).__name__}")


def make_definition(spec: KeySpec, calculator: Calculator) -> MetricDefinition:
    """Build a MetricDefinition from a key spec and a calculator."""
    if not callable(calculator):
        raise TypeError(f"Metric calculator must be callable, got {type(calculator).__name__}")
    key, deps = parse_key_spec(spec)
    return MetricDefinition(key=key, context_deps=deps, calculator=calculator)
