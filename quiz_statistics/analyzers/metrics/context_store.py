from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Tuple, Union

from quiz_statistics.analyzers.metrics.errors import MissingContextError


class ContextStore:
    """
    Read-mostly store for the context variables built for one computation run.

    Methods
    -------
    set(name, value)
        Create/overwrite a context variable.
    has(name) -> bool
        Whether a variable exists.
    get(name, default=None)
        Return the value or *default*.
    resolve(metric_key, names) -> tuple
        Values for *names* in order; raises MissingContextError on the first
        missing name.
    to_dict() -> Dict[str, Any]
        Export all variables.
    update_from(other)
        Merge/overwrite from another ContextStore or mapping.
    """
    def __init__(self, initial: Optional[Union["ContextStore", Mapping[str, Any]]] = None):
        self._values: Dict[str, Any] = {}
        if initial is not None:
            self.update_from(initial)

    @classmethod
    def from_builder_result(cls, result: Any) -> "ContextStore":
        """Wrap whatever a context builder returned; None means no context."""
        if result is None:
            return cls()
        if not isinstance(result, (ContextStore, Mapping)):
            raise TypeError(
                f"Context builder must return a mapping, got {type(result).__name__}"
            )
        return cls(result)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def resolve(
        self,
        metric_key: str,
        names: Iterable[str],
        question_type: Optional[Hashable] = None,
    ) -> Tuple[Any, ...]:
        values = []
        for name in names:
            if name not in self._values:
                raise MissingContextError(metric_key, name, question_type)
            values.append(self._values[name])
        return tuple(values)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def update_from(self, other: Union["ContextStore", Mapping[str, Any]]) -> None:
        if isinstance(other, ContextStore):
            self._values.update(other._values)
        else:
            self._values.update(other)

    def __len__(self) -> int:
        """Return the number of context variables in the store."""
        return len(self._values)

    def keys(self):
        """Return an iterator over the variable names."""
        return self._values.keys()
