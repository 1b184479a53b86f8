"""Selection bindings for TreePicker.

The selection container belongs to the application. A picker only ever
reads the current value and replaces it with a new one; the binding is
the handle through which it does both.
"""

from typing import Any, Callable


class SelectionBinding:
    """Read/replace access to an externally owned selection value.

    Example:
        form = Form(city=None)
        binding = SelectionBinding.attribute(form, "city")
        binding.set("London")
        form.city  # "London"
    """

    def __init__(self, get: Callable[[], Any], set: Callable[[Any], None]):
        """Initialize binding from a getter and a setter.

        Args:
            get: Returns the current selection value
            set: Replaces the selection value
        """
        self._get = get
        self._set = set

    @classmethod
    def attribute(cls, owner: Any, name: str) -> 'SelectionBinding':
        """Bind to an attribute of an application object."""
        return cls(lambda: getattr(owner, name),
                   lambda value: setattr(owner, name, value))

    @classmethod
    def item(cls, mapping: Any, key: Any) -> 'SelectionBinding':
        """Bind to a key of a mutable mapping (e.g. a UI state dict)."""
        return cls(lambda: mapping[key],
                   lambda value: mapping.__setitem__(key, value))

    def get(self) -> Any:
        return self._get()

    def set(self, value: Any) -> None:
        self._set(value)


class StateBinding(SelectionBinding):
    """Binding that owns its value, for callers without their own state."""

    def __init__(self, initial: Any = None):
        self.value = initial
        super().__init__(lambda: self.value, self._store)

    def _store(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
