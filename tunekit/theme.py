"""Theme properties that children inherit from their parent unless set explicitly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

_DEFAULTS: dict[str, Any] = {
    "text_color": None,
    "support_text_color": None,
    "background_color": None,
    "state_layer_color": None,
    "elevation": 0,
}


@dataclass
class _AttachProp:
    value: Any
    explicit: bool = False


class Theme:
    """A node in a tree of themes.

    Each property either holds a value set explicitly on this node or the
    value inherited from the parent, falling back to a global default at the
    root. Listeners connected to a property are called whenever its value
    changes.
    """

    PROPERTIES = tuple(_DEFAULTS)

    def __init__(self, parent: Optional["Theme"] = None) -> None:
        self._props = {name: _AttachProp(value) for name, value in _DEFAULTS.items()}
        self._listeners: dict[str, list[Callable[[], Any]]] = {
            name: [] for name in _DEFAULTS
        }
        self._parent: Optional[Theme] = None
        self._children: list[Theme] = []
        if parent is not None:
            self.set_parent(parent)

    def __repr__(self) -> str:
        values = {name: prop.value for name, prop in self._props.items()}
        return f"Theme({values!r})"

    @property
    def parent(self) -> Optional["Theme"]:
        """The theme this one inherits from."""
        return self._parent

    @property
    def children(self) -> tuple["Theme", ...]:
        """Themes that inherit from this one."""
        return tuple(self._children)

    def _prop(self, name: str) -> _AttachProp:
        try:
            return self._props[name]
        except KeyError:
            raise KeyError(f"unknown theme property: {name}") from None

    def _emit(self, name: str) -> None:
        for callback in list(self._listeners[name]):
            callback()

    def _inherit(self, name: str, value: Any) -> None:
        prop = self._prop(name)
        if prop.explicit or prop.value == value:
            return
        prop.value = value
        for child in list(self._children):
            child._inherit(name, value)
        self._emit(name)

    def get(self, name: str) -> Any:
        """Return the current value of property ``name``."""
        return self._prop(name).value

    def is_explicit(self, name: str) -> bool:
        """True when ``name`` was set on this theme rather than inherited."""
        return self._prop(name).explicit

    def set(self, name: str, value: Any) -> None:
        """Set ``name`` explicitly and pass it on to children that inherit it."""
        prop = self._prop(name)
        prop.explicit = True
        if prop.value != value:
            prop.value = value
            for child in list(self._children):
                child._inherit(name, value)
            self._emit(name)

    def reset(self, name: str) -> None:
        """Drop an explicit value and inherit ``name`` again."""
        prop = self._prop(name)
        if not prop.explicit:
            return
        prop.explicit = False
        inherited = self._parent.get(name) if self._parent is not None else _DEFAULTS[name]
        self._inherit(name, inherited)

    def set_parent(self, parent: Optional["Theme"]) -> None:
        """Attach to ``parent`` (or detach with None) and inherit its values."""
        if parent is self._parent:
            return
        node = parent
        while node is not None:
            if node is self:
                raise ValueError("a theme cannot inherit from itself")
            node = node._parent
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)
            for name in _DEFAULTS:
                self._inherit(name, parent.get(name))

    def connect(self, name: str, callback: Callable[[], Any]) -> None:
        """Call ``callback`` whenever property ``name`` changes."""
        self._prop(name)
        self._listeners[name].append(callback)