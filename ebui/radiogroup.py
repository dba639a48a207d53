"""Keep exactly one of a set of checkboxes checked."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from ebui.widget import Event


class CheckboxState(Enum):
    UNCHECKED = 0
    CHECKED = 1


@dataclass
class RadioGroupChangedEventArgs:
    active: Any


class RadioGroup:
    """Checks one checkbox and unchecks the others.

    Each checkbox provides set_state(state) and a changed_event whose arguments
    carry the changed checkbox as their checkbox attribute. The first checkbox
    becomes active on construction, firing the changed event.
    """

    def __init__(
        self,
        checkboxes: Sequence[Any],
        *,
        on_changed: Optional[Callable[[RadioGroupChangedEventArgs], None]] = None,
    ) -> None:
        if not checkboxes:
            raise ValueError("radio group needs at least one checkbox")
        self.checkboxes = list(checkboxes)
        self.changed_event = Event()
        if on_changed is not None:
            self.changed_event.add_handler(on_changed)
        self._active: Any = None
        self._listen = True

        for checkbox in self.checkboxes:
            checkbox.changed_event.add_handler(self._on_checkbox_changed)

        self.set_active(self.checkboxes[0])

    @property
    def active(self) -> Any:
        return self._active

    def set_active(self, checkbox: Any) -> None:
        self._listen = False
        old_active = self._active
        try:
            for c in self.checkboxes:
                if c is checkbox:
                    self._active = c
                    c.set_state(CheckboxState.CHECKED)
                else:
                    c.set_state(CheckboxState.UNCHECKED)
        finally:
            self._listen = True

        if checkbox is not old_active:
            self.changed_event.fire(RadioGroupChangedEventArgs(active=checkbox))

    def _on_checkbox_changed(self, args: Any) -> None:
        if self._listen:
            self.set_active(args.checkbox)