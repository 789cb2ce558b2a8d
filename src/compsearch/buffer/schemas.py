"""
Schemas for the component registry.

A component is a named container of controls. A control whose value is a
string is text-valued and can be searched as a buffer.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Control(BaseModel):
    """A named value on a component."""
    name: str
    value: Any = None

    @property
    def is_text(self) -> bool:
        return isinstance(self.value, str)


class Component(BaseModel):
    """A named component with its controls in declaration order."""
    name: str
    controls: List[Control] = Field(default_factory=list)

    @property
    def text_control_count(self) -> int:
        return sum(1 for control in self.controls if control.is_text)


class Buffer(BaseModel):
    """An immutable unit of searchable text and the label it is reported under."""
    model_config = ConfigDict(frozen=True)

    label: str
    text: str
