from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from actioninputs.models.action_type import InputDescriptor, OutputDescriptor, _snake_to_camel
from actioninputs.types.table import ParameterCategory, ParameterContext


class ParameterDescriptor(BaseModel):
    """UI-facing description of one action input."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=_snake_to_camel)

    name: str
    type: ParameterCategory
    label: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    read_only: bool = False
    context: Optional[ParameterContext] = None
    default: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ActionDescription(BaseModel):
    """What a configuration UI needs to render one action.

    ``input_config_descriptions`` is None when at least one input cannot be
    described; a partial list is never exposed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=_snake_to_camel)

    action_uid: str
    label: Optional[str] = None
    description: Optional[str] = None
    inputs: Tuple[InputDescriptor, ...] = ()
    input_config_descriptions: Optional[List[ParameterDescriptor]] = None
    outputs: Tuple[OutputDescriptor, ...] = ()

    @property
    def configurable(self) -> bool:
        return self.input_config_descriptions is not None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
