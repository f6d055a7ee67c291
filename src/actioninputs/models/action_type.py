from __future__ import annotations

from typing import FrozenSet, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from actioninputs.types.table import DeclaredType, classify

Visibility = Literal["VISIBLE", "HIDDEN", "EXPERT"]


def _snake_to_camel(value: str) -> str:
    head, *rest = value.split("_")
    return head + "".join(word.capitalize() for word in rest)


class _CatalogModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=_snake_to_camel,
        extra="ignore",
    )


class InputDescriptor(_CatalogModel):
    """One formal parameter of an action.

    ``type`` is the declared-type identifier as written in the catalog;
    ``declared_type`` is its classification.
    """

    name: str = Field(min_length=1)
    type: str
    label: Optional[str] = None
    description: Optional[str] = None
    required: bool = False
    default_value: str = ""
    tags: FrozenSet[str] = frozenset()
    reference: Optional[str] = None

    @field_validator("default_value", mode="before")
    @classmethod
    def null_default_is_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @property
    def declared_type(self) -> DeclaredType:
        return classify(self.type)


class OutputDescriptor(_CatalogModel):
    name: str = Field(min_length=1)
    type: str
    label: Optional[str] = None
    description: Optional[str] = None
    default_value: str = ""
    tags: FrozenSet[str] = frozenset()
    reference: Optional[str] = None

    @field_validator("default_value", mode="before")
    @classmethod
    def null_default_is_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class ActionType(_CatalogModel):
    uid: str = Field(min_length=1)
    label: Optional[str] = None
    description: Optional[str] = None
    visibility: Visibility = "VISIBLE"
    tags: FrozenSet[str] = frozenset()
    inputs: Tuple[InputDescriptor, ...] = ()
    outputs: Tuple[OutputDescriptor, ...] = ()

    @model_validator(mode="after")
    def validate_unique_input_names(self) -> "ActionType":
        seen = set()
        duplicates: List[str] = []
        for item in self.inputs:
            if item.name in seen:
                duplicates.append(item.name)
            seen.add(item.name)
        if duplicates:
            raise ValueError(f"action {self.uid!r} declares duplicate inputs: {sorted(set(duplicates))}")
        return self

    def input(self, name: str) -> Optional[InputDescriptor]:
        for item in self.inputs:
            if item.name == name:
                return item
        return None
