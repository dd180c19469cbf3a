"""Report artifacts and the messages exchanged with the host UI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CopyCommand = Literal["copy-entity-config", "copy-entity-data"]


class Artifacts(BaseModel):
    """The three text outputs of one report run. Only valid together."""

    model_config = ConfigDict(populate_by_name=True)

    entity_info: str = Field(default="", alias="entityInfo")
    entity_config: str = Field(default="", alias="entityConfig")
    entity_data: str = Field(default="", alias="entityData")
    group_count: int = 0
    shape_count: int = 0

    def messages(self) -> list[dict[str, str]]:
        """UI messages pushed to the host after every run, in display order."""
        return [
            {"type": "entity-infos", "entityInfo": self.entity_info},
            {"type": "entity-config", "entityConfig": self.entity_config},
            {"type": "entity-data", "entityData": self.entity_data},
        ]

    def text_for(self, command: str) -> str | None:
        if command == "copy-entity-config":
            return self.entity_config
        if command == "copy-entity-data":
            return self.entity_data
        return None


class CopyMessage(BaseModel):
    type: Literal["copy"] = "copy"
    text: str
