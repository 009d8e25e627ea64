"""Organization-mandated boilerplate captured from sentinel blocks."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class MandatedKind(str, Enum):
    PREAMBLE = "preamble"
    LEGAL = "legal"


class MandatedSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: MandatedKind
    content: str
