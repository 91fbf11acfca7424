from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from treepeek.models.enums import ValueKind


class ViolationCode(str, Enum):
    KIND_MISMATCH = "kind_mismatch"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    MISSING_KEY = "missing_key"
    LEAF_PARENT = "leaf_parent"


@dataclass(slots=True, frozen=True)
class ContractViolation:
    code: ViolationCode
    path: str
    container_kind: ValueKind
    message: str

    def describe(self) -> str:
        where = self.path or "<root>"
        return f"{self.message} (path: {where}, container: {self.container_kind.value})"
