"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type EntryAction = Literal["keep", "delete", "would_delete", "failed", "skipped"]
type IssueStage = Literal["package", "version", "checkpoint_root", "task"]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
