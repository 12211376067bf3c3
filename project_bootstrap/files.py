from __future__ import annotations

import enum
import logging
import os
from typing import Literal

logger = logging.getLogger(__name__)

WriteMode = Literal["append", "overwrite", "skip-existing"]


class WriteAction(str, enum.Enum):
    CREATED = "created"
    APPENDED = "appended"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


def write_text(path: str, text: str, mode: WriteMode) -> WriteAction:
    exists = os.path.exists(path)

    if not exists:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("created %s", path)
        return WriteAction.CREATED

    if mode == "skip-existing":
        logger.info("kept existing %s", path)
        return WriteAction.SKIPPED

    if mode == "overwrite":
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("overwrote %s", path)
        return WriteAction.OVERWRITTEN

    if mode != "append":
        raise ValueError(f"unknown write mode: {mode}")

    with open(path, "rb") as f:
        existing = f.read()
    with open(path, "a", encoding="utf-8") as f:
        if existing and not existing.endswith(b"\n"):
            f.write("\n")
        f.write(text)
    logger.info("appended to %s", path)
    return WriteAction.APPENDED
