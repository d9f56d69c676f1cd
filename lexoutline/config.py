"""Outline configuration."""

import logging
from pathlib import Path
from typing import Literal, Optional

import msgspec

from .models import ROOT_CONTAINER_KIND

logger = logging.getLogger(__name__)


class OutlineConfig(msgspec.Struct, omit_defaults=True, forbid_unknown_fields=True):
    """Settings for building and expanding an outline.

    Attributes:
        root_kind: containerKind value marking top-level symbols.
        max_depth: Default expansion depth, None expands the whole tree.
        offset_encoding: Unit of symbol offsets in dumps. "utf-16" (the
            TypeScript service) or "code-point" (Python string indexes).
    """

    root_kind: str = ROOT_CONTAINER_KIND
    max_depth: Optional[int] = None
    offset_encoding: Literal["utf-16", "code-point"] = "utf-16"


_decoder = msgspec.json.Decoder(OutlineConfig)


def load_config(path: str | Path) -> OutlineConfig:
    """Load an OutlineConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        msgspec.DecodeError: If the file is not valid JSON or has bad fields.
    """
    with open(path, "rb") as f:
        config = _decoder.decode(f.read())
    logger.debug(f"Loaded config from {path}: {config}")
    return config
