"""Label projection for tree renderers."""

from typing import NamedTuple, Optional

from ..models import Symbol


class OutlineLabel(NamedTuple):
    text: str
    icon: Optional[str]


def label_text(symbol: Symbol) -> str:
    return symbol.name


def label_icon(symbol: Symbol) -> Optional[str]:
    return symbol.display_icon


def label_for(symbol: Symbol) -> OutlineLabel:
    return OutlineLabel(label_text(symbol), label_icon(symbol))
