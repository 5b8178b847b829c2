# src/day_planner/palette/emotions.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import PersistenceError, ValidationError
from ..core.ports import PersistenceGateway

logger = logging.getLogger(__name__)

EMOJIS_KEY = "planner_emojis"


@dataclass(frozen=True, slots=True)
class EmotionDefinition:
    name: str
    symbol: str


DEFAULT_EMOTIONS: tuple[EmotionDefinition, ...] = (
    EmotionDefinition("Coração", "❤️"),
    EmotionDefinition("Flor", "🌸"),
    EmotionDefinition("Estrela", "⭐"),
)


class EmotionPalette:
    """
    Ordered list of named symbols available for tagging tasks and birthdays.

    Tasks and birthdays store the symbol *value*, never a palette position, so
    removing an entry leaves their references intact. Positions (remove_at, pick)
    are only meaningful against the listing the user is currently looking at.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway
        self._items: list[EmotionDefinition] = self._load()
        logger.info("EmotionPalette ready size=%d", len(self._items))

    def _load(self) -> list[EmotionDefinition]:
        raw = self._gateway.get(EMOJIS_KEY)
        if raw is None:
            return list(DEFAULT_EMOTIONS)
        if not isinstance(raw, list):
            logger.warning("Stored %s is not a list; using starter palette", EMOJIS_KEY)
            return list(DEFAULT_EMOTIONS)
        out: list[EmotionDefinition] = []
        for r in raw:
            if not isinstance(r, dict):
                continue
            name = str(r.get("name") or "").strip()
            symbol = str(r.get("symbol") or "").strip()
            if name and symbol:
                out.append(EmotionDefinition(name, symbol))
        return out

    def _persist(self, undo: Callable[[], None]) -> None:
        try:
            self._gateway.set(
                EMOJIS_KEY, [{"name": e.name, "symbol": e.symbol} for e in self._items]
            )
        except PersistenceError:
            undo()
            logger.error("Persisting %s failed; in-memory change rolled back", EMOJIS_KEY)
            raise

    def add(self, name: str, symbol: str) -> EmotionDefinition:
        name = (name or "").strip()
        symbol = (symbol or "").strip()
        if not name or not symbol:
            raise ValidationError("Both name and symbol are required")
        item = EmotionDefinition(name, symbol)
        self._items.append(item)
        self._persist(self._items.pop)
        logger.debug("Emotion added name=%s symbol=%s", name, symbol)
        return item

    def remove_at(self, index: int) -> EmotionDefinition:
        """Remove by 0-based position; later entries shift down."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"No emotion at position {index} (palette size {len(self._items)})")
        item = self._items.pop(index)
        self._persist(lambda: self._items.insert(index, item))
        logger.debug("Emotion removed index=%d name=%s", index, item.name)
        return item

    def pick(self, number: int) -> EmotionDefinition:
        """Resolve a 1-based choice from a numbered listing."""
        if not 1 <= number <= len(self._items):
            raise IndexError(f"Invalid emotion choice {number} (1..{len(self._items)})")
        return self._items[number - 1]

    def list(self) -> list[EmotionDefinition]:
        return list(self._items)

    def render(self) -> str:
        return "\n".join(f"{i}. {e.symbol} {e.name}" for i, e in enumerate(self._items, start=1))
