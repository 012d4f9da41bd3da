from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar

from wordhunt.core.languages import Language

logger = logging.getLogger(__name__)

CURRENT_GAME_FILE = "current_game.json"
PROGRESS_FILE = "progress.json"

T = TypeVar("T")


@dataclass
class SavedState:
    """Minimal record needed to resume an in-progress level."""

    language: Language
    level: int = 1
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LevelResult:
    level: int
    score: int = 0
    words_found: int = 0
    best_streak: int = 0


@dataclass
class GameProgress:
    """Per-level history across a session. Owned by the game engine."""

    levels: List[LevelResult] = field(default_factory=list)

    def result_for(self, level: int) -> Optional[LevelResult]:
        for result in self.levels:
            if result.level == level:
                return result
        return None


class PersistenceGateway(Protocol):
    """Key-value store for the two persisted records.

    Implementations never raise on missing or corrupt data: those cases are
    reported as ``None``.
    """

    def load_current_game_state(self) -> Optional[SavedState]: ...

    def save_current_game_state(self, state: SavedState) -> None: ...

    def clear_current_game_state(self) -> None: ...

    def load_game_progress(self) -> Optional[GameProgress]: ...

    def save_game_progress(self, progress: GameProgress) -> None: ...

    def clear_game_progress(self) -> None: ...


def _state_from_payload(payload: Any) -> Optional[SavedState]:
    if not isinstance(payload, dict):
        return None
    language = Language.parse(payload.get("language"))
    if language is None:
        return None
    extra = payload.get("payload", {})
    return SavedState(
        language=language,
        level=int(payload.get("level", 1)),
        payload=dict(extra) if isinstance(extra, dict) else {},
    )


def _progress_from_payload(payload: Any) -> Optional[GameProgress]:
    if not isinstance(payload, dict):
        return None
    entries = payload.get("levels", [])
    if not isinstance(entries, list):
        raise TypeError(f"levels must be a list, got {type(entries).__name__}")
    levels: List[LevelResult] = []
    for value in entries:
        if not isinstance(value, dict) or "level" not in value:
            continue
        levels.append(
            LevelResult(
                level=int(value["level"]),
                score=int(value.get("score", 0)),
                words_found=int(value.get("words_found", 0)),
                best_streak=int(value.get("best_streak", 0)),
            )
        )
    return GameProgress(levels=levels)


class JsonFileGateway:
    """Stores the current game and the level history as JSON documents.

    Files: ``<directory>/current_game.json`` and ``<directory>/progress.json``.
    Clearing a record deletes its file.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    def load_current_game_state(self) -> Optional[SavedState]:
        return self._load(CURRENT_GAME_FILE, _state_from_payload)

    def save_current_game_state(self, state: SavedState) -> None:
        payload = asdict(state)
        payload["language"] = state.language.value
        self._write(CURRENT_GAME_FILE, payload)

    def clear_current_game_state(self) -> None:
        self._remove(CURRENT_GAME_FILE)

    def load_game_progress(self) -> Optional[GameProgress]:
        return self._load(PROGRESS_FILE, _progress_from_payload)

    def save_game_progress(self, progress: GameProgress) -> None:
        self._write(PROGRESS_FILE, asdict(progress))

    def clear_game_progress(self) -> None:
        self._remove(PROGRESS_FILE)

    def _load(self, name: str, convert: Callable[[Any], Optional[T]]) -> Optional[T]:
        payload = self._read(name)
        try:
            return convert(payload)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("Discarding malformed %s: %s", self._directory / name, e)
            return None

    def _read(self, name: str) -> Any:
        path = self._directory / name
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load %s: %s", path, e)
            return None

    def _write(self, name: str, payload: Dict[str, Any]) -> None:
        path = self._directory / name
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save %s: %s", path, e)

    def _remove(self, name: str) -> None:
        path = self._directory / name
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not clear %s: %s", path, e)


class MemoryGateway:
    """In-process gateway used by the dev tools and the tests."""

    def __init__(
        self,
        state: Optional[SavedState] = None,
        progress: Optional[GameProgress] = None,
    ) -> None:
        self._state = state
        self._progress = progress

    def load_current_game_state(self) -> Optional[SavedState]:
        return self._state

    def save_current_game_state(self, state: SavedState) -> None:
        self._state = state

    def clear_current_game_state(self) -> None:
        self._state = None

    def load_game_progress(self) -> Optional[GameProgress]:
        return self._progress

    def save_game_progress(self, progress: GameProgress) -> None:
        self._progress = progress

    def clear_game_progress(self) -> None:
        self._progress = None
