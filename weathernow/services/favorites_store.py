"""Favorites list with write-through persistence to a local JSON file."""

import json
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from ..models.favorite import FavoriteCity
from ..models.weather import WeatherRecord

logger = logging.getLogger(__name__)

_favorites_adapter = TypeAdapter(list[FavoriteCity])


# Pure list operations. Each returns a new list and leaves the input alone.


def add_favorite(
    favorites: Sequence[FavoriteCity], record: WeatherRecord | None, new_id: int
) -> list[FavoriteCity]:
    """Append ``record`` as a new favorite unless it is absent or its name is taken."""
    if record is None:
        return list(favorites)

    names = {item.name for item in favorites}
    if record.name in names:
        return list(favorites)

    item = FavoriteCity(id=new_id, name=record.name, temperature=record.temperature_c)
    return [*favorites, item]


def update_memo(
    favorites: Sequence[FavoriteCity], favorite_id: int, memo: str
) -> list[FavoriteCity]:
    """Replace the memo of the entry with ``favorite_id``."""
    return [
        item.model_copy(update={"memo": memo}) if item.id == favorite_id else item
        for item in favorites
    ]


def remove_favorite(favorites: Sequence[FavoriteCity], favorite_id: int) -> list[FavoriteCity]:
    """Drop the entry with ``favorite_id``."""
    return [item for item in favorites if item.id != favorite_id]


def clear_favorites(favorites: Sequence[FavoriteCity]) -> list[FavoriteCity]:
    """Drop every entry."""
    return []


class FavoritesRepository(Protocol):
    """Durable storage for the whole favorites list."""

    def load(self) -> list[FavoriteCity]: ...

    def save(self, favorites: Sequence[FavoriteCity]) -> None: ...


class JsonFavoritesRepository:
    """Stores the favorites list as a JSON array in a single file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._enabled = True

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Test write permission
            test_file = self.path.parent / ".test"
            test_file.touch()
            test_file.unlink()
        except (PermissionError, OSError) as e:
            logger.warning(f"Favorites persistence disabled - cannot write to {self.path.parent}: {e}")
            self._enabled = False

    def load(self) -> list[FavoriteCity]:
        """Read the persisted list. Missing or corrupt data yields an empty list."""
        if not self.path.exists():
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return _favorites_adapter.validate_python(data)

        except (json.JSONDecodeError, ValidationError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Failed to read favorites from {self.path}, starting empty: {e}")
            return []

    def save(self, favorites: Sequence[FavoriteCity]) -> None:
        """Overwrite the persisted list with ``favorites``."""
        if not self._enabled:
            return

        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump([item.to_storage() for item in favorites], f, ensure_ascii=False)
            tmp_path.replace(self.path)

            logger.debug(f"Saved {len(favorites)} favorites")

        except (TypeError, OSError) as e:
            logger.warning(f"Failed to save favorites to {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)


class FavoritesStore:
    """Ordered, name-unique favorites list that persists after every change.

    The list is read once from the repository at construction. Each
    mutating call computes the new list, saves all of it, and returns it.
    """

    def __init__(self, repository: FavoritesRepository):
        self._repository = repository
        self._favorites: list[FavoriteCity] = repository.load()
        self._last_id = max((item.id for item in self._favorites), default=0)

    @property
    def favorites(self) -> tuple[FavoriteCity, ...]:
        return tuple(self._favorites)

    def __len__(self) -> int:
        return len(self._favorites)

    def _next_id(self) -> int:
        # Millisecond timestamps, bumped so an id is never handed out twice.
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return self._last_id

    def _commit(self, favorites: list[FavoriteCity]) -> list[FavoriteCity]:
        self._favorites = favorites
        self._repository.save(favorites)
        return list(favorites)

    def add(self, record: WeatherRecord | None) -> list[FavoriteCity]:
        """Save ``record`` as a favorite. No-op when absent or already saved."""
        if record is None or any(item.name == record.name for item in self._favorites):
            return list(self._favorites)
        return self._commit(add_favorite(self._favorites, record, self._next_id()))

    def update_memo(self, favorite_id: int, memo: str) -> list[FavoriteCity]:
        """Change the memo of one favorite. Unknown ids are ignored."""
        return self._commit(update_memo(self._favorites, favorite_id, memo))

    def remove(self, favorite_id: int) -> list[FavoriteCity]:
        """Delete one favorite. Unknown ids are ignored."""
        return self._commit(remove_favorite(self._favorites, favorite_id))

    def clear(self) -> list[FavoriteCity]:
        """Delete every favorite."""
        return self._commit(clear_favorites(self._favorites))
