import copy
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..utils.seed import DEFAULT_MENU, DEFAULT_REGIONS

logger = logging.getLogger(__name__)


def load_json(path: Path, default: Any) -> Any:
    """Return the parsed contents of ``path``, or ``default`` if it is missing or unreadable."""
    p = Path(path)
    if not p.exists():
        return default
    try:
        with p.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s, falling back to defaults: %s", p, e)
        return default


def persist_json(path: Path, value: Any) -> bool:
    """Overwrite ``path`` with ``value`` as indented JSON. Never raises."""
    p = Path(path)
    try:
        with p.open("w", encoding="utf-8") as f:
            json.dump(value, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError, ValueError):
        logger.exception("Failed to persist %s", p)
        return False
    return True


class JsonCollection:
    """One named JSON value, kept in memory and mirrored to <data_dir>/<name>.json."""

    def __init__(self, data_dir: Path, name: str, default: Any):
        self.name = name
        self.path = Path(data_dir) / f"{name}.json"
        self._default = default
        self.value = load_json(self.path, copy.deepcopy(default))

    def get_all(self) -> Any:
        return self.value

    def replace(self, value: Any):
        self.value = value

    def persist(self) -> bool:
        return persist_json(self.path, self.value)

    def reset(self) -> bool:
        self.value = copy.deepcopy(self._default)
        return self.persist()


class RecordCollection(JsonCollection):
    """A list of JSON objects keyed by a server-assigned integer ``id``."""

    def __init__(self, data_dir: Path, name: str, default: Optional[List[Dict[str, Any]]] = None):
        super().__init__(data_dir, name, default if default is not None else [])
        ids = [r.get("id") for r in self.value if isinstance(r, dict)]
        self._last_id = max((i for i in ids if isinstance(i, int)), default=0)

    def next_id(self) -> int:
        # Millisecond clock, bumped past the last issued id so ids stay unique and increasing.
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return self._last_id

    def append(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        record = {**fields, "id": self.next_id()}
        self.value.append(record)
        return record

    def find(self, record_id) -> Optional[Dict[str, Any]]:
        return next((r for r in self.value if r.get("id") == record_id), None)

    def update_by_id(self, record_id, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Shallow-merge ``changes`` over the first record with ``record_id``.

        Top-level keys from ``changes`` win; nested objects are replaced, not merged.
        Returns the updated record, or None when nothing matches.
        """
        for index, record in enumerate(self.value):
            if record.get("id") == record_id:
                self.value[index] = {**record, **changes}
                return self.value[index]
        return None

    def delete_by_id(self, record_id) -> int:
        before = len(self.value)
        self.value = [r for r in self.value if r.get("id") != record_id]
        return before - len(self.value)


class RegionCollection(JsonCollection):
    """Bare region names. Uniqueness is only checked when adding."""

    def add(self, name: str) -> bool:
        if name in self.value:
            return False
        self.value.append(name)
        return True

    def rename(self, old_name: str, new_name: str) -> bool:
        try:
            index = self.value.index(old_name)
        except ValueError:
            return False
        self.value[index] = new_name
        return True

    def remove(self, name: str) -> int:
        before = len(self.value)
        self.value = [r for r in self.value if r != name]
        return before - len(self.value)


class CartCollection(JsonCollection):
    def __init__(self, data_dir: Path, name: str = "carts"):
        super().__init__(data_dir, name, {})

    def get(self, user_id: str) -> Any:
        return self.value.get(user_id, [])

    def put(self, user_id: str, cart: Any):
        self.value[user_id] = cart


class JsonStore:
    """The admin tool's collections: one JSON file per collection under ``data_dir``."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self.menu = JsonCollection(self.data_dir, "menu", DEFAULT_MENU)
        self.orders = RecordCollection(self.data_dir, "orders")
        self.reviews = RecordCollection(self.data_dir, "reviews")
        self.restaurants = RecordCollection(self.data_dir, "restaurants")
        self.regions = RegionCollection(self.data_dir, "regions", DEFAULT_REGIONS)
        self.carts = CartCollection(self.data_dir)

    def collections(self) -> List[JsonCollection]:
        return [self.menu, self.orders, self.reviews, self.restaurants, self.regions, self.carts]

    def reset(self) -> bool:
        """Empty orders, reviews, restaurants and carts. Menu and regions are kept."""
        results = [c.reset() for c in (self.orders, self.reviews, self.restaurants, self.carts)]
        return all(results)
