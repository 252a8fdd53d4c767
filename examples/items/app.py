"""Items — a JSON CRUD API on a plain dict.

Demonstrates one router serving GET/POST/PUT/DELETE, parameter routes,
before/after hooks, and status codes. Request bodies are out of scope,
so new items take their title from the path.

Run:
    perch serve app:router
"""

import threading
from dataclasses import dataclass

from perch import Hooks, Router

router = Router()


# ---------------------------------------------------------------------------
# In-memory storage
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Item:
    id: int
    title: str


_items: dict[int, Item] = {}
_next_id = 1
_lock = threading.Lock()
audit: list[str] = []


def _get_next_id() -> int:
    global _next_id
    with _lock:
        n = _next_id
        _next_id += 1
        return n


def _to_dict(item: Item) -> dict:
    return {"id": item.id, "title": item.title}


def _lookup(raw_id: str) -> Item | None:
    if not raw_id.isdigit():
        return None
    return _items.get(int(raw_id))


def _missing(raw_id: str) -> None:
    router.status(404).json({"error": f"item {raw_id!r} not found"})


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------


def _log_write() -> None:
    audit.append("write")


def _log_done() -> None:
    audit.append("done")


writes = Hooks(before=(_log_write,), after=(_log_done,))


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def list_items(_: str) -> None:
    router.json([_to_dict(item) for item in _items.values()])


def show_item(raw_id: str) -> None:
    item = _lookup(raw_id)
    if item is None:
        _missing(raw_id)
        return
    router.json(_to_dict(item))


def create_item(title: str) -> None:
    item = Item(id=_get_next_id(), title=title)
    _items[item.id] = item
    router.status(201).json(_to_dict(item))


def rename_item(raw_id: str) -> None:
    # PUT /items/:id renames to "<title> (edited)"
    item = _lookup(raw_id)
    if item is None:
        _missing(raw_id)
        return
    item = Item(id=item.id, title=f"{item.title} (edited)")
    _items[item.id] = item
    router.json(_to_dict(item))


def delete_item(raw_id: str) -> None:
    item = _lookup(raw_id)
    if item is None:
        _missing(raw_id)
        return
    del _items[item.id]
    router.status(204)


router.get("/items", list_items)
router.get("/items/:id", show_item)
router.post("/items/:title", create_item, writes)
router.put("/items/:id", rename_item, writes)
router.delete("/items/:id", delete_item, writes)
