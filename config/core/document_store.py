import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DocumentStoreError(Exception):
    """Raised when a collection document cannot be read or written."""


class JsonDocumentStore:
    """
    Flat-file persistence for named collections.

    Each collection lives in its own JSON document holding a single object
    with one array field named after the collection, e.g. {"books": [...]}.
    Every save replaces the whole file. There is no locking: concurrent
    writers to the same collection can overwrite each other (last save wins).
    """

    def __init__(self, paths: dict):
        self.paths = {name: Path(path) for name, path in paths.items()}

    def _path_for(self, collection):
        try:
            return self.paths[collection]
        except KeyError:
            raise DocumentStoreError(f'Unknown collection: {collection}')

    def load(self, collection: str) -> list:
        path = self._path_for(collection)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            raise DocumentStoreError(f'Failed to read file {path}: {e}') from e

        items = document.get(collection) if isinstance(document, dict) else None
        if not isinstance(items, list):
            raise DocumentStoreError(f'File {path} has no "{collection}" array')
        logger.debug('Loaded %d %s from %s', len(items), collection, path)
        return items

    def save(self, collection: str, items: list) -> None:
        path = self._path_for(collection)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump({collection: items}, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise DocumentStoreError(f'Failed to write file {path}: {e}') from e
        logger.debug('Saved %d %s to %s', len(items), collection, path)
