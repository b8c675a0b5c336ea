"""YAML file list store."""

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError

from ..models import MediaList
from .base import ListStore


class FileListStore(ListStore):
    """Keep every list in one YAML file, rewritten on each save."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, MediaList]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f) or {}
            lists = [MediaList(**entry) for entry in data.get("lists", [])]
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in list file: {e}")
        except ValidationError as e:
            raise ValueError(f"Invalid list data in {self.path}: {e}")

        return {media_list.id: media_list for media_list in lists}

    def _write(self, lists: Dict[str, MediaList]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"lists": [media_list.model_dump(mode="json") for media_list in lists.values()]}

        # Replaced via a sibling file so readers never see a partial write
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        tmp_path.replace(self.path)

    def load(self, list_id: str) -> Optional[MediaList]:
        return self._read().get(list_id)

    def save(self, media_list: MediaList) -> None:
        lists = self._read()
        lists[media_list.id] = media_list
        self._write(lists)

    def get_lists(self) -> List[MediaList]:
        return list(self._read().values())

    def delete(self, list_id: str) -> bool:
        lists = self._read()
        if lists.pop(list_id, None) is None:
            return False
        self._write(lists)
        return True
