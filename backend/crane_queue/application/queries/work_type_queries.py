"""Work type catalog lookup."""

import logging
from pathlib import Path

from pydantic import ValidationError as SchemaError

from crane_queue.domain.shared.exceptions import StorageFailure

from ..dtos.work_log_dtos import WorkTypeCatalog

logger = logging.getLogger(__name__)

BUNDLED_WORK_TYPES = Path(__file__).resolve().parents[2] / "data" / "work_types.json"


class WorkTypeQueries:
    """Reads the work type catalog from a JSON file on every call."""

    def __init__(self, path: Path | None = None):
        self._path = path or BUNDLED_WORK_TYPES

    def list_work_types(self) -> WorkTypeCatalog:
        """
        The catalog as ``{"types": [...]}``.

        Raises:
            StorageFailure: If the file cannot be read or is malformed
        """
        try:
            return WorkTypeCatalog.model_validate_json(
                self._path.read_text(encoding="utf-8")
            )
        except (OSError, SchemaError) as e:
            logger.error("Failed to load work types from %s: %s", self._path, e)
            raise StorageFailure(
                f"Failed to load work types: {e}", operation="list_work_types"
            ) from e
