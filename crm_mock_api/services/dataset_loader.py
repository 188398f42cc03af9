# crm_mock_api/services/dataset_loader.py
from pathlib import Path
import logging

from pydantic import ValidationError

from crm_mock_api.models.dataset import DatasetDocument

logger = logging.getLogger(__name__)

# bundled with the package, never written
DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "data.json"


class DatasetLoadError(RuntimeError):
    """
    Raised when the bundled dataset is missing, unreadable or malformed.
    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def load_dataset() -> DatasetDocument:
    path = DATA_PATH

    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise DatasetLoadError(f"Dataset resource not found: {path}", path) from exc
    except OSError as exc:
        raise DatasetLoadError(f"Failed to read dataset from {path}", path) from exc

    try:
        document = DatasetDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise DatasetLoadError(f"Failed to load data from {path.name}: {exc}", path) from exc

    logger.info(
        "loaded dataset from %s (customers=%d, products=%d)",
        path,
        len(document.crm.customers) if document.crm else 0,
        len(document.inventory.products) if document.inventory else 0,
    )
    return document
