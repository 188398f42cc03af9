# crm_mock_api/services/dataset_service.py
from typing import Optional, Tuple
from fastapi import Request

from crm_mock_api.models.dataset import Customer, DatasetDocument, Product


class DatasetService:
    """
    Read-only access to the loaded dataset.

    Every accessor is total: no document, no section and an empty section
    all come back as an empty tuple.
    """

    def __init__(self, document: Optional[DatasetDocument]):
        self._document = document

    @property
    def document(self) -> Optional[DatasetDocument]:
        return self._document

    def _section_items(self, section_name: str, items_name: str) -> tuple:
        if self._document is None:
            return ()
        section = getattr(self._document, section_name)
        if section is None:
            return ()
        return getattr(section, items_name)

    def get_customers(self) -> Tuple[Customer, ...]:
        return self._section_items("crm", "customers")

    def get_products(self) -> Tuple[Product, ...]:
        return self._section_items("inventory", "products")


def get_dataset_service(request: Request) -> DatasetService:
    # set once by create_app() before the app is returned
    return request.app.state.dataset
