# crm_mock_api/api/routes_inventory.py
from fastapi import APIRouter, Depends
from crm_mock_api.services.dataset_service import DatasetService, get_dataset_service

router = APIRouter(prefix="/products", tags=["Inventory System"])


@router.get("")
def list_products(dataset: DatasetService = Depends(get_dataset_service)):
    return list(dataset.get_products())
