# crm_mock_api/api/routes_customers.py
from fastapi import APIRouter, Depends
from crm_mock_api.services.dataset_service import DatasetService, get_dataset_service

router = APIRouter(prefix="/customers", tags=["CRM System"])


@router.get("")
def list_customers(dataset: DatasetService = Depends(get_dataset_service)):
    return list(dataset.get_customers())
