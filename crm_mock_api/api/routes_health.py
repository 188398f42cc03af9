# crm_mock_api/api/routes_health.py
from fastapi import APIRouter, Depends
from crm_mock_api.services.dataset_service import DatasetService, get_dataset_service

router = APIRouter(tags=["health"])


@router.get("/health")
def health(dataset: DatasetService = Depends(get_dataset_service)):
    return {
        "status": "ok",
        "customers": len(dataset.get_customers()),
        "products": len(dataset.get_products()),
    }
