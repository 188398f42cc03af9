# main.py
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crm_mock_api.api import routes_customers, routes_inventory, routes_health
from crm_mock_api.core.config import settings
from crm_mock_api.services.dataset_loader import DatasetLoadError, load_dataset
from crm_mock_api.services.dataset_service import DatasetService

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "CRM System", "description": "Mock CRM for customer data"},
    {"name": "Inventory System", "description": "Mock Inventory for product data"},
]


def create_app(dataset: Optional[DatasetService] = None) -> FastAPI:
    # load before any router can serve; a broken fixture aborts startup
    if dataset is None:
        try:
            dataset = DatasetService(load_dataset())
        except DatasetLoadError:
            logger.critical("dataset could not be loaded; refusing to start", exc_info=True)
            raise

    app = FastAPI(title=settings.APP_NAME, openapi_tags=TAGS_METADATA)
    app.state.dataset = dataset

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router)
    app.include_router(routes_customers.router)
    app.include_router(routes_inventory.router)

    logger.info("%s ready (env=%s)", settings.APP_NAME, settings.ENV)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
