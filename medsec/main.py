"""
MedSec - Main FastAPI Application
Entry point for the hospital threat classification service
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medsec import __version__
from medsec.api.endpoints import ml_models, threats
from medsec.core.config import Settings, settings as default_settings
from medsec.ml.model_store import ModelStore
from medsec.ml.threat_classifier import ThreatClassifier
from medsec.models.schemas import SystemHealth
from medsec.utils.logger import configure_application_logging

def create_app(
    app_settings: Optional[Settings] = None,
    classifier: Optional[ThreatClassifier] = None
) -> FastAPI:
    app_settings = app_settings or default_settings
    logger = configure_application_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        metrics = app.state.threat_classifier.model_store.get_model_metrics()
        logger.info(
            f"Starting {app_settings.app_name} "
            f"(trained={metrics.is_model_trained}, samples={metrics.training_data_size})"
        )
        yield
        logger.info(f"Shutting down {app_settings.app_name}")

    app = FastAPI(
        title=app_settings.app_name,
        description="Threat classification for hospital network security events",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    app.state.threat_classifier = classifier or ThreatClassifier(
        model_store=ModelStore(settings=app_settings)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        threats.router,
        prefix=f"{app_settings.api_v1_str}/threats",
        tags=["Threat Classification"]
    )

    app.include_router(
        ml_models.router,
        prefix=f"{app_settings.api_v1_str}/ml",
        tags=["Machine Learning"]
    )

    @app.get("/health", response_model=SystemHealth)
    def health_check():
        metrics = app.state.threat_classifier.model_store.get_model_metrics()
        return SystemHealth(
            status="healthy",
            version=__version__,
            is_model_trained=metrics.is_model_trained,
            training_data_size=metrics.training_data_size
        )

    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "medsec.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
