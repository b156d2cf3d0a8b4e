"""
Machine Learning API Endpoints
Model metrics, training and snapshot transfer
"""

from fastapi import APIRouter, Body, Depends, HTTPException, status
from typing import Any, Dict

from medsec.api.dependencies import get_model_store
from medsec.ml.model_store import ModelStore
from medsec.models.ml_models import ModelMetrics, TrainingSample
from medsec.models.schemas import TrainingSampleResponse

router = APIRouter()

@router.get("/metrics", response_model=ModelMetrics)
def get_model_metrics(store: ModelStore = Depends(get_model_store)):
    return store.get_model_metrics()

@router.get("/feature-importance", response_model=Dict[str, float])
def get_feature_importance(store: ModelStore = Depends(get_model_store)):
    return store.get_feature_importance()

@router.post("/train", response_model=ModelMetrics)
def train_model(store: ModelStore = Depends(get_model_store)):
    if not store.train_or_retrain():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=(
                f"Insufficient training data: at least "
                f"{store.settings.min_training_samples} samples required"
            )
        )

    return store.get_model_metrics()

@router.post("/samples", response_model=TrainingSampleResponse, status_code=status.HTTP_201_CREATED)
def add_training_sample(
    sample: TrainingSample,
    store: ModelStore = Depends(get_model_store)
):
    retrained = store.add_training_sample(sample)
    return TrainingSampleResponse(
        training_data_size=store.get_model_metrics().training_data_size,
        retrained=retrained
    )

@router.get("/export")
def export_model(store: ModelStore = Depends(get_model_store)):
    return store.export_snapshot().to_document()

@router.post("/import", response_model=ModelMetrics)
def import_model(
    document: Dict[str, Any] = Body(...),
    store: ModelStore = Depends(get_model_store)
):
    if not store.import_snapshot(document):
        raise HTTPException(
            status_code=422,
            detail="Invalid model snapshot"
        )

    return store.get_model_metrics()
