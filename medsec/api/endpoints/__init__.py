"""
API Endpoints Package
"""

from medsec.api.endpoints import threats, ml_models

__all__ = ["threats", "ml_models"]
