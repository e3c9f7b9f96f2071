"""
Health check endpoint.

Reports that the process is up together with the number of lab
records it serves.  Intended for container and load balancer probes.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from lab_records_api.app.api.endpoints.lab_records import get_lab_record_service
from lab_records_api.app.services.lab_record_service import LabRecordService

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(service: LabRecordService = Depends(get_lab_record_service)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "records": len(service),
        "time": datetime.now(timezone.utc).isoformat(),
    }
