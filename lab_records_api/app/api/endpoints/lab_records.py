"""
Lab record endpoints.

These routes expose the loaded lab records read‑only.  Clients can
list every record, list the distinct lab names, or filter records by
name through the ``LabName`` query parameter.  Name matching is exact
but ignores case.

Two strict filter routes exist, ``/LabRecords/Search`` and
``/LabRecords/LabName``; both require ``LabName`` and answer HTTP 400
when it is missing or empty.  ``/LabRecords`` accepts ``LabName`` as an
optional filter and lists everything without it.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from lab_records_api.app.schemas.lab_record import LabRecord
from lab_records_api.app.services.lab_record_service import LabRecordService, MissingParameterError

logger = logging.getLogger(__name__)

router = APIRouter()

LAB_NAME_DESCRIPTION = "Lab test name to match, ignoring case (e.g. RBC)"


def get_lab_record_service(request: Request) -> LabRecordService:
    """Return the service built for the application at startup."""
    return request.app.state.lab_record_service


def _filter_or_400(service: LabRecordService, lab_name: Optional[str]) -> List[LabRecord]:
    try:
        return service.filter_by_name(lab_name)
    except MissingParameterError as e:
        logger.info("Rejected filter request: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/", response_model=List[LabRecord])
async def list_root(service: LabRecordService = Depends(get_lab_record_service)) -> List[LabRecord]:
    """Return every lab record in load order."""
    return service.list_all()


@router.get("/LabRecords", response_model=List[LabRecord])
async def list_lab_records(
    lab_name: Optional[str] = Query(None, alias="LabName", description=LAB_NAME_DESCRIPTION),
    service: LabRecordService = Depends(get_lab_record_service),
) -> List[LabRecord]:
    """Return all lab records, or only those named ``LabName`` when given."""
    return service.filter_by_name_query(lab_name)


@router.get("/LabNames", response_model=List[str])
async def list_lab_names(service: LabRecordService = Depends(get_lab_record_service)) -> List[str]:
    """Return the distinct lab names, each once."""
    return service.list_distinct_names()


@router.get("/LabRecords/Search", response_model=List[LabRecord])
async def search_lab_records(
    lab_name: Optional[str] = Query(None, alias="LabName", description=LAB_NAME_DESCRIPTION),
    service: LabRecordService = Depends(get_lab_record_service),
) -> List[LabRecord]:
    """Return the records named ``LabName``.

    An unknown name gives an empty list.  Returns HTTP 400 if
    ``LabName`` is missing or empty.
    """
    return _filter_or_400(service, lab_name)


@router.get("/LabRecords/LabName", response_model=List[LabRecord])
async def filter_lab_records(
    lab_name: Optional[str] = Query(None, alias="LabName", description=LAB_NAME_DESCRIPTION),
    service: LabRecordService = Depends(get_lab_record_service),
) -> List[LabRecord]:
    """Same as ``/LabRecords/Search``."""
    return _filter_or_400(service, lab_name)
