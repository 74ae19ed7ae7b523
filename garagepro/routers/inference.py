"""
Estimate endpoint.

POST /inference: price a mowing / landscaping / generic job.
The estimate is copied to the event recorder after the response is built.
"""

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends
from fastapi.responses import JSONResponse

from .. import schemas
from ..estimators.engine import EstimateEngine
from ..events import EventRecorder, get_event_recorder

logger = logging.getLogger(__name__)

router = APIRouter(tags=["estimates"])

engine = EstimateEngine()


@router.post("/inference", response_model=schemas.EstimateResponse)
def inference(
    background_tasks: BackgroundTasks,
    request: Optional[schemas.EstimateRequest] = Body(None),
    recorder: EventRecorder = Depends(get_event_recorder),
):
    """
    Price a job from mode/service, size inputs and free-text notes.
    A missing body is priced as a generic job.
    """
    try:
        result = engine.estimate(request or schemas.EstimateRequest())
    except Exception:
        logger.exception("/inference failed")
        return JSONResponse(status_code=500, content={"error": "Inference failed"})

    background_tasks.add_task(recorder.record, "inference", result.model_dump(by_alias=True))
    return result
