import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from .. import schemas
from ..training_log import TrainLog, get_train_log

logger = logging.getLogger(__name__)

router = APIRouter(tags=["train"])


@router.post("/train-collect", response_model=schemas.OkResponse)
def train_collect(
    incoming: Optional[dict[str, Any]] = Body(None),
    train_log: TrainLog = Depends(get_train_log),
):
    """Append an event to the train log. Keeps only the newest entries."""
    try:
        train_log.append(incoming or {})
    except Exception:
        logger.exception("/train-collect failed")
        return JSONResponse(status_code=500, content={"error": "train-collect failed"})
    return {"ok": True}
