"""
Text-to-speech endpoint.

POST /speak: returns audio/mpeg for the given text.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from .. import schemas
from ..speech import SpeechError, SpeechSynthesizer, get_speech_synthesizer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["speech"])


@router.post("/speak")
def speak(
    request: schemas.SpeakRequest,
    synthesizer: SpeechSynthesizer = Depends(get_speech_synthesizer),
):
    try:
        audio = synthesizer.synthesize(request.text, request.voice)
    except SpeechError as e:
        logger.error("/speak failed: %s", e)
        return JSONResponse(status_code=500, content={"error": "Speech failed"})
    return Response(content=audio, media_type="audio/mpeg")
