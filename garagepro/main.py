from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import settings
from .routers import health, inference, speech, train

logger = logging.getLogger("garagepro")

app = FastAPI(
    title="Cardinal GaragePro backend",
    description="Lawn and landscaping estimates, train-collect log, text-to-speech",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(inference.router)
app.include_router(train.router)
app.include_router(speech.router)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    """Bodies that can't be read as the expected JSON object are a 400, not a 422."""
    logger.warning("Invalid body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.on_event("startup")
def prepare_train_log():
    """Create the data directory and an empty train log on first run."""
    from .training_log import get_train_log
    if settings.TRAIN_LOG_ENABLED:
        try:
            get_train_log().ensure_exists()
        except OSError as e:
            # Never let log setup prevent app startup
            logger.warning(f"Train log setup warning: {e}")


def run():
    """Start the server on settings.PORT."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    logger.info(f"{settings.SERVICE_NAME} running on port {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
