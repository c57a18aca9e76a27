import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from gtm_studio.api.routes import router
from gtm_studio.core.settings import ensure_directories, settings
from gtm_studio.services.normalizer import InvalidPayload

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ensure_directories()

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidPayload)
async def invalid_payload_handler(request: Request, exc: InvalidPayload):
    logger.warning(f"Rejected payload on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


app.include_router(router)
app.mount("/outputs", StaticFiles(directory=settings.outputs_dir), name="outputs")


@app.get("/")
def health():
    return {"ok": True, "service": settings.app_name}
