# src/jsonsource/api/server.py
import logging
import time
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ..config import Settings
from ..errors import JsonSourceError, MalformedDocumentError, SourceLoadError
from ..generator import generate
from ..sources.loader import fetch_sample

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("jsonsource.api")

# ============================================================================
# FASTAPI APP
# ============================================================================

app = FastAPI(title="jsonsource")


class GenerateIn(BaseModel):
    namespace: str = ""
    class_name: str
    json_text: Optional[str] = None
    url: Optional[str] = None
    collision_policy: Optional[str] = None  # "reject" | "merge"; None = usa Settings


class GenerateOut(BaseModel):
    file_name: str
    entry_point: str
    declarations: Dict[str, str]
    source: str


@app.get("/health")
def health():
    logger.info("Health check requested")
    return {"status": "ok"}


@app.post("/generate", response_model=GenerateOut)
def generate_models(body: GenerateIn):
    """
    Genera i modelli per un campione JSON inline (`json_text`) o remoto (`url`).
    """
    request_id = f"{int(time.time() * 1000)}"
    start_time = time.time()

    logger.info(f"[{request_id}] ========== NEW GENERATE REQUEST: {body.namespace}.{body.class_name} ==========")

    settings = Settings()
    if body.collision_policy:
        if body.collision_policy not in ("reject", "merge"):
            raise HTTPException(status_code=422, detail=f"unknown collision_policy {body.collision_policy!r}")
        settings = settings.model_copy(update={"collision_policy": body.collision_policy})

    if (body.json_text is None) == (body.url is None):
        raise HTTPException(status_code=422, detail="provide exactly one of json_text or url")

    try:
        json_text = body.json_text
        if json_text is None:
            logger.info(f"[{request_id}] Fetching sample from {body.url}")
            json_text = fetch_sample(body.url, timeout_s=settings.fetch_timeout_s)

        generated = generate(body.namespace, body.class_name, json_text, settings=settings)

    except (MalformedDocumentError, SourceLoadError) as e:
        logger.warning(f"[{request_id}] Bad sample: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except JsonSourceError as e:
        logger.error(f"[{request_id}] ========== REQUEST FAILED ==========")
        logger.error(f"[{request_id}] Error type: {type(e).__name__}")
        logger.error(f"[{request_id}] Error message: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))

    total_duration = time.time() - start_time
    logger.info(f"[{request_id}] ========== REQUEST COMPLETED in {total_duration:.3f}s ==========")

    return GenerateOut(
        file_name=generated.file_name,
        entry_point=generated.entry_point,
        declarations=generated.declarations,
        source=generated.text,
    )
