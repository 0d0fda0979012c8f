# rocket_info/main.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .errors import RocketInfoError
from .schemas import ErrorResponse, RocketInfoResponse
from .service import RocketInfoService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to process your question"

app = FastAPI(title="RocketInfo", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

service = RocketInfoService(settings)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/RocketInfo", response_model=RocketInfoResponse, responses={500: {"model": ErrorResponse}})
def rocket_info(question: Optional[str] = Query(default=None)):
    logger.info("RocketInfo function processing a request")
    try:
        q = service.resolve_question(question)
        logger.info("Processing question: %s", q)
        answer = service.answer(q)
        return RocketInfoResponse(Question=q, Response=answer)
    except Exception as e:
        logger.exception("Error processing request")
        status = e.status_code if isinstance(e, RocketInfoError) else 500
        body = ErrorResponse(Error=ERROR_MESSAGE, Details=str(e))
        return JSONResponse(status_code=status, content=body.model_dump())
