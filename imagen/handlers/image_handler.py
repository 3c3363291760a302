"""On-demand image endpoint driven by the URL mini-language."""
from __future__ import annotations

import logging
import random

from fastapi import APIRouter, HTTPException, Response

from imagen.errors import ImagenError
from imagen.parsing import parse_url
from imagen.services.encoder import content_type, encode
from imagen.services.rasterizer import render

router = APIRouter()
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# GET /{path}
# ---------------------------------------------------------------------------


@router.get("/{path:path}")
def serve_image(path: str) -> Response:
    """Render the image described by *path*.

    Declared sync so FastAPI runs the CPU-bound render in its threadpool.
    Every request works on its own config and random source.
    """

    rng = random.Random()
    try:
        config = parse_url(path, rng)
    except ImagenError as exc:
        logger.info("Rejected %r: %s", path, exc)
        raise HTTPException(status_code=400, detail=f"Invalid URL: {exc}") from exc

    try:
        body = encode(render(config, rng), config.format)
    except Exception as exc:
        logger.exception("Image generation failed for %r", path)
        raise HTTPException(status_code=500, detail=f"Failed to generate image: {exc}") from exc

    return Response(content=body, media_type=content_type(config.format))
