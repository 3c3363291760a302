from __future__ import annotations

from fastapi import FastAPI

from imagen.handlers import image_handler

app = FastAPI(title="imagen")


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# catch-all image route, registered last so /healthz wins
app.include_router(image_handler.router)
