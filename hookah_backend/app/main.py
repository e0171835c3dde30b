# main.py — backend entrypoint
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hookah_backend.app.config import APP_ENV, CORS_ORIGINS, DEBUG_MODE
from hookah_backend.app.routers import flavors, guest_mixes, mix

log = logging.getLogger("hookah.main")

app = FastAPI(title="Hookah Mixes API", debug=DEBUG_MODE)
log.info("starting in %s mode", APP_ENV)

# --- CORS for the WebApp frontend ----------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
for _module in (flavors, guest_mixes, mix):
    app.include_router(_module.router, prefix="/api")
    log.info("mounted %s at /api%s", _module.__name__.rsplit(".", 1)[-1], _module.router.prefix)

# --- Health ------------------------------------------------------------------
@app.get("/api/health")
async def api_health():
    return {"ok": True}

@app.get("/health")
async def health():
    return {"ok": True}
