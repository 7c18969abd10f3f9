"""
Application FastAPI principale.
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from incentives.api import router, page_router
from incentives.core.incentive_tiers import NRV_TARGET, ER_TARGET, ACHIEVEMENT_TIERS
from incentives.services.formatting import group_indian

# Charger le .env situé dans le dossier backend/ (un niveau au-dessus de incentives/)
_env_path = Path(__file__).parent.parent / ".env"
load_dotenv(_env_path)

app = FastAPI(title="S.I.H. Incentive Calculator API", version="0.1.0")


@app.on_event("startup")
def on_startup():
    nrv_target = group_indian(f"{NRV_TARGET:.0f}")
    er_target = group_indian(f"{ER_TARGET:.0f}")
    print(f"[STARTUP] Objectif NRV: {nrv_target}, Objectif ER: {er_target}, "
          f"Paliers: {', '.join(str(t) for t in ACHIEVEMENT_TIERS)}")


# CORS pour le frontend
_extra_origins = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost",
        *_extra_origins,
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api", tags=["api"])
app.include_router(page_router, tags=["simulateur"])


@app.get("/health")
async def health():
    return {"status": "ok"}
