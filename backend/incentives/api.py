"""
Routes API FastAPI.
"""
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Form
from fastapi.responses import HTMLResponse

from incentives.core.errors import InvalidInputError
from incentives.core.incentive_tiers import (
    NRV_FIXED_INCENTIVES,
    ER_FIXED_INCENTIVES,
    get_incentive_config,
)
from incentives.services.incentive_calculator import calculate_incentive_from_raw
from incentives.services.tier_engine import get_tier_progress
from incentives.services.formatting import build_display
from incentives.services.page import render_page
from incentives.schemas import (
    IncentiveRequest,
    IncentiveResponse,
    TierLookupResponse,
    IncentiveConfig,
)

router = APIRouter()
page_router = APIRouter()


@router.post("/incentive/calculate", response_model=IncentiveResponse)
async def calculate(body: IncentiveRequest):
    """Calcule l'incentive (NRV + ER + booster) et les deux versements."""
    try:
        result = calculate_incentive_from_raw(body.model_dump())
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        print(f"[INCENTIVE] Erreur calcul: {e}")
        raise HTTPException(status_code=500, detail=f"Erreur calcul: {str(e)}")

    return {**result, "display": build_display(result)}


@router.get("/incentive/config", response_model=IncentiveConfig)
async def get_config():
    """Objectifs, paliers et barèmes en vigueur."""
    return get_incentive_config()


@router.get("/incentive/tier", response_model=TierLookupResponse)
async def get_tier(percent: float = Query(..., description="Pourcentage d'atteinte")):
    """Palier applicable pour un pourcentage, et montants fixes associés."""
    progress = get_tier_progress(percent)
    tier = progress["tier"]
    return {
        **progress,
        "nrv_incentive": NRV_FIXED_INCENTIVES.get(tier, 0),
        "er_incentive": ER_FIXED_INCENTIVES.get(tier, 0),
    }


@page_router.get("/", response_class=HTMLResponse)
async def simulator_page():
    """Formulaire du simulateur."""
    return HTMLResponse(render_page())


@page_router.post("/", response_class=HTMLResponse)
async def simulator_submit(
    nrv_actual: Optional[str] = Form(None),
    er_actual: Optional[str] = Form(None),
    er_new_customers: Optional[str] = Form(None),
    sih_condition_met: Optional[str] = Form(None),
):
    """Soumission du formulaire : résultats, avertissement S.I.H. ou erreur."""
    form = {
        "nrv_actual": nrv_actual or "",
        "er_actual": er_actual or "",
        "er_new_customers": er_new_customers or "",
        "sih_condition_met": sih_condition_met or "",
    }
    try:
        result = calculate_incentive_from_raw(form)
    except InvalidInputError as e:
        return HTMLResponse(render_page(form=form, error=e.message), status_code=400)

    return HTMLResponse(render_page(form=form, result=result, display=build_display(result)))
