"""
Page HTML du simulateur (formulaire + panneau de résultats).
"""
from typing import Dict, Optional
from jinja2 import Template

from incentives.core.errors import InvalidInputError
from incentives.core.incentive_tiers import NRV_TARGET, ER_TARGET
from incentives.core.normalize import parse_flag
from incentives.services.formatting import group_indian


def render_page(
    form: Optional[Dict] = None,
    result: Optional[Dict] = None,
    display: Optional[Dict[str, str]] = None,
    error: Optional[str] = None,
) -> str:
    """
    Rend la page du simulateur.
    - error : bandeau d'erreur, pas de résultats
    - result SIH_NOT_MET : avertissement S.I.H., pas de résultats
    - sinon : tableau des résultats (display)
    """
    form = form or {}
    try:
        sih_checked = parse_flag(form.get("sih_condition_met"))
    except InvalidInputError:
        sih_checked = False

    template = Template(_get_html_template(), autoescape=True)
    return template.render(
        form=form,
        result=result,
        display=display,
        error=error,
        sih_checked=sih_checked,
        nrv_target=group_indian(f"{NRV_TARGET:.0f}"),
        er_target=group_indian(f"{ER_TARGET:.0f}"),
    )


def _get_html_template() -> str:
    return """<!DOCTYPE html>
<html lang="fr">
<head>
<meta charset="utf-8">
<title>Simulateur d'incentive</title>
<style>
  body { font-family: Arial, sans-serif; max-width: 640px; margin: 32px auto; color: #1f2937; }
  label { display: block; margin-top: 12px; font-weight: bold; }
  input[type=text] { width: 100%; padding: 6px; }
  .error { background: #fee2e2; color: #991b1b; padding: 10px; margin-top: 16px; }
  .warning { background: #fef3c7; color: #92400e; padding: 10px; margin-top: 16px; }
  table { width: 100%; border-collapse: collapse; margin-top: 16px; }
  td { padding: 6px; border-bottom: 1px solid #e5e7eb; }
  td.amount { text-align: right; }
  tr.total td { font-weight: bold; }
</style>
</head>
<body>
<h1>Simulateur d'incentive</h1>
<p>Objectif NRV : {{ nrv_target }} &middot; Objectif ER : {{ er_target }}</p>
<form method="post" action="/">
  <label for="nrv_actual">NRV réalisé</label>
  <input type="text" id="nrv_actual" name="nrv_actual" value="{{ form.get('nrv_actual', '') }}">
  <label for="er_actual">ER réalisé</label>
  <input type="text" id="er_actual" name="er_actual" value="{{ form.get('er_actual', '') }}">
  <label for="er_new_customers">ER nouveaux clients</label>
  <input type="text" id="er_new_customers" name="er_new_customers" value="{{ form.get('er_new_customers', '') }}">
  <label><input type="checkbox" name="sih_condition_met" {% if sih_checked %}checked{% endif %}> Condition S.I.H. remplie</label>
  <p><button type="submit">Calculer</button></p>
</form>
{% if error %}
<div class="error" id="error">Error: {{ error }}</div>
{% elif result and result.status == "SIH_NOT_MET" %}
<div class="warning" id="sihWarning">Condition S.I.H. non remplie : aucun incentive n'est dû.</div>
{% elif display %}
<table id="resultsContent">
  <tr><td>Atteinte NRV</td><td class="amount">{{ display.nrv_percent }}</td></tr>
  <tr><td>Atteinte ER</td><td class="amount">{{ display.er_percent }}</td></tr>
  <tr><td>Palier final</td><td class="amount">{{ display.final_tier }}</td></tr>
  <tr><td>Incentive NRV</td><td class="amount">{{ display.nrv_incentive }}</td></tr>
  <tr><td>Incentive ER</td><td class="amount">{{ display.er_incentive }}</td></tr>
  <tr><td>Booster nouveaux clients</td><td class="amount">{{ display.booster_incentive }}</td></tr>
  <tr class="total"><td>Total incentive</td><td class="amount">{{ display.total_incentive }}</td></tr>
  <tr><td>Versement 1</td><td class="amount">{{ display.payout_1 }}</td></tr>
  <tr><td>Versement 2</td><td class="amount">{{ display.payout_2 }}</td></tr>
</table>
{% endif %}
</body>
</html>
"""
