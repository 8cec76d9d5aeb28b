import logging
import os
from uuid import uuid4

from flask import Flask, abort, jsonify, redirect, render_template, request, session, url_for

from mortgage_calc.chart import chart_payload
from mortgage_calc.formatter import CURRENCY_OPTIONS, normalize_currency, summary_display
from mortgage_calc.theme import theme_palette
from mortgage_calc_web.session_store import create_store_from_env
from mortgage_calc_web.state import (
    MORTGAGE_TYPES,
    AppState,
    apply_inputs,
    reset_state,
    state_from_record,
    state_to_record,
    switch_theme,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["ASSET_VERSION"] = os.environ.get("ASSET_VERSION", "1")
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
session_store = create_store_from_env(os.environ.get("MORTGAGE_STORE_URL"))


def _ensure_user_token() -> str:
    token = session.get("user_token")
    if not token:
        token = uuid4().hex
        session["user_token"] = token
        session.modified = True
    return token


def _load_state(user_token: str) -> AppState:
    return state_from_record(session_store.load(user_token))


def _save_state(user_token: str, state: AppState) -> None:
    session_store.save(user_token, state_to_record(state))


def _results_payload(state: AppState, currency: str) -> dict:
    if state.results is None:
        return {"summary": None, "display": None, "chart": None, "theme": state.theme}
    return {
        "summary": state.results.to_dict(),
        "display": summary_display(state.results, currency),
        "chart": chart_payload(state.results, state.theme, currency),
        "theme": state.theme,
    }


def _render_index(state: AppState, currency: str):
    payload = _results_payload(state, currency)
    return render_template(
        "index.html",
        state=state,
        display=payload["display"],
        chart=payload["chart"],
        palette=theme_palette(state.theme),
        mortgage_types=MORTGAGE_TYPES,
        currency_code=currency,
        currency_options=CURRENCY_OPTIONS,
        asset_version=app.config["ASSET_VERSION"],
    )


@app.route("/", methods=["GET", "POST"])
def index():
    user_token = _ensure_user_token()
    state = _load_state(user_token)
    currency = normalize_currency(request.values.get("currency"))

    if request.method == "POST":
        action = request.form.get("action", "calculate")
        if action == "reset":
            reset_state(state)
        else:
            apply_inputs(
                state,
                request.form.get("principal"),
                request.form.get("interest_rate"),
                request.form.get("loan_term"),
                request.form.get("mortgage_type"),
            )
        _save_state(user_token, state)

    return _render_index(state, currency)


@app.post("/theme")
def toggle_theme_route():
    user_token = _ensure_user_token()
    state = _load_state(user_token)
    switch_theme(state)
    _save_state(user_token, state)
    return redirect(url_for("index"))


@app.post("/api/calculate")
def api_calculate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Expected a JSON object")
    user_token = _ensure_user_token()
    state = _load_state(user_token)
    apply_inputs(
        state,
        data.get("principal"),
        data.get("interest_rate"),
        data.get("loan_term"),
        data.get("mortgage_type"),
    )
    _save_state(user_token, state)
    return jsonify(_results_payload(state, normalize_currency(data.get("currency"))))


@app.get("/api/state")
def api_state():
    user_token = _ensure_user_token()
    return jsonify(state_to_record(_load_state(user_token)))


if __name__ == "__main__":
    logger.info("Starting Mortgage Calculator web app...")
    app.run(host="0.0.0.0", port=8710, debug=True)
