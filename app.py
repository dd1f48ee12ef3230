# app.py
import base64
import logging
from datetime import datetime, timedelta
from io import BytesIO

from flask import Flask, jsonify, request, session
from flask_login import current_user, login_required
from PIL import Image
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

import vision
from auth import auth_bp
from catalog import get_store
from classifier import ClassificationResult, classify_label, classify_query
from config import Config
from display import DisplayState
from extensions import db, login_manager
from leaderboard import quiz_bp
from materials import MaterialClass
from models import ClassificationLog, utcnow

# ---------------- App & Config ----------------
app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=app.config["LOG_LEVEL"],
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("binsort.app")

db.init_app(app)
login_manager.init_app(app)

app.register_blueprint(auth_bp)  # /login, /signup, /logout
app.register_blueprint(quiz_bp)  # /api/quiz/*, /api/carbon-quiz, /api/leaderboard


@app.cli.command("init-db")
def init_db():
    """Create missing tables."""
    db.create_all()
    logger.info("database ready at %s", app.config["SQLALCHEMY_DATABASE_URI"])


def _store():
    return get_store(app.config["DEFAULT_REGION"])


# ---------------- Helpers ----------------
def _log_classification(source: str, label: str, result: ClassificationResult,
                        confidence: float | None = None) -> None:
    if not current_user.is_authenticated:
        return
    try:
        db.session.add(ClassificationLog(
            user_id=current_user.id,
            source=source,
            label=label[:120],
            material=result.material.value,
            bin_name=result.bin.name,
            region=result.region,
            confidence=confidence,
        ))
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("could not log classification")


def _display_state() -> DisplayState:
    return DisplayState.from_dict(session.get("display"))


def _save_display(state: DisplayState) -> None:
    session["display"] = state.to_dict()


def _decode_image(img_data: str) -> Image.Image:
    try:
        _, encoded = img_data.split(",", 1)
    except ValueError:
        encoded = img_data
    img = Image.open(BytesIO(base64.b64decode(encoded)))
    img.load()
    return img


# ---------------- Health ----------------
@app.route("/health")
def health():
    store = _store()
    return jsonify({
        "status": "ok",
        "default_region": store.default_region,
        "regions": len(store),
        "device": str(vision.device),
    })


# ---------------- Catalog ----------------
@app.route("/api/regions", methods=["GET"])
def api_regions():
    return jsonify({
        "ok": True,
        "regions": [{"code": c, "name": n} for c, n in _store().list_regions()],
    })


@app.route("/api/regions/<code>/bins", methods=["GET"])
def api_region_bins(code):
    store = _store()
    if code not in store:
        return jsonify({"ok": False, "error": f"Unknown region '{code}'"}), 404
    region = store.get_region(code)
    return jsonify({
        "ok": True,
        "region": {"code": region.code, "name": region.name},
        "bins": [b.to_dict() for b in region.bins],
    })


# ---------------- Classification ----------------
def _scan_response(label: str, confidence: float | None, region: str | None):
    """Shared tail of /api/classify and /process_image: threshold, classify, log, display."""
    threshold = app.config["CONFIDENCE_THRESHOLD"]
    if confidence is not None and confidence < threshold:
        return {
            "ok": True,
            "label": label,
            "confidence": confidence,
            "abstained": True,
            "why": "Low confidence prediction. Try another angle or better light.",
        }

    result = classify_label(label, region, store=_store())
    logger.debug("scan %r in %s -> %s", label, result.region, result.bin.name)
    _log_classification("scan", label, result, confidence)
    payload = dict(result.to_dict(), ok=True, label=label, confidence=confidence, abstained=False)
    _save_display(_display_state().on_scan(payload))
    return payload


@app.route("/api/classify", methods=["POST"])
def api_classify():
    data = request.get_json(silent=True) or {}
    label = data.get("label")
    if not isinstance(label, str) or not label.strip():
        return jsonify({"ok": False, "error": "No label provided."}), 400
    confidence = data.get("confidence")
    if confidence is not None:
        try:
            confidence = float(confidence)
        except (TypeError, ValueError):
            return jsonify({"ok": False, "error": "confidence must be a number"}), 400
    return jsonify(_scan_response(label.strip(), confidence, data.get("region")))


@app.route("/api/search", methods=["GET"])
def api_search():
    query = (request.args.get("q") or "").strip()
    region = request.args.get("region")
    if not query:
        return jsonify({"ok": False, "error": "No query provided."}), 400

    result = classify_query(query, region, store=_store())
    if result is None:
        _save_display(_display_state().on_search(query, None))
        return jsonify({
            "ok": True,
            "found": False,
            "query": query,
            "region": _store().resolve_region(region),
        }), 404

    _log_classification("search", query, result)
    payload = dict(result.to_dict(), ok=True, found=True, query=query)
    _save_display(_display_state().on_search(query, payload))
    return jsonify(payload)


@app.route("/process_image", methods=["POST"])
def process_image():
    data = request.get_json(silent=True) or {}
    img_data = data.get("image_data")
    if not img_data or not isinstance(img_data, str):
        return jsonify({"ok": False, "error": "No image data provided."}), 400

    try:
        img = _decode_image(img_data)
    except (ValueError, OSError) as e:
        return jsonify({"ok": False, "error": f"Invalid image data: {e}"}), 400

    class_names = vision.load_class_names(app.config["CLASS_NAMES_PATH"])
    try:
        label, confidence = vision.predict(img, app.config["MODEL_STATE_PATH"], class_names)
    except OSError:
        logger.exception("image model unavailable")
        return jsonify({"ok": False, "error": "Image model unavailable."}), 503
    return jsonify(_scan_response(label, confidence, data.get("region")))


@app.route("/api/display", methods=["GET"])
def api_display():
    state = _display_state()
    return jsonify({"ok": True, "source": state.source.value, "query": state.query,
                    "result": state.current})


# ---------------- Progress APIs ----------------
@app.route("/api/progress/summary", methods=["GET"])
@login_required
def api_progress_summary():
    empty = {m.value: 0 for m in MaterialClass}
    totals = dict(empty)
    rows = (db.session.query(ClassificationLog.material, func.count())
            .filter(ClassificationLog.user_id == current_user.id)
            .group_by(ClassificationLog.material).all())
    for material, cnt in rows:
        totals[material] = cnt

    # last 14 days
    today = utcnow().date()
    since = today - timedelta(days=13)
    since_dt = datetime.combine(since, datetime.min.time())
    by_day = {(since + timedelta(days=i)).isoformat(): dict(empty) for i in range(14)}

    recent = (ClassificationLog.query
              .filter(ClassificationLog.user_id == current_user.id)
              .filter(ClassificationLog.created_at >= since_dt)
              .all())
    for log in recent:
        k = log.created_at.date().isoformat()
        if k in by_day:
            by_day[k][log.material] = by_day[k].get(log.material, 0) + 1

    return jsonify({"ok": True, "total": sum(totals.values()), "totals": totals, "per_day": by_day})


@app.route("/api/progress/logs", methods=["GET"])
@login_required
def api_progress_logs():
    try:
        limit = min(int(request.args.get("limit", 200)), 1000)
    except ValueError:
        return jsonify({"ok": False, "error": "limit must be an integer"}), 400
    logs = (ClassificationLog.query
            .filter_by(user_id=current_user.id)
            .order_by(ClassificationLog.created_at.desc())
            .limit(limit).all())
    return jsonify({"ok": True, "logs": [log.to_dict() for log in logs]})


@app.route("/api/logs", methods=["DELETE"])
@login_required
def api_clear_logs():
    ClassificationLog.query.filter_by(user_id=current_user.id).delete()
    db.session.commit()
    return jsonify({"ok": True})


# ---------------- Main ----------------
if __name__ == "__main__":
    with app.app_context():
        db.create_all()
    app.run(debug=True)
