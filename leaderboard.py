# leaderboard.py
# Carbon quiz endpoints and the public leaderboard.
import logging

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from carbon_quiz import (
    SECTIONS,
    AnalysisError,
    CarbonEstimator,
    QuizValidationError,
    missing_required,
    validate_answers,
)
from extensions import db
from models import LeaderboardEntry

logger = logging.getLogger(__name__)

quiz_bp = Blueprint("quiz", __name__)

MAX_NAME_LENGTH = 80


def get_estimator() -> CarbonEstimator:
    """One estimator per app, built on first use."""
    est = current_app.extensions.get("carbon_estimator")
    if est is None:
        est = CarbonEstimator(api_key=current_app.config.get("GEMINI_API_KEY"),
                              model=current_app.config.get("GEMINI_MODEL", "gemini-2.0-flash"))
        current_app.extensions["carbon_estimator"] = est
    return est


@quiz_bp.route("/api/quiz/questions", methods=["GET"])
def questions():
    return jsonify({"ok": True, "sections": SECTIONS})


@quiz_bp.route("/api/quiz/validate", methods=["POST"])
def validate_section():
    data = request.get_json(silent=True) or {}
    answers = data.get("formData") or {}
    try:
        index = int(data.get("section", 0))
        missing = missing_required(index, answers if isinstance(answers, dict) else {})
    except (TypeError, ValueError, IndexError):
        return jsonify({"ok": False, "error": "Unknown section"}), 400
    return jsonify({"ok": not missing, "missing": missing})


@quiz_bp.route("/api/carbon-quiz", methods=["POST"])
def carbon_quiz():
    data = request.get_json(silent=True) or {}
    if "formData" not in data:
        return jsonify({"ok": False, "error": "Missing formData"}), 400
    try:
        answers = validate_answers(data["formData"])
    except QuizValidationError as e:
        return jsonify({"ok": False, "error": str(e), "missing": e.missing,
                        "invalid": e.invalid}), 400

    unique_name = (data.get("unique_name") or "").strip()
    if len(unique_name) > MAX_NAME_LENGTH:
        return jsonify({"ok": False, "error": "Name too long"}), 400
    if unique_name and LeaderboardEntry.query.filter_by(unique_name=unique_name).first():
        return jsonify({"ok": False, "error": "Name already on the leaderboard"}), 409

    try:
        estimator = get_estimator()
    except AnalysisError as e:
        logger.error("carbon quiz unavailable: %s", e)
        return jsonify({"ok": False, "error": str(e)}), 503
    try:
        analysis = estimator.analyze(answers)
    except AnalysisError as e:
        return jsonify({"ok": False, "error": str(e)}), 502

    resp = {"ok": True, "analysis": analysis.to_dict(), "formData": answers}
    if unique_name:
        db.session.add(LeaderboardEntry.from_analysis(unique_name, analysis))
        try:
            db.session.commit()
            resp["saved"] = True
        except IntegrityError:
            db.session.rollback()
            return jsonify({"ok": False, "error": "Name already on the leaderboard",
                            "analysis": analysis.to_dict()}), 409
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("could not save leaderboard entry")
            resp["saved"] = False
    return jsonify(resp)


@quiz_bp.route("/api/leaderboard", methods=["GET"])
def leaderboard():
    sort = request.args.get("sort", "lowest")
    if sort not in ("lowest", "highest"):
        return jsonify({"ok": False, "error": "sort must be 'lowest' or 'highest'"}), 400
    cap = current_app.config.get("LEADERBOARD_LIMIT", 100)
    try:
        limit = min(int(request.args.get("limit", cap)), cap)
    except ValueError:
        return jsonify({"ok": False, "error": "limit must be an integer"}), 400
    column = LeaderboardEntry.total_co2_lifetime
    order = column.asc() if sort == "lowest" else column.desc()
    entries = LeaderboardEntry.query.order_by(order).limit(max(limit, 0)).all()
    return jsonify({
        "ok": True,
        "sort": sort,
        "entries": [dict(e.to_dict(), rank=i + 1) for i, e in enumerate(entries)],
    })
