# auth.py
from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required, login_user, logout_user
from sqlalchemy.exc import IntegrityError

from extensions import db
from models import User

auth_bp = Blueprint("auth", __name__)

MIN_PASSWORD_LENGTH = 6


def _payload() -> dict:
    return request.get_json(silent=True) or request.form


@auth_bp.route("/login", methods=["POST"])
def login():
    data = _payload()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({"ok": False, "error": "Invalid credentials"}), 401
    login_user(user)
    return jsonify({"ok": True, "user": {"email": user.email, "full_name": user.full_name}})


@auth_bp.route("/signup", methods=["POST"])
def signup():
    data = _payload()
    email = (data.get("email") or "").strip().lower()
    full_name = (data.get("full_name") or "").strip()
    password = data.get("password") or ""
    if not email or not password:
        return jsonify({"ok": False, "error": "Missing fields"}), 400
    if len(password) < MIN_PASSWORD_LENGTH:
        return jsonify({"ok": False, "error": "Password too short"}), 400
    if User.query.filter_by(email=email).first():
        return jsonify({"ok": False, "error": "Email already registered"}), 409
    u = User(email=email, full_name=full_name)
    u.set_password(password)
    db.session.add(u)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"ok": False, "error": "Email already registered"}), 409
    login_user(u)
    return jsonify({"ok": True, "user": {"email": u.email, "full_name": u.full_name}}), 201


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify({"ok": True})


@auth_bp.route("/api/me", methods=["GET"])
@login_required
def me():
    return jsonify({"ok": True, "user": {"email": current_user.email,
                                         "full_name": current_user.full_name}})
