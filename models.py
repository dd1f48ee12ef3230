# models.py
from datetime import datetime, timezone

from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from extensions import db, login_manager


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(UserMixin, db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    full_name = db.Column(db.String(120))
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    def set_password(self, pw: str) -> None:
        self.password_hash = generate_password_hash(pw)

    def check_password(self, pw: str) -> bool:
        return check_password_hash(self.password_hash, pw)


@login_manager.user_loader
def load_user(user_id: str):
    return db.session.get(User, int(user_id))


class ClassificationLog(db.Model):
    __tablename__ = "classification_logs"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    source = db.Column(db.String(16), nullable=False)  # scan | search
    label = db.Column(db.String(120), nullable=False)
    material = db.Column(db.String(50), nullable=False)
    bin_name = db.Column(db.String(120), nullable=False)
    region = db.Column(db.String(8))
    confidence = db.Column(db.Float)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "ts": self.created_at.isoformat() if self.created_at else None,
            "source": self.source,
            "label": self.label,
            "material": self.material,
            "bin": self.bin_name,
            "region": self.region,
            "confidence": self.confidence,
        }


class LeaderboardEntry(db.Model):
    __tablename__ = "carbon_leaderboard"
    id = db.Column(db.Integer, primary_key=True)
    unique_name = db.Column(db.String(80), unique=True, nullable=False, index=True)
    total_co2_lifetime = db.Column(db.Float, nullable=False, index=True)
    percent_above_average = db.Column(db.Float, nullable=False)
    top_contributors = db.Column(db.JSON, nullable=False, default=list)
    recommendations = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=utcnow)

    @classmethod
    def from_analysis(cls, unique_name: str, analysis) -> "LeaderboardEntry":
        return cls(
            unique_name=unique_name,
            total_co2_lifetime=analysis.total_co2_lifetime,
            percent_above_average=analysis.percent_above_average,
            top_contributors=list(analysis.top_contributors),
            recommendations=list(analysis.recommendations),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "unique_name": self.unique_name,
            "total_co2_lifetime": self.total_co2_lifetime,
            "percent_above_average": self.percent_above_average,
            "top_contributors": list(self.top_contributors or []),
            "recommendations": list(self.recommendations or []),
        }
