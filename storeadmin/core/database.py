"""
Database models for StoreAdmin.

All persistence goes through Flask-SQLAlchemy. Tables are created by
``init_database`` when the extension is initialised.
"""

import os
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

from .config import Config

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


class Profile(db.Model):
    __tablename__ = Config.PROFILES_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'age': self.age,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Profile {self.id} {self.name!r}>"


class QRCode(db.Model):
    __tablename__ = Config.QR_CODES_TABLE

    id = db.Column(db.Integer, primary_key=True)
    shop = db.Column(db.String(255), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    product_id = db.Column(db.String(255), nullable=False)
    product_handle = db.Column(db.String(255), nullable=False)
    product_variant_id = db.Column(db.String(255), nullable=False)
    destination = db.Column(db.String(32), nullable=False)
    scans = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<QRCode {self.id} {self.title!r}>"


class AppLog(db.Model):
    __tablename__ = Config.LOGS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    timestamp = db.Column(db.String(32), nullable=False, index=True)
    level = db.Column(db.String(16), nullable=False, index=True)
    source = db.Column(db.String(64), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    details = db.Column(db.Text)
    ip_address = db.Column(db.String(64))
    user_agent = db.Column(db.Text)
    request_path = db.Column(db.String(255))
    shop = db.Column(db.String(255))


def init_database(app):
    """Bind the SQLAlchemy instance to the app and create missing tables"""
    uri = app.config.setdefault('SQLALCHEMY_DATABASE_URI', Config.DATABASE_URL)

    # sqlite needs its directory to exist before the first connect
    if uri.startswith('sqlite:///'):
        db_dir = os.path.dirname(uri[len('sqlite:///'):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    db.init_app(app)
    with app.app_context():
        db.create_all()
