# api/announcements.py

from datetime import datetime

from flask import jsonify

from extensions import db
from models import Announcement
from api.utils.catalog_helper import serialize_announcement
from api.utils.request_helper import error_response, json_object_body, is_blank, parse_datetime
from . import api_bp


@api_bp.get("/announcements")
def list_announcements():
    """
    Solo los avisos vigentes (expiresAt en el futuro).
    """
    now = datetime.utcnow()
    announcements = (
        Announcement.query.filter(Announcement.expires_at > now)
        .order_by(Announcement.created_at.desc(), Announcement.id.desc())
        .all()
    )
    return jsonify([serialize_announcement(a) for a in announcements])


@api_bp.post("/announcements")
def create_announcement():
    try:
        data = json_object_body()
    except ValueError as exc:
        return error_response(exc)

    if is_blank(data.get("text")) or is_blank(data.get("postedBy")) or not data.get("expiresAt"):
        return jsonify({"error": "Text, postedBy, and expiresAt are required"}), 400

    try:
        expires_at = parse_datetime(data.get("expiresAt"), "expiresAt")
    except ValueError as exc:
        return error_response(exc)

    announcement = Announcement(
        text=data["text"].strip(),
        posted_by=data["postedBy"].strip(),
        expires_at=expires_at,
    )
    db.session.add(announcement)
    db.session.commit()

    return jsonify(serialize_announcement(announcement)), 201


@api_bp.delete("/announcements/<int:announcement_id>")
def delete_announcement(announcement_id):
    announcement = db.session.get(Announcement, announcement_id)
    if not announcement:
        return jsonify({"error": "Announcement not found"}), 404

    db.session.delete(announcement)
    db.session.commit()
    return jsonify({"status": "deleted", "id": announcement_id})
