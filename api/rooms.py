# api/rooms.py

from flask import request, jsonify

from extensions import db
from models import Room
from api.services.catalog_service import CatalogService
from api.utils.catalog_helper import serialize_room
from api.utils.request_helper import error_response, json_object_body, is_blank
from . import api_bp


@api_bp.get("/rooms")
def list_rooms():
    rooms = Room.query.order_by(Room.id.asc()).all()
    return jsonify([serialize_room(r) for r in rooms])


@api_bp.post("/rooms")
def create_room():
    try:
        data = json_object_body()
    except ValueError as exc:
        return error_response(exc)
    room_name = data.get("roomName")

    if is_blank(room_name):
        return jsonify({"error": "roomName is required"}), 400

    room = Room(room_name=room_name.strip())
    db.session.add(room)
    db.session.commit()

    return jsonify({"status": "created", "room": serialize_room(room)}), 201


@api_bp.post("/rooms/bulk")
def bulk_create_rooms():
    """
    Alta masiva desde CSV. Espera una lista: [{"roomName": "A-101"}, ...]
    Las filas sin roomName se descartan.
    """
    try:
        rooms = CatalogService.bulk_create_rooms(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "count": len(rooms)}), 201


@api_bp.delete("/rooms/<int:room_id>")
def delete_room(room_id):
    room = db.session.get(Room, room_id)
    if not room:
        return jsonify({"error": "Room not found"}), 404

    db.session.delete(room)
    db.session.commit()
    return jsonify({"status": "deleted", "id": room_id})
