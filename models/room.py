from extensions import db


class Room(db.Model):
    __tablename__ = "room"

    id = db.Column(db.Integer, primary_key=True)
    room_name = db.Column(db.String(120), nullable=False)
