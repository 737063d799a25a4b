from datetime import datetime
from extensions import db
from werkzeug.security import generate_password_hash, check_password_hash

ROLES = ("student", "admin")


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="student")
    department = db.Column(db.String(120), nullable=True)
    roll_number = db.Column(db.String(50), nullable=True)   # students only

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    complaints = db.relationship("Complaint", back_populates="user", lazy=True)

    def __repr__(self):
        return f'<User {self.email} ({self.role})>'

    @property
    def is_admin(self):
        return self.role == "admin"

    # --- Password helpers ---
    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "department": self.department,
            "rollNumber": self.roll_number,
            "createdAt": self.created_at.isoformat() + "Z" if self.created_at else None,
        }

    def to_identity(self):
        """Owner fields embedded in a complaint response."""
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "rollNumber": self.roll_number,
        }
