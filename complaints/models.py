from extensions import db
from datetime import datetime

CATEGORIES = ('Canteen', 'Hostel', 'Academics', 'Infrastructure', 'Transport', 'Library', 'Sports', 'Other')
STATUSES = ('Submitted', 'Reviewed', 'Resolved')
PRIORITIES = ('Low', 'Medium', 'High', 'Urgent')

ANONYMOUS = "Anonymous"


def _iso(value):
    return value.isoformat() + "Z" if value else None


class Complaint(db.Model):
    __tablename__ = "complaints"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)  # kept even when anonymous

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(32), nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="Submitted", index=True)
    priority = db.Column(db.String(20), nullable=False, default="Medium")
    is_anonymous = db.Column(db.Boolean, nullable=False, default=False)

    admin_response = db.Column(db.Text, nullable=True)                 # legacy single reply
    expected_resolution_date = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="complaints")
    status_history = db.relationship(
        "StatusHistory",
        back_populates="complaint",
        cascade="all, delete-orphan",
        order_by="StatusHistory.id",
    )
    messages = db.relationship(
        "ComplaintMessage",
        back_populates="complaint",
        cascade="all, delete-orphan",
        order_by="ComplaintMessage.id",
    )

    def __repr__(self):
        return f"<Complaint id={self.id} status={self.status} anonymous={self.is_anonymous}>"

    def touch(self):
        self.updated_at = datetime.utcnow()

    def to_dict(self, include_user=True):
        data = {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "status": self.status,
            "priority": self.priority,
            "isAnonymous": self.is_anonymous,
            "adminResponse": self.admin_response,
            "expectedResolutionDate": _iso(self.expected_resolution_date),
            "statusHistory": [h.to_dict() for h in self.status_history],
            "messages": [m.to_dict() for m in self.messages],
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }

        if include_user:
            data["user"] = self.user.to_identity() if self.user else None
            return data

        # anonymized: drop every trace of the owner
        data["submittedBy"] = ANONYMOUS
        for entry in data["statusHistory"]:
            if entry["changedBy"] and entry["changedBy"]["_id"] == self.user_id:
                entry["changedBy"] = None
        for message in data["messages"]:
            if message["sender"] == self.user_id:
                message["sender"] = None
                message["senderName"] = ANONYMOUS
        return data


class StatusHistory(db.Model):
    __tablename__ = "status_history"

    id = db.Column(db.Integer, primary_key=True)
    complaint_id = db.Column(
        db.Integer,
        db.ForeignKey("complaints.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = db.Column(db.String(20), nullable=False)
    changed_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    changed_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)

    complaint = db.relationship("Complaint", back_populates="status_history")
    changed_by = db.relationship("User")

    def to_dict(self):
        return {
            "_id": self.id,
            "status": self.status,
            "changedAt": _iso(self.changed_at),
            "changedBy": {"_id": self.changed_by.id, "name": self.changed_by.name} if self.changed_by else None,
        }


class ComplaintMessage(db.Model):
    __tablename__ = "complaint_messages"

    id = db.Column(db.Integer, primary_key=True)
    complaint_id = db.Column(
        db.Integer,
        db.ForeignKey("complaints.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = db.Column(db.Text, nullable=False)
    sender_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    sender_role = db.Column(db.String(20), nullable=False)   # admin|student
    sender_name = db.Column(db.String(120), nullable=False)  # snapshot at send time
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    complaint = db.relationship("Complaint", back_populates="messages")

    def to_dict(self):
        return {
            "_id": self.id,
            "text": self.text,
            "sender": self.sender_id,
            "senderRole": self.sender_role,
            "senderName": self.sender_name,
            "createdAt": _iso(self.created_at),
        }
