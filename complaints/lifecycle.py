# complaints/lifecycle.py
"""
Complaint lifecycle: create / list / get / update / message / delete.

Every operation receives the acting user explicitly and raises an
``utils.errors.ApiError`` subclass on failure. Responses are shaped with
``shape_for`` so anonymous complaints never leak their owner to other
students.
"""
import logging
import math
from datetime import datetime, timezone

from extensions import db
from complaints.models import Complaint, StatusHistory, ComplaintMessage, CATEGORIES, STATUSES, PRIORITIES
from utils.auth import is_admin, can_access, ensure_admin
from utils.errors import ValidationError, NotFound, Forbidden

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 200
# keeps OFFSET inside a 64-bit SQLite integer
MAX_PAGE = 100000


# -------- Helpers --------
def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def _parse_date(value):
    """ISO date or datetime -> naive UTC datetime."""
    try:
        parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid expectedResolutionDate")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _positive_int(value, name, default, maximum=None):
    if value in (None, ""):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a positive integer")
    if number < 1:
        raise ValidationError(f"{name} must be a positive integer")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{name} must be at most {maximum}")
    return number


def shape_for(complaint, viewer):
    """Visibility rule: hide the owner of an anonymous complaint from other students."""
    hide_owner = complaint.is_anonymous and not is_admin(viewer) and complaint.user_id != viewer.id
    return complaint.to_dict(include_user=not hide_owner)


def _load(complaint_id, user):
    complaint = db.session.get(Complaint, complaint_id)
    if not complaint:
        raise NotFound("Complaint not found")
    if not can_access(user, complaint):
        raise Forbidden("Not authorized to access this complaint")
    return complaint


# -------- Operations --------
def create_complaint(user, title, description, category, priority=None, is_anonymous=False):
    if title is not None and not isinstance(title, str):
        raise ValidationError("Title must be a string")
    if description is not None and not isinstance(description, str):
        raise ValidationError("Description must be a string")

    title = (title or "").strip()
    description = (description or "").strip()
    priority = priority or "Medium"

    if not title:
        raise ValidationError("Title is required")
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
    if not description:
        raise ValidationError("Description is required")
    if category not in CATEGORIES:
        raise ValidationError("Invalid category")
    if priority not in PRIORITIES:
        raise ValidationError("Invalid priority")

    complaint = Complaint(
        user_id=user.id,
        title=title,
        description=description,
        category=category,
        priority=priority,
        is_anonymous=_as_bool(is_anonymous),
        status="Submitted",
    )
    complaint.status_history.append(StatusHistory(status="Submitted", changed_by_id=user.id))
    db.session.add(complaint)
    db.session.commit()

    logger.info("Complaint %s created by user %s (anonymous=%s)", complaint.id, user.id, complaint.is_anonymous)
    return complaint


def list_complaints(user, status=None, category=None, page=None, limit=None, default_limit=10, max_limit=100):
    page = _positive_int(page, "page", 1, maximum=MAX_PAGE)
    limit = min(_positive_int(limit, "limit", default_limit), max_limit)

    query = Complaint.query
    if status:
        query = query.filter(Complaint.status == status)
    if category:
        query = query.filter(Complaint.category == category)
    # students only ever see their own complaints
    if not is_admin(user):
        query = query.filter(Complaint.user_id == user.id)

    total = query.count()
    complaints = (
        query.order_by(Complaint.created_at.desc(), Complaint.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "complaints": [shape_for(c, user) for c in complaints],
        "total": total,
        "totalPages": math.ceil(total / limit),
        "currentPage": page,
    }


def get_complaint(user, complaint_id):
    return _load(complaint_id, user)


def update_complaint(user, complaint_id, data):
    ensure_admin(user)
    complaint = db.session.get(Complaint, complaint_id)
    if not complaint:
        raise NotFound("Complaint not found")

    status = data.get("status")
    if status:
        if status not in STATUSES:
            raise ValidationError("Invalid status")
        # any transition is allowed, including reopening a resolved complaint
        if status != complaint.status:
            old_status = complaint.status
            complaint.status = status
            complaint.status_history.append(StatusHistory(status=status, changed_by_id=user.id))
            logger.info("Complaint %s status %s -> %s by admin %s", complaint.id, old_status, status, user.id)

    if data.get("adminResponse") is not None:
        complaint.admin_response = str(data["adminResponse"]).strip() or None

    if "expectedResolutionDate" in data:
        value = data["expectedResolutionDate"]
        complaint.expected_resolution_date = _parse_date(value) if value else None

    complaint.touch()
    db.session.commit()
    return complaint


def add_message(user, complaint_id, text):
    text = (text or "").strip() if isinstance(text, str) else ""
    if not text:
        raise ValidationError("Message text is required")

    complaint = _load(complaint_id, user)
    # a new row per message, so concurrent senders never overwrite each other
    complaint.messages.append(ComplaintMessage(
        text=text,
        sender_id=user.id,
        sender_role=user.role,
        sender_name=user.name,
    ))
    complaint.touch()
    db.session.commit()
    return complaint


def delete_complaint(user, complaint_id):
    complaint = _load(complaint_id, user)
    db.session.delete(complaint)
    db.session.commit()
    logger.info("Complaint %s deleted by user %s", complaint_id, user.id)
