from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, current_user

from complaints import lifecycle
from complaints.categorizer import suggest_category
from utils.auth import admin_required
from utils.http import json_body, optional_str

complaint_bp = Blueprint('complaints', __name__, url_prefix='/api/complaints')


# ✅ Submit complaint
@complaint_bp.route('', methods=['POST'])
@jwt_required()
def create_complaint():
    data = json_body()
    complaint = lifecycle.create_complaint(
        current_user,
        title=data.get('title'),
        description=data.get('description'),
        category=data.get('category'),
        priority=data.get('priority'),
        is_anonymous=data.get('isAnonymous', False),
    )
    # the creator gets back what everyone else would see
    return jsonify(complaint.to_dict(include_user=not complaint.is_anonymous)), 201


# ✅ List complaints (admin: all, student: own)
@complaint_bp.route('', methods=['GET'])
@jwt_required()
def list_complaints():
    result = lifecycle.list_complaints(
        current_user,
        status=request.args.get('status'),
        category=request.args.get('category'),
        page=request.args.get('page'),
        limit=request.args.get('limit'),
        default_limit=current_app.config["DEFAULT_PAGE_SIZE"],
        max_limit=current_app.config["MAX_PAGE_SIZE"],
    )
    return jsonify(result), 200


# ✅ Category suggestion for the complaint form
@complaint_bp.route('/suggest-category', methods=['POST'])
@jwt_required()
def suggest():
    data = json_body()
    text = optional_str(data.get('text'), "text")
    return jsonify({"category": suggest_category(text or "")}), 200


# ✅ Single complaint
@complaint_bp.route('/<int:complaint_id>', methods=['GET'])
@jwt_required()
def get_complaint(complaint_id):
    complaint = lifecycle.get_complaint(current_user, complaint_id)
    return jsonify(lifecycle.shape_for(complaint, current_user)), 200


# ✅ Status / response / expected date (admin)
@complaint_bp.route('/<int:complaint_id>', methods=['PUT'])
@admin_required
def update_complaint(complaint_id):
    data = json_body()
    complaint = lifecycle.update_complaint(current_user, complaint_id, data)
    return jsonify(lifecycle.shape_for(complaint, current_user)), 200


# ✅ Message thread
@complaint_bp.route('/<int:complaint_id>/messages', methods=['POST'])
@jwt_required()
def add_message(complaint_id):
    data = json_body()
    complaint = lifecycle.add_message(current_user, complaint_id, data.get('text'))
    return jsonify(lifecycle.shape_for(complaint, current_user)), 200


# ✅ Delete (owner or admin)
@complaint_bp.route('/<int:complaint_id>', methods=['DELETE'])
@jwt_required()
def delete_complaint(complaint_id):
    lifecycle.delete_complaint(current_user, complaint_id)
    return jsonify({"message": "Complaint deleted successfully"}), 200
