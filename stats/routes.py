from flask import Blueprint, jsonify, current_app

from stats.utils import compute_stats

stats_bp = Blueprint('stats', __name__, url_prefix='/api/stats')


# ✅ Public dashboard statistics
@stats_bp.route('', methods=['GET'])
def get_stats():
    return jsonify(compute_stats(
        use_fallbacks=current_app.config.get("STATS_USE_FALLBACKS", True),
        fallbacks=current_app.config.get("STATS_FALLBACKS"),
    )), 200
