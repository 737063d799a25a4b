"""Keyword-based category suggestion for new complaints."""

CATEGORY_KEYWORDS = {
    'Canteen': ['food', 'mess', 'canteen', 'cafeteria', 'lunch', 'dinner', 'breakfast', 'meal', 'eating',
                'hygiene', 'quality', 'taste', 'kitchen', 'menu', 'price', 'costly', 'expensive', 'cook'],
    'Hostel': ['hostel', 'room', 'roommate', 'warden', 'bed', 'mattress', 'bathroom', 'toilet', 'shower',
               'water', 'hot water', 'plumbing', 'leak', 'pest', 'cockroach', 'mosquito', 'cleaning',
               'laundry', 'washing'],
    'Academics': ['class', 'lecture', 'professor', 'teacher', 'faculty', 'syllabus', 'exam', 'test', 'marks',
                  'grade', 'attendance', 'assignment', 'project', 'lab', 'practical', 'timetable', 'schedule',
                  'course'],
    'Infrastructure': ['building', 'classroom', 'ac', 'air conditioning', 'fan', 'light', 'electricity',
                       'power', 'wifi', 'internet', 'computer', 'projector', 'furniture', 'chair', 'desk',
                       'bench', 'door', 'window', 'renovation'],
    'Transport': ['bus', 'transport', 'shuttle', 'vehicle', 'driver', 'route', 'timing', 'late', 'delay',
                  'overcrowded', 'parking', 'traffic'],
    'Library': ['library', 'book', 'journal', 'borrow', 'return', 'fine', 'study', 'reading', 'noise', 'seat',
                'photocopy', 'print', 'silence'],
    'Sports': ['sports', 'gym', 'ground', 'field', 'court', 'equipment', 'fitness', 'game', 'tournament',
               'coach', 'training', 'exercise', 'playground'],
}


def score_categories(text: str) -> dict:
    """Count keyword hits per category (plain substring match)."""
    lowered = text.lower() if isinstance(text, str) else ""
    return {
        category: sum(1 for keyword in keywords if keyword in lowered)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }


def suggest_category(text: str):
    best, best_score = None, 0
    for category, score in score_categories(text).items():
        # strict > keeps the earlier category on ties
        if score > best_score:
            best, best_score = category, score
    return best
