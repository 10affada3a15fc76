"""Progress and accuracy summaries for the current session."""
from jp_tutor.quiz import QuizSession


def get_accuracy_label(accuracy: float) -> str:
    if accuracy >= 90:
        return "Outstanding!"
    elif accuracy >= 70:
        return "Great job!"
    return "Keep practicing!"


def get_accuracy_color(accuracy: float) -> str:
    if accuracy >= 90:
        return "green"
    elif accuracy >= 70:
        return "yellow"
    elif accuracy >= 50:
        return "dark_orange"
    return "red"


def progress_percentage(used: int, available: int) -> float:
    if available == 0:
        return 0.0
    return round(used / available * 100, 1)


def get_session_summary(session: QuizSession) -> dict:
    used, available = session.deck.progress()
    accuracy = session.stats.accuracy()
    return {
        "correct": session.stats.correct,
        "incorrect": session.stats.incorrect,
        "total": session.stats.total,
        "accuracy": accuracy,
        "label": get_accuracy_label(accuracy),
        "used": used,
        "available": available,
        "progress": progress_percentage(used, available),
        "completed": session.completed,
    }
