"""Answer checking and feedback text."""
from jp_tutor.models import Question, QuizMode, QuizType


def _normalize(text: str) -> str:
    return text.strip().casefold()


def is_correct(user_input: str, expected: str, quiz_type: QuizType, quiz_mode: QuizMode) -> bool:
    """Exact match after trimming and case folding.

    Kanji meaning answers also accept any single item of a comma-separated
    synonym list. No other mode gets synonym matching.
    """
    answer = _normalize(user_input)
    target = _normalize(expected)
    if answer == target:
        return True
    if quiz_type == QuizType.KANJI and quiz_mode == QuizMode.CHARACTER_TO_ROMAJI:
        return any(meaning.strip() == answer for meaning in target.split(","))
    return False


def generate_feedback(correct: bool, question: Question, quiz_mode: QuizMode) -> str:
    text = "✅ Correct!" if correct else f"❌ Incorrect. The answer is: {question.expected_answer}"
    if question.quiz_type == QuizType.KANJI and question.meaning and question.reading:
        if quiz_mode == QuizMode.ROMAJI_TO_CHARACTER:
            text += f" (Meaning: {question.meaning})"
        else:
            text += f" (Reading: {question.reading})"
    return text
