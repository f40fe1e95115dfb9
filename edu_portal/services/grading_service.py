"""
Grading Service
Automatic scoring of multiple-choice answers against the answer key
"""
from collections import namedtuple
import logging

logger = logging.getLogger(__name__)

# correct_option_id is None when the question has zero or several correct
# options: it still counts toward the total but can never earn credit.
AnswerKeyEntry = namedtuple('AnswerKeyEntry', ['question_id', 'points', 'correct_option_id'])

SubmittedAnswer = namedtuple('SubmittedAnswer', ['question_id', 'selected_option_id', 'answer_text'])

GradeResult = namedtuple('GradeResult', ['score', 'total_possible_score'])


class GradingService:
    """Pure grading logic, no database access"""

    @staticmethod
    def build_answer_key(questions):
        """
        Build the answer key from a quiz's mcq questions

        Args:
            questions: iterable of (question_id, points, correct_option_ids)

        Returns:
            dict: question id -> AnswerKeyEntry
        """
        answer_key = {}
        for question_id, points, correct_option_ids in questions:
            correct_option_ids = list(correct_option_ids)
            correct_option_id = None
            if len(correct_option_ids) == 1:
                correct_option_id = int(correct_option_ids[0])
            else:
                logger.warning(
                    'Question %s has %d correct options, no credit possible',
                    question_id, len(correct_option_ids)
                )
            answer_key[question_id] = AnswerKeyEntry(question_id, points or 0, correct_option_id)
        return answer_key

    @staticmethod
    def is_correct(entry, selected_option_id):
        if entry is None or selected_option_id is None or entry.correct_option_id is None:
            return False
        return int(selected_option_id) == entry.correct_option_id

    @staticmethod
    def grade(answer_key, submitted_answers):
        """
        Score a submission

        Duplicate answers to one question are collapsed on purpose so the
        score can never exceed the total possible score: the question earns
        its points once, and only if every selection sent for it is correct.
        Free-form answers and answers to questions outside the key earn
        nothing.

        Returns:
            GradeResult: (score, total_possible_score)
        """
        verdicts = {}
        for answer in submitted_answers:
            if answer.selected_option_id is None or answer.question_id not in answer_key:
                continue
            entry = answer_key[answer.question_id]
            correct = GradingService.is_correct(entry, answer.selected_option_id)
            verdicts[answer.question_id] = verdicts.get(answer.question_id, True) and correct

        score = sum(answer_key[question_id].points for question_id, correct in verdicts.items() if correct)
        return GradeResult(score, GradingService.total_possible_score(answer_key))

    @staticmethod
    def total_possible_score(answer_key):
        """Sum of the points of every mcq question, whatever was submitted"""
        return sum(entry.points for entry in answer_key.values())
