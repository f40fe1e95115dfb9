"""
Submission Service
Grades and stores a quiz attempt with its answers and uploaded files

A submission runs in two stages:
    1. required: answer key, grading, attempt row, answer rows and files,
       committed together or rolled back together
    2. best-effort: activity log entry and the live teacher notification,
       only after the commit; failures here are logged and never change
       the result of stage 1
"""
import json
import logging

from flask import current_app
from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError

from edu_portal.errors import ClientError, NotFoundError, PersistenceError
from edu_portal.extensions import db
from edu_portal.models import Quiz, Question, QuestionOption, QuizAttempt, StudentAnswer, Student, MCQ, QUIZ_SUBMIT
from edu_portal.services.activity_service import ActivityService
from edu_portal.services.grading_service import GradingService, SubmittedAnswer
from edu_portal.sockets.teacher_events import notify_attempt_submitted
from edu_portal.utils.helpers import now_utc, from_epoch_millis

logger = logging.getLogger(__name__)

# Client/server contract: the file for an answer is uploaded under this field name
ANSWER_FILE_FIELD = 'question_{question_id}_file'


def parse_id(value, field, required=True):
    """Integer id from JSON or form data; numeric strings are accepted"""
    if value is None or value == '':
        if required:
            raise ClientError(f'{field} is required.')
        return None
    if isinstance(value, bool):
        raise ClientError(f'{field} must be an integer.')
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ClientError(f'{field} must be an integer.')


def _first_present(item, *keys):
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return None


def parse_answers(raw):
    """
    Decode the JSON answers list

    Each item: {questionId, selectedOptionId?, answerText?} (snake_case
    keys are accepted too).

    Returns:
        list: SubmittedAnswer in submission order
    """
    if raw is None:
        raise ClientError('answers is required.')
    try:
        items = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    except ValueError:
        raise ClientError('answers is not valid JSON.')

    if not isinstance(items, list):
        raise ClientError('answers must be a list.')

    answers = []
    for item in items:
        if not isinstance(item, dict):
            raise ClientError('Each answer must be an object.')
        question_id = parse_id(_first_present(item, 'questionId', 'question_id'), 'questionId')
        selected_option_id = parse_id(
            _first_present(item, 'selectedOptionId', 'selected_option_id'),
            'selectedOptionId',
            required=False
        )
        answer_text = _first_present(item, 'answerText', 'answer_text')
        if answer_text is not None and not isinstance(answer_text, str):
            answer_text = str(answer_text)
        answers.append(SubmittedAnswer(question_id, selected_option_id, answer_text))
    return answers


def parse_start_time(raw):
    """Client start time in epoch milliseconds -> aware UTC datetime"""
    if raw is None or str(raw).strip() == '':
        raise ClientError('startTime is required.')
    try:
        return from_epoch_millis(int(float(raw)))
    except (TypeError, ValueError, OverflowError, OSError):
        raise ClientError('startTime must be epoch milliseconds.')


class SubmissionService:
    """Coordinates one quiz submission"""

    def __init__(self, session=None, storage=None):
        self.session = session if session is not None else db.session
        self.storage = storage if storage is not None else current_app.extensions['file_storage']

    def submit(self, quiz_id, student_id, answers, start_time, files=None):
        """
        Grade and persist a submission

        Args:
            quiz_id, student_id: ids from the request
            answers: list of SubmittedAnswer (see parse_answers)
            start_time: aware datetime from parse_start_time
            files: mapping of form field name -> uploaded file

        Returns:
            GradeResult: (score, total_possible_score)
        """
        quiz = self.session.get(Quiz, quiz_id)
        if quiz is None:
            raise NotFoundError('Quiz not found.')
        if self.session.get(Student, student_id) is None:
            raise NotFoundError('Student not found.')
        self._check_questions(quiz, answers)

        attempt, result = self._persist_attempt(quiz, student_id, answers, start_time, files or {})

        logger.info(
            "Student %s submitted quiz %s (attempt %s): %s/%s",
            student_id, quiz.id, attempt.id, result.score, result.total_possible_score
        )
        self._after_commit(quiz, attempt, result)
        return result

    def _check_questions(self, quiz, answers):
        quiz_question_ids = {question.id for question in quiz.questions}
        unknown = sorted({a.question_id for a in answers} - quiz_question_ids)
        if unknown:
            raise ClientError(
                'Questions not in this quiz: ' + ', '.join(str(question_id) for question_id in unknown)
            )

    def load_answer_key(self, quiz_id):
        """Answer key of a quiz's mcq questions, loaded with one query"""
        rows = self.session.query(Question.id, Question.points, QuestionOption.id)\
            .select_from(Question)\
            .outerjoin(QuestionOption, and_(
                QuestionOption.question_id == Question.id,
                QuestionOption.is_correct.is_(True)
            ))\
            .filter(Question.quiz_id == quiz_id, Question.question_type == MCQ)\
            .order_by(Question.id, QuestionOption.id).all()

        grouped = {}
        for question_id, points, option_id in rows:
            _, option_ids = grouped.setdefault(question_id, (points, []))
            if option_id is not None:
                option_ids.append(option_id)

        return GradingService.build_answer_key(
            (question_id, points, option_ids) for question_id, (points, option_ids) in grouped.items()
        )

    def _persist_attempt(self, quiz, student_id, answers, start_time, files):
        quiz_id = quiz.id
        stored_urls = {}
        try:
            answer_key = self.load_answer_key(quiz_id)
            result = GradingService.grade(answer_key, answers)

            attempt = self._insert_attempt(quiz_id, student_id, result.score, start_time)

            for answer in answers:
                file_url = self._store_answer_file(answer.question_id, files, stored_urls)
                self._insert_answer(attempt, answer, file_url)

            self.session.commit()
        except (SQLAlchemyError, OSError) as exc:
            self.session.rollback()
            for url in stored_urls.values():
                self.storage.delete(url)
            logger.exception("Quiz %s submission by student %s rolled back", quiz_id, student_id)
            raise PersistenceError('Could not save your answers, please try again.') from exc

        return attempt, result

    def _store_answer_file(self, question_id, files, stored_urls):
        """Store the file uploaded for a question, once per question"""
        if question_id in stored_urls:
            return stored_urls[question_id]
        upload = files.get(ANSWER_FILE_FIELD.format(question_id=question_id))
        if not upload or not upload.filename:
            return None
        stored_urls[question_id] = self.storage.save(upload)
        return stored_urls[question_id]

    def _insert_attempt(self, quiz_id, student_id, score, start_time):
        """Attempt row first, so answers can reference its id"""
        attempt = QuizAttempt(
            quiz_id=quiz_id,
            student_id=student_id,
            score=score,
            start_time=start_time,
            end_time=now_utc(),
        )
        self.session.add(attempt)
        self.session.flush()
        return attempt

    def _insert_answer(self, attempt, answer, file_url):
        self.session.add(StudentAnswer(
            attempt_id=attempt.id,
            question_id=answer.question_id,
            answer_text=answer.answer_text,
            selected_option_id=answer.selected_option_id,
            file_url=file_url,
        ))
        self.session.flush()

    def _after_commit(self, quiz, attempt, result):
        ActivityService.record_safely(attempt.student_id, QUIZ_SUBMIT, quiz.title)
        notify_attempt_submitted({
            'attempt_id': attempt.id,
            'quiz_id': quiz.id,
            'quiz_title': quiz.title,
            'student_id': attempt.student_id,
            'score': result.score,
            'total_possible_score': result.total_possible_score,
        })
