"""
Activity Service
Append-only activity log and its weekly grouping for teacher views
"""
from datetime import timedelta
import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from edu_portal.extensions import db
from edu_portal.models import ActivityLog, LOGIN, QUIZ_SUBMIT
from edu_portal.utils.helpers import to_local_time

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'ar'

ACTIVITY_PHRASES = {
    'ar': {
        LOGIN: 'قام بتسجيل الدخول',
        QUIZ_SUBMIT: 'سلّم اختبار: {detail}',
    },
    'en': {
        LOGIN: 'Logged in',
        QUIZ_SUBMIT: 'Submitted quiz: {detail}',
    },
}


class ActivityService:
    """Activity log writes and weekly aggregation"""

    @staticmethod
    def phrases(locale):
        return ACTIVITY_PHRASES.get(locale) or ACTIVITY_PHRASES[DEFAULT_LOCALE]

    @staticmethod
    def describe(activity_type, details, locale=DEFAULT_LOCALE):
        """Human-readable description of one event"""
        phrases = ActivityService.phrases(locale)
        if activity_type == LOGIN:
            return phrases[LOGIN]
        if activity_type == QUIZ_SUBMIT:
            return phrases[QUIZ_SUBMIT].format(detail=details or '')
        return details

    @staticmethod
    def aggregate_by_week(events, tz_name='UTC', locale=DEFAULT_LOCALE):
        """
        Group events into Monday-Sunday calendar weeks

        Args:
            events: rows with activity_type, details, activity_timestamp,
                newest first as stored
            tz_name: reference zone for the calendar arithmetic
            locale: language of the descriptions

        Returns:
            list: week buckets in order of first appearance, each
                {week_start_date, week_end_date, activities: [{type, description}]}
        """
        buckets = {}
        for event in events:
            local_date = to_local_time(event.activity_timestamp, tz_name).date()
            week_start = local_date - timedelta(days=local_date.weekday())

            bucket = buckets.get(week_start)
            if bucket is None:
                bucket = {
                    'week_start_date': week_start.isoformat(),
                    'week_end_date': (week_start + timedelta(days=6)).isoformat(),
                    'activities': [],
                }
                buckets[week_start] = bucket

            bucket['activities'].append({
                'type': event.activity_type,
                'description': ActivityService.describe(event.activity_type, event.details, locale),
            })

        return list(buckets.values())

    @staticmethod
    def record(student_id, activity_type, details):
        """Append one event and commit"""
        entry = ActivityLog(student_id=student_id, activity_type=activity_type, details=details)
        db.session.add(entry)
        db.session.commit()
        return entry

    @staticmethod
    def record_safely(student_id, activity_type, details):
        """
        Best-effort append: a failure is logged and rolled back, never raised

        Returns:
            bool: whether the event was written
        """
        try:
            ActivityService.record(student_id, activity_type, details)
        except SQLAlchemyError:
            db.session.rollback()
            logger.error(
                "Could not log %s activity for student %s", activity_type, student_id,
                exc_info=True
            )
            return False
        return True

    @staticmethod
    def events_for_student(student_id):
        return ActivityLog.query.filter_by(student_id=student_id)\
            .order_by(ActivityLog.activity_timestamp.desc(), ActivityLog.id.desc()).all()

    @staticmethod
    def weekly_activity(student_id):
        """Weekly buckets for one student using the app's zone and locale"""
        return ActivityService.aggregate_by_week(
            ActivityService.events_for_student(student_id),
            tz_name=current_app.config['TIMEZONE'],
            locale=current_app.config['ACTIVITY_LOCALE'],
        )
