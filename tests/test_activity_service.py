from datetime import datetime, timezone

from edu_portal.models import ActivityLog
from edu_portal.services.activity_service import ActivityService


def event(activity_type, details, *timestamp, tzinfo=timezone.utc):
    return ActivityLog(
        activity_type=activity_type,
        details=details,
        activity_timestamp=datetime(*timestamp, tzinfo=tzinfo),
    )


def test_monday_and_sunday_share_a_week():
    events = [
        event('quiz_submit', 'Fractions', 2024, 1, 8, 9, 0),
        event('login', 'logged in', 2024, 1, 7, 23, 59, 59),
        event('login', 'logged in', 2024, 1, 1, 0, 0),
    ]

    weeks = ActivityService.aggregate_by_week(events, 'UTC', 'en')

    assert [(w['week_start_date'], w['week_end_date']) for w in weeks] == [
        ('2024-01-08', '2024-01-14'),
        ('2024-01-01', '2024-01-07'),
    ]
    assert len(weeks[1]['activities']) == 2


def test_descriptions_in_english():
    events = [
        event('quiz_submit', 'Fractions', 2024, 3, 6, 10, 0),
        event('login', 'ignored', 2024, 3, 5, 10, 0),
        event('video_watch', 'Watched intro video', 2024, 3, 4, 10, 0),
    ]

    weeks = ActivityService.aggregate_by_week(events, 'UTC', 'en')

    assert weeks == [{
        'week_start_date': '2024-03-04',
        'week_end_date': '2024-03-10',
        'activities': [
            {'type': 'quiz_submit', 'description': 'Submitted quiz: Fractions'},
            {'type': 'login', 'description': 'Logged in'},
            {'type': 'video_watch', 'description': 'Watched intro video'},
        ],
    }]


def test_descriptions_default_to_arabic():
    weeks = ActivityService.aggregate_by_week([event('quiz_submit', 'الكسور', 2024, 3, 6, 10, 0)], 'UTC', 'xx')

    assert weeks[0]['activities'][0]['description'] == 'سلّم اختبار: الكسور'


def test_no_events():
    assert ActivityService.aggregate_by_week([]) == []


def test_aggregating_twice_gives_same_buckets():
    events = [
        event('login', None, 2024, 2, 20, 8, 0),
        event('login', None, 2024, 2, 12, 8, 0),
    ]

    assert ActivityService.aggregate_by_week(events, 'UTC') == ActivityService.aggregate_by_week(events, 'UTC')


def test_weeks_follow_the_reference_time_zone():
    # Sunday 22:30 UTC is already Monday in Baghdad (UTC+3)
    late_sunday = event('login', None, 2024, 1, 7, 22, 30)

    utc_weeks = ActivityService.aggregate_by_week([late_sunday], 'UTC')
    local_weeks = ActivityService.aggregate_by_week([late_sunday], 'Asia/Baghdad')

    assert utc_weeks[0]['week_start_date'] == '2024-01-01'
    assert local_weeks[0]['week_start_date'] == '2024-01-08'


def test_naive_timestamps_are_read_as_utc():
    naive = event('login', None, 2024, 1, 7, 22, 30, tzinfo=None)

    assert ActivityService.aggregate_by_week([naive], 'Asia/Baghdad')[0]['week_start_date'] == '2024-01-08'


def test_buckets_keep_first_seen_order():
    events = [
        event('login', None, 2024, 1, 2, 8, 0),
        event('login', None, 2024, 1, 9, 8, 0),
        event('login', None, 2024, 1, 3, 8, 0),
    ]

    weeks = ActivityService.aggregate_by_week(events, 'UTC')

    assert [w['week_start_date'] for w in weeks] == ['2024-01-01', '2024-01-08']
    assert len(weeks[0]['activities']) == 2


def test_record_and_weekly_activity(app, seed):
    with app.app_context():
        ActivityService.record(1, 'quiz_submit', 'Algebra Basics')
        weeks = ActivityService.weekly_activity(1)

    assert len(weeks) == 1
    assert weeks[0]['activities'] == [{'type': 'quiz_submit', 'description': 'سلّم اختبار: Algebra Basics'}]
