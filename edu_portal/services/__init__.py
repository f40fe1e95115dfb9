"""
Services Package
"""
from edu_portal.services.grading_service import GradingService
from edu_portal.services.activity_service import ActivityService
from edu_portal.services.analytics_service import AnalyticsService
from edu_portal.services.file_storage import LocalFileStorage
from edu_portal.services.submission_service import SubmissionService

__all__ = ['GradingService', 'ActivityService', 'AnalyticsService', 'LocalFileStorage', 'SubmissionService']
