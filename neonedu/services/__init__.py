"""
Services package
"""
from neonedu.services.team_transformer import TeamTransformer
from neonedu.services.course_transformer import CourseTransformer
from neonedu.services.study_abroad_transformer import StudyAbroadTransformer
from neonedu.services.history_service import HistoryService
from neonedu.services.content_service import ContentService
from neonedu.services.media_service import MediaService

__all__ = [
    'TeamTransformer',
    'CourseTransformer',
    'StudyAbroadTransformer',
    'HistoryService',
    'ContentService',
    'MediaService'
]
