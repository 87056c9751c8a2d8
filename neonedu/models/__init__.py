"""
Database models
"""
from neonedu.models.user import User
from neonedu.models.team_member import TeamMember
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.history import HistoryItem
from neonedu.models.contact_info import ContactInfo, SocialLink

__all__ = [
    'User',
    'TeamMember',
    'Course',
    'StudyAbroadProgram',
    'HistoryItem',
    'ContactInfo',
    'SocialLink'
]
