"""
Initialize database and seed the site content
"""
import os
import sys

# Add app to path
sys.path.insert(0, os.path.dirname(__file__))

from neonedu import create_app, db
from neonedu.models.user import User
from neonedu.models.team_member import TeamMember
from neonedu.models.course import Course
from neonedu.models.study_abroad import StudyAbroadProgram
from neonedu.models.history import HistoryItem
from neonedu.models.contact_info import ContactInfo, SocialLink
from neonedu.services.history_service import HistoryService
from neonedu.services.study_abroad_transformer import StudyAbroadTransformer

TEAM_MEMBERS = [
    ('Dalantai.E', 'CEO & Co-Founder', '/Dalantai.png',
     'iMBA in International Business (2014), National Taiwan University of Science and Technology, Taiwan. '
     'MS (2006) and BS (2005), Mongolian National University of Education, Mongolia.'),
    ('Anar.P', 'Co-Founder', '/Anar.png',
     'PhD in Educational Leadership (2020), Monash University, Australia. iMBA in International Business (2014), '
     'National Taiwan University of Science and Technology, Taiwan.'),
    ('Enkhjin. G', 'General Manager', '/Enkhjin.png',
     'MBA (2025) and Double BA in English Teaching and Translation (2024), University of the Humanities, Mongolia.'),
    ('Kherlen. Sh', 'Teacher & Advisor', '/Kherlen.png',
     'MS in Environmental Biology (2021), Swansea University, UK. BS (2017), University of the Humanities, Mongolia.'),
    ('Mandakhjargal.E', 'Teacher & Advisor', '/Mandakhjargal.png',
     'Double BA in English Teaching and Translation (2022), University of the Humanities, Mongolia.'),
    ('Enkhjin. T', 'Teacher & Advisor', '/Enkhuush.png',
     'Double BA in English Teaching and Translation (2027), University of the Humanities, Mongolia.'),
    ('Yumjir. Ts', 'Teacher & Advisor', '/Yumjir (1).png',
     'BA in Psychology (2027), University of the Humanities, Mongolia.'),
]

# Legacy rows: duration and levels are derived from the description
COURSES = [
    ('General English',
     '4-month comprehensive English course covering all language skills. '
     'Suitable for Beginner to Intermediate levels.', 'English Language'),
    ('IELTS Preparation',
     '4-month intensive IELTS preparation course. Designed for Upper Intermediate to Advanced students.',
     'English Language'),
    ('Academic English',
     '4-month course focusing on research methodology and academic writing skills for university preparation.',
     'Academic Preparation'),
]

PROGRAMS = [
    ('Australia', 'World-class education in a globally recognized system.', '220+ universities and colleges available.'),
    ('Singapore', 'Australian education, closer and more affordable.', 'James Cook University, Singapore.'),
    ('South Korea', 'High-quality education at affordable cost.', 'Sejong University, SKKU.'),
    ('Malaysia', 'Affordable study with transfer pathways to Australia, UK, USA.', 'INTI international University.'),
    ('China', 'Full, half, and stipend scholarships available.', '800+ Universities and colleges.'),
    ('Hungary', 'Begin studies without IELTS.', 'University of Miskolc.'),
]

SOCIALS = [
    ('Facebook', 'https://facebook.com/neonedu'),
    ('Instagram', 'https://instagram.com/neonedu'),
    ('LinkedIn', 'https://linkedin.com/company/neonedu'),
]


def init_database():
    """Create tables and seed any content table that is still empty"""
    app = create_app()

    with app.app_context():
        print("Creating database tables...")
        db.create_all()

        admin_username = app.config['ADMIN_USERNAME']
        if not User.query.filter_by(username=admin_username).first():
            print(f"Creating admin user '{admin_username}'...")
            admin = User(username=admin_username, email=app.config['ADMIN_EMAIL'], role='admin')
            admin.set_password(app.config['ADMIN_PASSWORD'])
            db.session.add(admin)

        if TeamMember.query.count() == 0:
            print(f"Seeding {len(TEAM_MEMBERS)} team members...")
            for name, role, image, bio in TEAM_MEMBERS:
                db.session.add(TeamMember(name=name, role=role, image=image, bio=bio))

        if Course.query.count() == 0:
            print(f"Seeding {len(COURSES)} courses...")
            for title, description, category in COURSES:
                db.session.add(Course(title=title, description=description, category=category,
                                      link=app.config['COURSE_PLACEHOLDER_LINK']))

        if StudyAbroadProgram.query.count() == 0:
            print(f"Seeding {len(PROGRAMS)} study abroad programs...")
            for country, description, universities in PROGRAMS:
                db.session.add(StudyAbroadProgram(**StudyAbroadTransformer.to_storage({
                    'program_name': f'Study in {country}',
                    'country': country,
                    'description': description,
                    'universities': universities
                })))

        if HistoryItem.query.count() == 0:
            print("Seeding history timeline...")
            for entry in HistoryService.static_timeline():
                db.session.add(HistoryItem(year=entry['year'], event=entry['event']))

        contact_info = ContactInfo.query.first()
        if not contact_info:
            print("Seeding contact info...")
            contact_info = ContactInfo(address='Ulaanbaatar, Mongolia', phone='+976-11-123456',
                                       email='info@neonedu.com')
            db.session.add(contact_info)
            db.session.flush()  # Get contact info ID

            for platform, url in SOCIALS:
                db.session.add(SocialLink(contact_info_id=contact_info.id, platform=platform, url=url))

        db.session.commit()
        print("\nDatabase initialized successfully!")
        print(f"Admin: username='{admin_username}' (password from ADMIN_PASSWORD)")
        print("\nIMPORTANT: Set ADMIN_PASSWORD and SECRET_KEY in production!")


if __name__ == '__main__':
    init_database()
