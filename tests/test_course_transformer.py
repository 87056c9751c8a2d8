from neonedu.services.course_transformer import CourseTransformer


def test_explicit_columns_win():
    card = CourseTransformer.to_display({
        'title': 'General English',
        'description': '6 months - Beginner, Advanced',
        'duration': '3 months',
        'levelitem1': 'Starter',
        'levelitem2': 'Elementary',
        'image': 'https://cdn.example.com/ge.png',
        'category': 'English Language',
    })

    assert card == {
        'name': 'General English',
        'duration': '3 months',
        'image': 'https://cdn.example.com/ge.png',
        'levelItem1': 'Starter',
        'levelItem2': 'Elementary',
    }


def test_legacy_general_english_row():
    card = CourseTransformer.to_display({
        'title': 'General English',
        'description': '4-month comprehensive English course covering all language skills. '
                       'Suitable for Beginner to Intermediate levels.',
        'category': 'English Language',
    })

    assert card['duration'] == '4 months'
    assert card['image'] == '/classroom2.svg'
    assert card['levelItem1'] == 'Beginner'
    assert card['levelItem2'] == 'Intermediate'


def test_legacy_ielts_row():
    card = CourseTransformer.to_display({
        'title': 'IELTS Preparation',
        'description': '4-month intensive IELTS preparation course. '
                       'Designed for Upper Intermediate to Advanced students.',
        'category': 'English Language',
    })

    assert card['image'] == '/classroom1.png'
    assert card['levelItem1'] == 'Upper Intermediate'
    assert card['levelItem2'] == 'Advanced'


def test_duration_taken_from_description():
    card = CourseTransformer.to_display({'title': 'Chinese', 'description': 'A 6 months evening course'})

    assert card['duration'] == '6 months'


def test_empty_row_gets_every_default():
    card = CourseTransformer.to_display({})

    assert card == {
        'name': '',
        'duration': '4 months',
        'image': '/office.svg',
        'levelItem1': 'Research methodology',
        'levelItem2': 'Academic writing',
    }


def test_image_falls_back_to_category_map():
    card = CourseTransformer.to_display({'title': 'Evening Class', 'category': 'General English'})

    assert card['image'] == '/classroom2.svg'


def test_known_titles_ordered_first():
    rows = [{'title': 'Chinese Language'}, {'title': 'Academic English'},
            {'title': 'General English'}, {'title': 'IELTS Preparation'}]

    names = [card['name'] for card in CourseTransformer.transform(rows)]

    assert names == ['General English', 'IELTS Preparation', 'Academic English', 'Chinese Language']


def test_to_storage_encodes_description():
    values = CourseTransformer.to_storage({
        'title': ' Chinese Language ',
        'duration': '3 months',
        'levelitem1': 'HSK 1',
        'levelitem2': 'HSK 2',
        'image': '',
    }, 'https://neonedu.mn/courses')

    assert values == {
        'title': 'Chinese Language',
        'description': '3 months - HSK 1, HSK 2',
        'duration': '3 months',
        'levelitem1': 'HSK 1',
        'levelitem2': 'HSK 2',
        'image': None,
        'category': '3 months',
        'link': 'https://neonedu.mn/courses',
    }
