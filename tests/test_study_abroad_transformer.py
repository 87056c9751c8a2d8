from neonedu.services.study_abroad_transformer import (StudyAbroadTransformer, split_description, split_fields,
                                                       join_description)


def test_split_on_separator():
    assert split_description(' High-quality education. | Sejong University, SKKU. ') == \
        ('High-quality education.', 'Sejong University, SKKU.')


def test_split_only_on_first_separator():
    assert split_description('a|b|c') == ('a', 'b|c')


def test_split_on_university_suffix():
    description, universities = split_description('High-quality education at affordable cost. Sejong University, SKKU')

    assert description == 'High-quality education at affordable cost.'
    assert universities == 'Sejong University, SKKU'


def test_split_on_sentence_boundary():
    description, universities = split_description(
        'World-class education in a globally recognized system. 220+ universities and colleges available.')

    assert description == 'World-class education in a globally recognized system.'
    assert universities == '220+ universities and colleges available.'


def test_split_before_university_name():
    description, universities = split_description('Begin studies without IELTS. University of Miskolc.')

    assert description == 'Begin studies without IELTS.'
    assert universities == 'University of Miskolc.'


def test_sentence_split_keeps_the_whole_remainder():
    # Only the first boundary splits; later university mentions stay in the second part
    description, universities = split_description('Great schools. Sejong University. 800+ campuses')

    assert description == 'Great schools.'
    assert universities == 'Sejong University. 800+ campuses'


def test_split_fields_fills_nothing_in():
    assert split_fields('Great place to study') == ('Great place to study', '')
    assert split_fields('|James Cook University') == ('', 'James Cook University')
    assert split_fields(None) == ('', '')


def test_split_single_sentence():
    assert split_description('Great place to study') == ('Great place to study', 'Contact us for more information')


def test_split_empty_and_missing():
    defaults = ('Study opportunities available', 'Contact us for more information')

    assert split_description('') == defaults
    assert split_description(None) == defaults
    assert split_description('|') == defaults


def test_join_then_split_gives_back_the_fields():
    stored = join_description('Affordable study.', 'INTI international University.')

    assert stored == 'Affordable study.|INTI international University.'
    assert split_description(stored) == ('Affordable study.', 'INTI international University.')


def test_known_country_uses_its_bundle():
    card = StudyAbroadTransformer.to_display({'country': 'Hungary', 'description': 'a|b'})

    assert card == {
        'country': 'Hungary',
        'description': 'a',
        'universities': 'b',
        'image': '/Neon Edu v3 (2)/hungray.svg',
        'dotbg': '/hungary dots.svg',
    }


def test_unknown_country_borrows_fallback_bundle():
    card = StudyAbroadTransformer.to_display({'country': 'Brazil', 'description': 'a|b'})
    china = StudyAbroadTransformer.COUNTRY_ASSETS['China']

    assert card['country'] == 'Brazil'
    assert card['image'] == china['image']
    assert card['dotbg'] == china['dotbg']


def test_fallback_country_is_configurable():
    card = StudyAbroadTransformer.to_display({'country': 'Brazil', 'description': 'a|b'},
                                             fallback_country='Australia')

    assert card['dotbg'] == '/australiaDots.svg'


def test_stored_image_overrides_bundle_image():
    card = StudyAbroadTransformer.to_display({'country': 'China', 'description': 'a|b',
                                              'image': 'https://cdn.example.com/cn.png'})

    assert card['image'] == 'https://cdn.example.com/cn.png'
    assert card['dotbg'] == '/china dots.svg'


def test_transform_keeps_store_order():
    rows = [{'country': 'Malaysia'}, {'country': 'Australia'}, {'country': 'China'}]

    countries = [card['country'] for card in StudyAbroadTransformer.transform(rows)]

    assert countries == ['Malaysia', 'Australia', 'China']


def test_to_storage_joins_description():
    values = StudyAbroadTransformer.to_storage({
        'country': 'Singapore',
        'description': ' Closer and more affordable. ',
        'universities': 'James Cook University',
    })

    assert values['description'] == 'Closer and more affordable.|James Cook University'
    assert values['program_name'] is None
    assert values['image'] is None
