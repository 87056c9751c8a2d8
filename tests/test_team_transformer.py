from neonedu.services.team_transformer import TeamTransformer


def _row(name, **overrides):
    row = {'name': name, 'role': 'Teacher & Advisor', 'image': f'/{name}.png', 'bio': f'{name} bio'}
    row.update(overrides)
    return row


def test_display_card_fields():
    card = TeamTransformer.to_display(_row('Anar.P', role='Co-Founder'))

    assert card == {
        'name': 'Anar.P',
        'image': '/Anar.P.png',
        'position': 'Co-Founder',
        'ditem1': 'Anar.P bio',
        'ditem2': '',
        'ditem3': '',
    }


def test_known_names_follow_fixed_order():
    rows = [_row(name) for name in reversed(TeamTransformer.TEAM_ORDER)]

    names = [card['name'] for card in TeamTransformer.transform(rows)]

    assert names == list(TeamTransformer.TEAM_ORDER)


def test_unknown_names_go_last_alphabetically():
    rows = [_row('Zaya.B'), _row('Yumjir. Ts'), _row('Bat.O'), _row('Dalantai.E')]

    names = [card['name'] for card in TeamTransformer.transform(rows)]

    assert names == ['Dalantai.E', 'Yumjir. Ts', 'Bat.O', 'Zaya.B']


def test_empty_input():
    assert TeamTransformer.transform([]) == []
