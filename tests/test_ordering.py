from neonedu.services.ordering import ordered_by


def test_known_names_keep_list_order():
    key = ordered_by(('General English', 'IELTS Preparation', 'Academic English'))

    names = sorted(['Academic English', 'General English', 'IELTS Preparation'], key=key)

    assert names == ['General English', 'IELTS Preparation', 'Academic English']


def test_unknown_names_follow_alphabetically():
    key = ordered_by(('Dalantai.E', 'Anar.P'))

    names = sorted(['Zaya.B', 'Anar.P', 'Bold.T', 'Dalantai.E'], key=key)

    assert names == ['Dalantai.E', 'Anar.P', 'Bold.T', 'Zaya.B']


def test_empty_order_is_alphabetical():
    assert sorted(['b', 'a', 'c'], key=ordered_by(())) == ['a', 'b', 'c']
