from neoresus.reference.content import CHECKLIST_ITEMS, CHECKLIST_TITLES, MAJOR_CONCEPTS


def test_checklists():
    assert len(CHECKLIST_ITEMS["pre"]) == 9
    assert len(CHECKLIST_ITEMS["post"]) == 7
    assert set(CHECKLIST_TITLES) == set(CHECKLIST_ITEMS)


def test_theory_sections_have_unique_ids():
    ids = [section.id for section in MAJOR_CONCEPTS]
    assert len(ids) == len(set(ids)) == 5
    assert all(section.content.strip() for section in MAJOR_CONCEPTS)
