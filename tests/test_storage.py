"""Record store contract, run against both backends."""

from __future__ import annotations

import json

import pytest

from healthlog.errors import StorageError
from healthlog.storage import DocumentStore


def add_reading(store, measured_at, systolic=120, diastolic=80):
    return store.insert('blood_pressure', {
        'measured_at': measured_at, 'systolic': systolic, 'diastolic': diastolic,
    })


def test_insert_assigns_id_and_created_at(app_store) -> None:
    reading = add_reading(app_store, '2026-10-19T07:00:00', 131, 84)

    assert reading['id']
    assert reading['created_at']
    assert reading['measured_at'] == '2026-10-19T07:00:00'
    assert app_store.get('blood_pressure', reading['id']) == reading


def test_list_orders_and_limits(app_store) -> None:
    add_reading(app_store, '2026-10-17T07:00:00', 140)
    add_reading(app_store, '2026-10-19T07:00:00', 120)
    add_reading(app_store, '2026-10-18T07:00:00', 130)

    newest = app_store.list('blood_pressure', order_by='measured_at', descending=True, limit=2)

    assert [r['systolic'] for r in newest] == [120, 130]


def test_equal_sort_keys_keep_insertion_order(app_store) -> None:
    for name in ('Miso soup', 'Tofu salad', 'Boiled spinach'):
        app_store.insert('recipe', {'name': name, 'category': 'side'})

    names = [r['name'] for r in app_store.list('recipe', order_by='category')]

    assert names == ['Miso soup', 'Tofu salad', 'Boiled spinach']


def test_filters_accept_dates_or_strings(app_store) -> None:
    from datetime import date

    app_store.insert('food_log', {'logged_date': '2026-10-19', 'meal_type': 'lunch',
                                  'custom_name': 'Soba', 'portion': 1.0})
    app_store.insert('food_log', {'logged_date': '2026-10-18', 'meal_type': 'lunch',
                                  'custom_name': 'Udon', 'portion': 1.0})

    by_date = app_store.list('food_log', filters={'logged_date': date(2026, 10, 19)})
    by_string = app_store.list('food_log', filters={'logged_date': '2026-10-19'})

    assert [e['custom_name'] for e in by_date] == ['Soba']
    assert by_date == by_string
    assert app_store.count('food_log') == 2


def test_upsert_replaces_record_with_same_key(app_store) -> None:
    first = app_store.upsert('weight', {'measured_at': '2026-10-19', 'weight_kg': 109.0},
                             key='measured_at')
    second = app_store.upsert('weight', {'measured_at': '2026-10-19', 'weight_kg': 108.4},
                              key='measured_at')

    assert str(second['id']) == str(first['id'])
    entries = app_store.list('weight')
    assert len(entries) == 1
    assert entries[0]['weight_kg'] == pytest.approx(108.4)


def test_update_and_delete(app_store) -> None:
    visit = app_store.insert('medical_visit', {'visit_date': '2026-10-01',
                                               'department': 'Cardiology'})

    updated = app_store.update('medical_visit', visit['id'], {'diagnosis': 'Hypertension'})

    assert updated['diagnosis'] == 'Hypertension'
    assert updated['department'] == 'Cardiology'
    assert app_store.delete('medical_visit', visit['id']) is True
    assert app_store.get('medical_visit', visit['id']) is None
    assert app_store.delete('medical_visit', visit['id']) is False


def test_missing_records(app_store) -> None:
    assert app_store.get('blood_pressure', '999') is None
    assert app_store.update('blood_pressure', 'no-such-id', {'systolic': 120}) is None
    assert app_store.first('condition', {'logged_date': '2026-10-19'}) is None
    assert app_store.list('exercise_log') == []


def test_unknown_kind_is_rejected(app_store) -> None:
    with pytest.raises(ValueError):
        app_store.list('sleep')


def test_recipe_lists_round_trip(app_store) -> None:
    recipe = app_store.insert('recipe', {
        'name': 'Vinegar chicken', 'category': 'main',
        'ingredients': [{'name': 'Chicken thigh', 'amount': '200g'}],
        'steps': ['Brown the chicken', 'Simmer with vinegar'],
        'is_favorite': False,
    })

    fetched = app_store.get('recipe', recipe['id'])

    assert fetched['ingredients'] == [{'name': 'Chicken thigh', 'amount': '200g'}]
    assert fetched['steps'] == ['Brown the chicken', 'Simmer with vinegar']
    assert isinstance(fetched['id'], str)


def test_document_store_mirrors_to_file(tmp_path) -> None:
    path = tmp_path / 'data' / 'store.json'
    store = DocumentStore(str(path))
    store.insert('weight', {'measured_at': '2026-10-19', 'weight_kg': 108.0})

    raw = json.loads(path.read_text(encoding='utf-8'))
    assert 'health_weight' in raw
    assert json.loads(raw['health_weight'])[0]['weight_kg'] == 108.0

    reloaded = DocumentStore(str(path))
    assert reloaded.list('weight')[0]['measured_at'] == '2026-10-19'


def test_document_store_rejects_corrupt_file(tmp_path) -> None:
    path = tmp_path / 'store.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(StorageError):
        DocumentStore(str(path))


def test_document_store_streaks_have_no_created_at(store) -> None:
    record = store.insert('streak', {'streak_type': 'cpap', 'current_count': 1,
                                     'best_count': 1, 'last_date': '2026-10-19'})

    assert 'created_at' not in record


def test_failed_save_leaves_document_store_unchanged(tmp_path) -> None:
    blocker = tmp_path / 'blocker'
    blocker.write_text('', encoding='utf-8')
    store = DocumentStore(str(tmp_path / 'health.json'))
    kept = store.insert('weight', {'measured_at': '2026-10-18', 'weight_kg': 109.0})

    # A regular file where the directory should be makes every save fail
    store.path = str(blocker / 'health.json')

    with pytest.raises(StorageError):
        store.insert('weight', {'measured_at': '2026-10-19', 'weight_kg': 100})
    with pytest.raises(StorageError):
        store.delete('weight', kept['id'])
    with pytest.raises(StorageError):
        store.upsert('weight', {'measured_at': '2026-10-18', 'weight_kg': 90.0},
                     key='measured_at')

    assert store.list('weight') == [kept]


def test_offset_timestamps_become_local_time(app_store) -> None:
    utc = add_reading(app_store, '2026-10-19T23:30:00Z')
    offset = add_reading(app_store, '2026-10-19T12:00:00-05:00')
    local = add_reading(app_store, '2026-10-19T07:15:00')

    assert utc['measured_at'] == '2026-10-20T08:30:00'
    assert offset['measured_at'] == '2026-10-20T02:00:00'
    assert local['measured_at'] == '2026-10-19T07:15:00'
    assert app_store.get('blood_pressure', utc['id'])['measured_at'] == '2026-10-20T08:30:00'
