import logging

import pytest
from fastapi.testclient import TestClient

from student_api.main import app, get_student_service
from student_api.services import InMemoryStudentService

client = TestClient(app)


def _payload(**overrides):
    data = {"name": "Sam", "age": 19, "gender": "Male", "isGraduated": False, "courses": ["math-101"]}
    data.update(overrides)
    return data


@pytest.fixture
def memory_service():
    service = InMemoryStudentService()
    app.dependency_overrides[get_student_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


def test_get_unknown_student_returns_404():
    r = client.get('/api/students/abc')
    assert r.status_code == 404
    assert 'abc' in r.json()['detail']


def test_create_returns_201_with_location_and_body():
    r = client.post('/api/students', json=_payload())
    assert r.status_code == 201
    body = r.json()
    assert body['id']
    assert body['name'] == 'Sam'
    assert body['isGraduated'] is False
    assert body['courses'] == ['math-101']
    assert r.headers['Location'].endswith(f"/api/students/{body['id']}")

    fetched = client.get(r.headers['Location'])
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_keeps_client_id_and_rejects_duplicates():
    r = client.post('/api/students', json=_payload(id='s1'))
    assert r.status_code == 201
    assert r.json()['id'] == 's1'
    again = client.post('/api/students', json=_payload(id='s1'))
    assert again.status_code == 409


def test_create_with_invalid_payload_returns_422():
    r = client.post('/api/students', json={'name': 'No Age'})
    assert r.status_code == 422


def test_list_returns_all_in_order():
    ids = [client.post('/api/students', json=_payload(name=f'n{i}')).json()['id'] for i in range(3)]
    r = client.get('/api/students')
    assert r.status_code == 200
    assert [s['id'] for s in r.json()] == ids


def test_list_on_empty_store_returns_empty_array():
    r = client.get('/api/students')
    assert r.status_code == 200
    assert r.json() == []


def test_update_existing_returns_204_and_applies_changes():
    sid = client.post('/api/students', json=_payload(id='s2')).json()['id']
    r = client.put(f'/api/students/{sid}', json=_payload(id='other', name='Alex', isGraduated=True))
    assert r.status_code == 204
    assert r.content == b''
    stored = client.get(f'/api/students/{sid}').json()
    assert stored['id'] == 's2'
    assert stored['name'] == 'Alex'
    assert stored['isGraduated'] is True


def test_update_unknown_returns_404():
    r = client.put('/api/students/missing', json=_payload())
    assert r.status_code == 404


def test_delete_existing_returns_200_with_acknowledgement():
    sid = client.post('/api/students', json=_payload(id='s3')).json()['id']
    r = client.delete(f'/api/students/{sid}')
    assert r.status_code == 200
    assert r.json() == {'message': 'Student deleted', 'id': 's3'}
    assert client.get(f'/api/students/{sid}').status_code == 404
    assert client.delete(f'/api/students/{sid}').status_code == 404


def test_routes_use_injected_service(memory_service):
    r = client.post('/api/students', json=_payload(id='mem-1'))
    assert r.status_code == 201
    assert memory_service.get('mem-1').name == 'Sam'
    assert client.get('/api/students').json()[0]['id'] == 'mem-1'


def test_request_id_header_exists():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert "X-Request-ID" in r.headers


def test_request_id_is_propagated():
    r = client.get('/api/students', headers={'X-Request-ID': 'abc123'})
    assert r.headers['X-Request-ID'] == 'abc123'


def test_create_rejects_id_with_path_separator():
    r = client.post('/api/students', json=_payload(id='a/b'))
    assert r.status_code == 422
    assert client.get('/api/students').json() == []


def test_duplicate_create_logs_request_id(caplog):
    caplog.set_level(logging.WARNING, logger='student_api.api')
    client.post('/api/students', json=_payload(id='dup'))
    r = client.post('/api/students', json=_payload(id='dup'), headers={'X-Request-ID': 'req-dup-1'})
    assert r.status_code == 409
    assert r.headers['X-Request-ID'] == 'req-dup-1'
    assert any('integrity_error' in m and 'req-dup-1' in m for m in caplog.messages)
