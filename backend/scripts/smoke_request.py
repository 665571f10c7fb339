"""Run a quick create/read/delete round against the app.

Uses FastAPI's TestClient, so no server needs to be running. Prints each
status code and returns them for callers that want to check the run.
"""

from fastapi.testclient import TestClient
from student_api.main import app


def run():
    client = TestClient(app)
    statuses = {}
    resp = client.get('/health')
    statuses['health'] = resp.status_code
    print('HEALTH:', resp.status_code, resp.json())

    payload = {'name': 'Smoke Test', 'age': 20, 'gender': 'Female', 'isGraduated': False}
    created = client.post('/api/students', json=payload)
    statuses['create'] = created.status_code
    print('CREATE:', created.status_code, created.headers.get('Location'))
    student_id = created.json()['id']

    fetched = client.get(f'/api/students/{student_id}')
    statuses['get'] = fetched.status_code
    print('GET:', fetched.status_code, fetched.json())

    deleted = client.delete(f'/api/students/{student_id}')
    statuses['delete'] = deleted.status_code
    print('DELETE:', deleted.status_code, deleted.json())
    return statuses


if __name__ == '__main__':
    run()
