import pytest

from app import create_app


@pytest.fixture
def app(tmp_path):
    (tmp_path / 'index.html').write_text('<h1>Clinic</h1>')
    (tmp_path / '.env').write_text('DB_PASSWORD=secret')
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'STATIC_ROOT': str(tmp_path),
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def patient_id(client):
    return client.post('/add-patient', json={'name': 'Jane Doe', 'age': 30}).get_json()['insertId']


@pytest.fixture
def doctor_id(client):
    return client.post('/add-doctor', json={'name': 'Dr. House', 'specialization': 'Diagnostics'}).get_json()['insertId']
