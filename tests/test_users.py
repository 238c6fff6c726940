from bson import ObjectId

from conftest import auth_header, seed


def test_create_user_inserts_new_member(client, store) -> None:
    response = client.post('/users', json={'email': 'a@x.com', 'name': 'Ann'})

    assert response.status_code == 200
    assert response.json()['acknowledged'] is True
    assert store.users.documents[0]['email'] == 'a@x.com'
    assert 'role' not in store.users.documents[0]


def test_create_user_is_idempotent_on_email(client, store) -> None:
    client.post('/users', json={'email': 'a@x.com'})

    response = client.post('/users', json={'email': 'a@x.com'})

    assert response.status_code == 200
    assert response.json() == {'message': 'member already exist'}
    assert len(store.users.documents) == 1


def test_list_users_for_admin(client, store) -> None:
    seed(store.users, email='boss@example.com', role='admin')
    seed(store.users, email='student@example.com')

    response = client.get('/users', headers=auth_header('boss@example.com'))

    assert {u['email'] for u in response.json()} == {'boss@example.com', 'student@example.com'}


def test_list_instructors(client, store) -> None:
    seed(store.users, email='teacher@example.com', role='instructor')
    seed(store.users, email='boss@example.com', role='admin')
    seed(store.users, email='student@example.com')

    response = client.get('/instructors')

    assert [u['email'] for u in response.json()] == ['teacher@example.com']


def test_check_admin_for_other_email_is_false_without_lookup(client, store) -> None:
    seed(store.users, email='boss@example.com', role='admin')

    response = client.get('/users/admin/boss@example.com', headers=auth_header('student@example.com'))

    assert response.status_code == 200
    assert response.json() == {'admin': False}
    assert store.users.calls == []


def test_check_instructor_for_other_email_is_false_without_lookup(client, store) -> None:
    response = client.get('/users/instructor/teacher@example.com', headers=auth_header('student@example.com'))

    assert response.json() == {'instructor': False}
    assert store.users.calls == []


def test_check_admin_for_self(client, store) -> None:
    seed(store.users, email='boss@example.com', role='admin')

    response = client.get('/users/admin/boss@example.com', headers=auth_header('boss@example.com'))

    assert response.json() == {'admin': True}
    assert len(store.users.calls_to('find_one')) == 1


def test_check_instructor_for_admin_is_false(client, store) -> None:
    seed(store.users, email='boss@example.com', role='admin')

    response = client.get('/users/instructor/boss@example.com', headers=auth_header('boss@example.com'))

    assert response.json() == {'instructor': False}


def test_check_role_for_unknown_user_is_false(client) -> None:
    response = client.get('/users/admin/ghost@example.com', headers=auth_header('ghost@example.com'))

    assert response.json() == {'admin': False}


def test_set_admin_role_then_check_is_admin(client, store) -> None:
    user_id = seed(store.users, email='x@example.com')

    promoted = client.patch(f'/users/admin/{user_id}')
    assert promoted.json()['modifiedCount'] == 1

    response = client.get('/users/admin/x@example.com', headers=auth_header('x@example.com'))
    assert response.json() == {'admin': True}


def test_set_instructor_role_grants_instructor_routes(client, store) -> None:
    user_id = seed(store.users, email='t@example.com')
    client.patch(f'/users/instructor/{user_id}')

    response = client.post('/classes', json={'className': 'Cello'}, headers=auth_header('t@example.com'))

    assert response.status_code == 200
    assert store.users.documents[0]['role'] == 'instructor'


def test_unknown_role_segment_is_rejected(client, store) -> None:
    user_id = seed(store.users, email='x@example.com')

    response = client.patch(f'/users/superuser/{user_id}')

    assert response.status_code == 422
    assert response.json()['error'] is True
    assert 'role' not in store.users.documents[0]


def test_delete_user(client, store) -> None:
    user_id = seed(store.users, email='x@example.com')

    response = client.delete(f'/users/{user_id}')

    assert response.json() == {'acknowledged': True, 'deletedCount': 1}
    assert store.users.documents == []


def test_delete_unknown_user(client) -> None:
    assert client.delete(f'/users/{ObjectId()}').json()['deletedCount'] == 0
