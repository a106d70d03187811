"""HTTP tests for the mentorship API."""

import pytest

from src.models.enums import UserRole

API = '/api/v1'


async def _create_program(client, mentor_id, capacity=2, subject='Cloud Careers'):
    response = await client.post(f'{API}/programs', json={
        'mentor_id': mentor_id,
        'subject': subject,
        'description': 'Monthly office hours',
        'community_link': 'https://chat.example.com/cloud',
        'capacity': capacity,
    })
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'ok'


@pytest.mark.asyncio
async def test_create_and_list_programs(client, mentor):
    created = await _create_program(client, mentor.id)

    response = await client.get(f'{API}/programs')

    assert response.status_code == 200
    body = response.json()
    assert body['total'] == 1
    assert body['items'][0]['id'] == created['id']
    assert body['items'][0]['joined_count'] == 0


@pytest.mark.asyncio
async def test_create_program_rejects_zero_capacity(client, mentor):
    response = await client.post(f'{API}/programs', json={
        'mentor_id': mentor.id,
        'subject': 'Cloud Careers',
        'community_link': 'https://chat.example.com/cloud',
        'capacity': 0,
    })

    assert response.status_code == 400
    assert response.json()['detail'] == 'Capacity must be a positive integer'


@pytest.mark.asyncio
async def test_create_program_unknown_mentor(client):
    response = await client.post(f'{API}/programs', json={
        'mentor_id': 4242,
        'subject': 'Cloud Careers',
        'community_link': 'https://chat.example.com/cloud',
        'capacity': 2,
    })

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_join_flow_status_codes(client, mentor, make_user):
    program = await _create_program(client, mentor.id, capacity=1)
    first = await make_user()
    second = await make_user()

    joined = await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': first.id})
    again = await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': first.id})
    full = await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': second.id})

    assert joined.status_code == 201
    assert joined.json()['mentee_id'] == first.id
    assert again.status_code == 409
    assert again.json()['detail'] == 'Already joined this program'
    assert full.status_code == 409
    assert full.json()['detail'] == 'Program is full'


@pytest.mark.asyncio
async def test_join_errors(client, mentor, make_user):
    program = await _create_program(client, mentor.id)
    student = await make_user()

    missing_program = await client.post(f'{API}/programs/9999/join', json={'mentee_id': student.id})
    missing_mentee = await client.post(f"{API}/programs/{program['id']}/join", json={})
    unknown_mentee = await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': 9999})

    assert missing_program.status_code == 404
    assert missing_mentee.status_code == 400
    assert unknown_mentee.status_code == 404


@pytest.mark.asyncio
async def test_viewer_annotation(client, mentor, make_user):
    program = await _create_program(client, mentor.id)
    student = await make_user()
    await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': student.id})

    response = await client.get(f'{API}/programs', params={'viewer_id': student.id})

    item = response.json()['items'][0]
    assert item['joined_by_viewer'] is True
    assert item['joined_count'] == 1


@pytest.mark.asyncio
async def test_admin_listing(client, make_user):
    alumni = await make_user(UserRole.ALUMNI, with_profile=True, name='Meera Iyer')
    await _create_program(client, alumni.id)

    response = await client.get(f'{API}/admin/programs')

    assert response.status_code == 200
    item = response.json()['items'][0]
    assert item['mentor']['id'] == alumni.id
    assert item['mentor']['name'] == 'Meera Iyer'


@pytest.mark.asyncio
async def test_notification_inbox(client, app, mentor, make_user):
    program = await _create_program(client, mentor.id)
    student = await make_user()
    await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': student.id})
    await app.state.notifier.drain()

    inbox = await client.get(f'{API}/notifications', params={'user_id': student.id})

    assert inbox.status_code == 200
    body = inbox.json()
    assert body['unread_count'] == 1
    notification = body['items'][0]
    assert notification['category'] == 'program_joined'

    read = await client.patch(f"{API}/notifications/{notification['id']}/read")
    assert read.status_code == 200
    assert read.json()['is_read'] is True

    missing = await client.patch(f'{API}/notifications/9999/read')
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_create_program_rejects_boolean_capacity(client, mentor):
    response = await client.post(f'{API}/programs', json={
        'mentor_id': mentor.id,
        'subject': 'Cloud Careers',
        'community_link': 'https://chat.example.com/cloud',
        'capacity': True,
    })

    assert response.status_code == 422
    listing = await client.get(f'{API}/programs')
    assert listing.json()['total'] == 0


@pytest.mark.asyncio
async def test_viewer_annotation_for_non_joiner(client, mentor, make_user):
    program = await _create_program(client, mentor.id)
    joiner = (await make_user()).id
    onlooker = (await make_user()).id
    await client.post(f"{API}/programs/{program['id']}/join", json={'mentee_id': joiner})

    response = await client.get(f'{API}/programs', params={'viewer_id': onlooker})

    item = response.json()['items'][0]
    assert item['joined_count'] == 1
    assert item['joined_by_viewer'] is False
