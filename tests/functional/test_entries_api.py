"""
This file (test_entries_api.py) contains the functional tests for the
`entries_api` blueprint.
"""
from moodblog import database
from moodblog.models import Entry
from moodblog.mood import Reaction


def entry_data(blog, reaction='LIKE', title='Great day', content='so happy', **kwargs):
    data = {'title': title, 'content': content, 'reaction': reaction, 'blog_id': blog.id}
    data.update(kwargs)
    return data


# ------------
# Create Entry
# ------------

def test_create_entry(test_client, positive_blog):
    """
    GIVEN a Flask application and a positive blog
    WHEN the '/api/entries/' page is posted to (POST) with a LIKE entry
    THEN check that the entry is stored and returned with a creation alert
    """
    response = test_client.post('/api/entries/', json=entry_data(positive_blog))
    assert response.status_code == 201
    assert response.json['id'] == 1
    assert response.json['title'] == 'Great day'
    assert response.json['content'] == 'so happy'
    assert response.json['reaction'] == 'LIKE'
    assert response.json['blog_id'] == positive_blog.id
    assert response.json['date'] is not None
    assert response.headers['X-moodblogApp-alert'] == 'A new entry is created with identifier 1'
    assert response.headers['X-moodblogApp-params'] == '1'
    assert Entry.query.count() == 1


def test_create_entry_with_date(test_client, negative_blog):
    response = test_client.post('/api/entries/',
                                json=entry_data(negative_blog, reaction='SAD', title='Rain',
                                                content='It rained all day.', date='2022-07-01T04:29:50'))
    assert response.status_code == 201
    assert response.json['date'] == '2022-07-01T04:29:50'
    assert response.json['reaction'] == 'SAD'


def test_create_entry_with_id(test_client, positive_blog):
    """
    GIVEN a Flask application and a positive blog
    WHEN the '/api/entries/' page is posted to (POST) with an entry that already has an ID
    THEN check that the entry is rejected and nothing is stored
    """
    response = test_client.post('/api/entries/', json=entry_data(positive_blog, id=5))
    assert response.status_code == 400
    assert response.json['error_key'] == 'idexists'
    assert response.json['entity_name'] == 'entry'
    assert response.json['description'] == 'A new entry cannot already have an ID'
    assert response.headers['X-moodblogApp-error'] == 'error.idexists'
    assert response.headers['X-moodblogApp-params'] == 'entry'
    assert Entry.query.count() == 0


def test_create_entry_invalid_emoji(test_client, positive_blog):
    """
    GIVEN a Flask application and a positive blog
    WHEN the '/api/entries/' page is posted to (POST) with a SAD entry
    THEN check that the entry is rejected with the 'invalidEmoji' error key
    """
    response = test_client.post('/api/entries/',
                                json=entry_data(positive_blog, reaction='SAD', title='ok', content='fine'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidEmoji'
    assert response.json['description'] == 'Invalid Emoji'
    assert response.headers['X-moodblogApp-error'] == 'error.invalidEmoji'
    assert Entry.query.count() == 0


def test_create_entry_invalid_emoji_negative_blog(test_client, negative_blog):
    response = test_client.post('/api/entries/', json=entry_data(negative_blog, reaction='HAHA'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidEmoji'


def test_create_entry_invalid_content(test_client, positive_blog):
    """
    GIVEN a Flask application and a positive blog
    WHEN the '/api/entries/' page is posted to (POST) with 'lonely' in the title
    THEN check that the entry is rejected with the 'invalidContent' error key
    """
    response = test_client.post('/api/entries/',
                                json=entry_data(positive_blog, title='I feel lonely', content='fine'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidContent'
    assert response.json['description'] == 'Invalid Content'
    assert response.headers['X-moodblogApp-error'] == 'error.invalidContent'
    assert Entry.query.count() == 0


def test_create_entry_invalid_content_negative_blog(test_client, negative_blog):
    response = test_client.post('/api/entries/',
                                json=entry_data(negative_blog, reaction='ANGRY',
                                                title='I hate this', content='trust no one'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidContent'


def test_create_entry_unknown_blog(test_client, caplog):
    """
    GIVEN a Flask application without any blogs
    WHEN the '/api/entries/' page is posted to (POST) with an entry for an unknown blog
    THEN check that the mood validation is skipped and the entry is stored
    """
    response = test_client.post('/api/entries/',
                                json={'title': 'sad', 'content': 'lonely', 'reaction': 'SAD', 'blog_id': 99})
    assert response.status_code == 201
    assert response.json['blog_id'] == 99
    assert 'Blog 99 not found, mood validation skipped' in caplog.text


def test_create_entry_missing_fields(test_client, positive_blog):
    response = test_client.post('/api/entries/', json={'title': 'Great day', 'blog_id': positive_blog.id})
    assert response.status_code == 400
    assert Entry.query.count() == 0


def test_create_entry_unknown_reaction(test_client, positive_blog):
    response = test_client.post('/api/entries/', json=entry_data(positive_blog, reaction='WOW'))
    assert response.status_code == 400
    assert Entry.query.count() == 0


# ------------
# Update Entry
# ------------

def test_update_entry(test_client, positive_blog, add_entries):
    """
    GIVEN a Flask application with entries in a positive blog
    WHEN the '/api/entries/' page is updated (PUT) with a consistent entry
    THEN check that every field of the entry is replaced
    """
    response = test_client.put('/api/entries/',
                               json=entry_data(positive_blog, id=1, reaction='HAHA',
                                               title='Funny day', content='A great joke',
                                               date='2022-07-02T06:29:50'))
    assert response.status_code == 200
    assert response.json['id'] == 1
    assert response.json['title'] == 'Funny day'
    assert response.json['content'] == 'A great joke'
    assert response.json['reaction'] == 'HAHA'
    assert response.json['date'] == '2022-07-02T06:29:50'
    assert response.headers['X-moodblogApp-alert'] == 'A entry is updated with identifier 1'

    entry = database.session.get(Entry, 1)
    assert entry.title == 'Funny day'
    assert entry.reaction is Reaction.HAHA


def test_update_entry_without_id(test_client, positive_blog, add_entries):
    response = test_client.put('/api/entries/', json=entry_data(positive_blog))
    assert response.status_code == 400
    assert response.json['error_key'] == 'idnull'
    assert response.json['description'] == 'Invalid id'
    assert response.headers['X-moodblogApp-error'] == 'error.idnull'


def test_update_entry_invalid_emoji(test_client, positive_blog, add_entries):
    response = test_client.put('/api/entries/', json=entry_data(positive_blog, id=1, reaction='ANGRY'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidEmoji'
    assert database.session.get(Entry, 1).reaction is Reaction.LIKE


def test_update_entry_invalid_content(test_client, positive_blog, add_entries):
    """
    GIVEN a Flask application with entries in a positive blog
    WHEN an entry is updated (PUT) with 'fear' in the content
    THEN check that the update is rejected and the stored entry is unchanged
    """
    response = test_client.put('/api/entries/',
                               json=entry_data(positive_blog, id=2, content='No FEAR at all'))
    assert response.status_code == 400
    assert response.json['error_key'] == 'invalidContent'
    assert database.session.get(Entry, 2).content == 'We laughed a lot.'


def test_update_entry_not_found(test_client, positive_blog):
    response = test_client.put('/api/entries/', json=entry_data(positive_blog, id=42))
    assert response.status_code == 404
    assert response.json['code'] == 404
    assert response.json['description'] == 'No entry found with id 42'


def test_update_entry_again_is_accepted(test_client, positive_blog, add_entries):
    data = entry_data(positive_blog, id=1)
    assert test_client.put('/api/entries/', json=data).status_code == 200
    assert test_client.put('/api/entries/', json=data).status_code == 200


# ------------
# Read Entries
# ------------

def test_get_entry(test_client, add_entries):
    response = test_client.get('/api/entries/2')
    assert response.status_code == 200
    assert response.json['id'] == 2
    assert response.json['title'] == 'Picnic'
    assert response.json['reaction'] == 'HAHA'


def test_get_entry_not_found(test_client):
    response = test_client.get('/api/entries/7')
    assert response.status_code == 404
    assert response.json['name'] == 'Not Found'


def test_list_entries(test_client, add_entries):
    """
    GIVEN a Flask application with three entries
    WHEN the '/api/entries/' page is requested (GET)
    THEN check that all the entries are returned with the total count
    """
    response = test_client.get('/api/entries/')
    assert response.status_code == 200
    assert [entry['id'] for entry in response.json] == [1, 2, 3]
    assert response.headers['X-Total-Count'] == '3'
    assert 'rel="first"' in response.headers['Link']
    assert 'rel="next"' not in response.headers['Link']


def test_list_entries_paginated(test_client, add_entries):
    response = test_client.get('/api/entries/?page=2&per_page=2')
    assert response.status_code == 200
    assert [entry['id'] for entry in response.json] == [3]
    assert response.headers['X-Total-Count'] == '3'
    assert 'page=1&per_page=2>; rel="prev"' in response.headers['Link']
    assert 'page=2&per_page=2>; rel="last"' in response.headers['Link']

    response = test_client.get('/api/entries/?page=1&per_page=2')
    assert 'page=2&per_page=2>; rel="next"' in response.headers['Link']


def test_list_entries_empty(test_client):
    response = test_client.get('/api/entries/')
    assert response.status_code == 200
    assert response.json == []
    assert response.headers['X-Total-Count'] == '0'


def test_list_entries_invalid_page(test_client):
    response = test_client.get('/api/entries/?page=0')
    assert response.status_code == 400


def test_list_entries_per_page_is_capped(test_client, app, add_entries):
    app.config['MAX_ENTRIES_PER_PAGE'] = 2
    response = test_client.get('/api/entries/?per_page=50')
    assert len(response.json) == 2


# ------------
# Delete Entry
# ------------

def test_delete_entry(test_client, add_entries):
    """
    GIVEN a Flask application with three entries
    WHEN an entry is deleted (DELETE)
    THEN check that the entry is removed and a deletion alert is returned
    """
    response = test_client.delete('/api/entries/1')
    assert response.status_code == 204
    assert response.headers['X-moodblogApp-alert'] == 'A entry is deleted with identifier 1'
    assert Entry.query.count() == 2
    assert test_client.get('/api/entries/1').status_code == 404


def test_delete_entry_not_found(test_client):
    response = test_client.delete('/api/entries/12')
    assert response.status_code == 404
