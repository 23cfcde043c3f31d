from apifairy import arguments, body, other_responses, response
from flask import current_app

from moodblog import services
from moodblog.errors import EntityNotFoundError
from moodblog.headers import (entity_creation_alert, entity_deletion_alert,
                              entity_update_alert, pagination_headers)
from moodblog.schemas import EntrySchema, PaginationSchema

from . import entries_api_blueprint


# -------
# Schemas
# -------

entry_schema = EntrySchema()
entries_schema = EntrySchema(many=True)
pagination_schema = PaginationSchema()


# ------
# Routes
# ------

@entries_api_blueprint.route('/', methods=['POST'])
@body(entry_schema)
@response(entry_schema, 201)
@other_responses({400: 'Entry has an ID, or does not match the mood of its blog'})
def create_entry(kwargs):
    """Create a new entry"""
    current_app.logger.debug(f'REST request to save Entry : {kwargs}')
    entry = services.create_entry(kwargs)
    return entry, entity_creation_alert('entry', entry.id)


@entries_api_blueprint.route('/', methods=['PUT'])
@body(entry_schema)
@response(entry_schema)
@other_responses({400: 'Entry has no ID, or does not match the mood of its blog',
                  404: 'Entry not found'})
def update_entry(kwargs):
    """Update an existing entry"""
    current_app.logger.debug(f'REST request to update Entry : {kwargs}')
    entry = services.update_entry(kwargs)
    return entry, entity_update_alert('entry', entry.id)


@entries_api_blueprint.route('/', methods=['GET'])
@arguments(pagination_schema)
@response(entries_schema)
def list_entries(args):
    """Retrieve a page of entries"""
    current_app.logger.debug('REST request to get a page of Entries')
    pagination = services.find_all_entries(args['page'], args['per_page'])
    return pagination.items, pagination_headers(pagination, 'entries_api.list_entries')


@entries_api_blueprint.route('/<int:index>', methods=['GET'])
@response(entry_schema)
@other_responses({404: 'Entry not found'})
def get_entry(index):
    """Retrieve an entry"""
    current_app.logger.debug(f'REST request to get Entry : {index}')
    entry = services.find_entry(index)
    if entry is None:
        raise EntityNotFoundError('entry', index)
    return entry


@entries_api_blueprint.route('/<int:index>', methods=['DELETE'])
@other_responses({404: 'Entry not found'})
def delete_entry(index):
    """Delete an entry"""
    current_app.logger.debug(f'REST request to delete Entry : {index}')
    services.delete_entry(index)
    return '', 204, entity_deletion_alert('entry', index)
