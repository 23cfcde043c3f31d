"""
The 'entries_api' blueprint handles the API for managing blog entries.
Specifically, this blueprint allows for entries to be added, edited,
listed and deleted. Entries are checked against the mood of their blog
when they are added or edited.
"""
from flask import Blueprint


entries_api_blueprint = Blueprint('entries_api', __name__)

from . import routes
