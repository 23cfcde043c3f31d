"""
The 'blogs_api' blueprint handles the API for managing blogs.
A blog declares the mood (positive or negative) that its entries must follow.
"""
from flask import Blueprint


blogs_api_blueprint = Blueprint('blogs_api', __name__)

from . import routes
