"""
Welcome to the documentation for the Mood Blog API!

## Introduction

The Mood Blog API is an API (Application Programming Interface) for writing
**entries** in **blogs** that each declare a mood, either positive or negative.

## Key Functionality

The Mood Blog API has the following functionality:

1. Work with blogs:
  * Create, update, view and delete a blog
  * Each blog is either positive or negative
2. Work with blog entries:
  * Create a new entry
  * Update an entry
  * Delete an entry
  * View a page of entries
3. Mood consistency:
  * The reaction of an entry (LIKE, HAHA, SAD, ANGRY) must match the mood of its blog
  * The title and content of an entry must not contain words of the opposite mood

## Key Modules

The project utilizes the following modules:

* **Flask**: micro-framework for web application development which includes the following dependencies:
  * **click**: package for creating command-line interfaces (CLI)
  * **Werkzeug**: set of utilities for creating a Python application that can talk to a WSGI server
* **APIFairy**: API framework for Flask which includes the following dependencies:
  * **Flask-Marshmallow** - Flask extension for using Marshmallow (object serialization/deserialization library)
  * **apispec** - API specification generator that supports the OpenAPI specification
* **Flask-SQLAlchemy** and **Flask-Migrate**: database access and migrations
* **pytest**: framework for testing Python projects
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from apifairy import APIFairy
from click import echo
from flask import Flask, json
from flask.logging import default_handler
from flask_marshmallow import Marshmallow
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData
from werkzeug.exceptions import HTTPException


# -------------
# Configuration
# -------------

# Create a naming convention for the database tables
convention = {
    "ix": 'ix_%(column_0_label)s',
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}
metadata = MetaData(naming_convention=convention)

# Create the instances of the Flask extensions in the global scope,
# but without any arguments passed in. These instances are not
# attached to the Flask application at this point.
apifairy = APIFairy()
ma = Marshmallow()
database = SQLAlchemy(metadata=metadata)
db_migration = Migrate()


# ----------------------------
# Application Factory Function
# ----------------------------

def create_app():
    # Create the Flask application
    app = Flask(__name__)

    # Configure the Flask application
    config_type = os.getenv('CONFIG_TYPE', default='config.DevelopmentConfig')
    app.config.from_object(config_type)

    initialize_extensions(app)
    configure_mood_policy(app)
    register_blueprints(app)
    configure_logging(app)
    register_error_handlers(app)
    register_cli_commands(app)
    return app


# ----------------
# Helper Functions
# ----------------

def initialize_extensions(app):
    # Since the application instance is now created, pass it to each Flask
    # extension instance to bind it to the Flask application instance (app)
    apifairy.init_app(app)
    ma.init_app(app)
    database.init_app(app)
    db_migration.init_app(app, database, render_as_batch=True)


def configure_mood_policy(app):
    from moodblog.mood import KeywordPolicy

    # The keyword policy is built once and shared (read-only) by every request
    app.extensions['mood_policy'] = KeywordPolicy(
        negative_markers=app.config['MOOD_NEGATIVE_MARKERS'],
        positive_markers=app.config['MOOD_POSITIVE_MARKERS'],
        whole_field=app.config['MOOD_WHOLE_FIELD_MATCH'],
    )


def register_blueprints(app):
    # Import the blueprints
    from moodblog.blogs_api import blogs_api_blueprint
    from moodblog.entries_api import entries_api_blueprint

    # Since the application instance is now created, register each Blueprint
    # with the Flask application instance (app)
    app.register_blueprint(entries_api_blueprint, url_prefix='/api/entries')
    app.register_blueprint(blogs_api_blueprint, url_prefix='/api/blogs')


def configure_logging(app):
    if app.config['LOG_TO_STDOUT']:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.INFO)
        app.logger.addHandler(stream_handler)
    else:
        os.makedirs(app.instance_path, exist_ok=True)
        file_handler = RotatingFileHandler(os.path.join(app.instance_path, 'moodblog-api.log'),
                                           maxBytes=16384,
                                           backupCount=20)
        file_formatter = logging.Formatter('%(asctime)s %(levelname)s %(threadName)s-%(thread)d: %(message)s [in %(filename)s:%(lineno)d]')
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

    # Remove the default logger configured by Flask
    app.logger.removeHandler(default_handler)


def register_error_handlers(app):
    from moodblog.errors import BadRequestAlertException
    from moodblog.headers import failure_alert

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Return JSON instead of HTML for HTTP errors."""
        # Start with the correct headers and status code from the error
        response = e.get_response()
        payload = {
            'code': e.code,
            'name': e.name,
            'description': e.description,
        }
        # Rejected entries and blogs also report which rule was broken
        if isinstance(e, BadRequestAlertException):
            payload['entity_name'] = e.entity_name
            payload['error_key'] = e.error_key
            response.headers.update(failure_alert(e.entity_name, e.error_key))

        # Replace the body with JSON
        response.data = json.dumps(payload)
        response.content_type = 'application/json'
        return response


def register_cli_commands(app):
    @app.cli.command('init_db')
    def initialize_database():
        """Initialize the database."""
        database.drop_all()
        database.create_all()
        echo('Initializing the database!')

    @app.cli.command('fill_db')
    def fill_database():
        """Fill the database with initial data."""
        from moodblog.models import Blog, Entry
        from moodblog.mood import Reaction

        # Add a positive and a negative blog to the database
        new_blogs = [
            Blog(name='Sunny Side', handle='sunny', positive=True),
            Blog(name='Rainy Days', handle='rainy', positive=False)
        ]
        for blog in new_blogs:
            database.session.add(blog)
        database.session.flush()

        # Add a default set of entries that match the mood of their blog
        new_entries = [
            Entry(title='Great day', content='The sun was shining when I woke up this morning.',
                  reaction=Reaction.LIKE, blog_id=new_blogs[0].id),
            Entry(title='Picnic', content='We laughed through the whole picnic at the park.',
                  reaction=Reaction.HAHA, blog_id=new_blogs[0].id),
            Entry(title='Missed the bus', content='It rained and the bus left without me.',
                  reaction=Reaction.ANGRY, blog_id=new_blogs[1].id)
        ]
        for entry in new_entries:
            database.session.add(entry)

        database.session.commit()
        echo(f'Filled the database with {len(new_blogs)} blogs and {len(new_entries)} entries!')

    @app.cli.command('check_entries')
    def check_entries():
        """Report the stored entries that do not match the mood of their blog."""
        from moodblog.services import find_inconsistent_entries

        inconsistent = find_inconsistent_entries()
        for entry, error in inconsistent:
            echo(f'Entry {entry.id} (blog {entry.blog_id}): {error.error_key}')
        echo(f'Found {len(inconsistent)} inconsistent entries!')
