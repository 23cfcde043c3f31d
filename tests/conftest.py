import os

import pytest

from moodblog import create_app, database
from moodblog.models import Blog, Entry
from moodblog.mood import Reaction


# --------
# Fixtures
# --------

@pytest.fixture(scope='function')
def app():
    # Set the Testing configuration prior to creating the Flask application
    os.environ['CONFIG_TYPE'] = 'config.TestingConfig'
    flask_app = create_app()

    # Establish an application context and create the database tables
    with flask_app.app_context():
        database.create_all()
        yield flask_app
        database.session.remove()
        database.drop_all()


@pytest.fixture(scope='function')
def test_client(app):
    # Create a test client using the Flask application configured for testing
    with app.test_client() as testing_client:
        yield testing_client


@pytest.fixture(scope='function')
def cli_runner(app):
    return app.test_cli_runner()


@pytest.fixture(scope='function')
def positive_blog(app):
    blog = Blog(name='Sunny Side', handle='sunny', positive=True)
    database.session.add(blog)
    database.session.commit()
    return blog


@pytest.fixture(scope='function')
def negative_blog(app):
    blog = Blog(name='Rainy Days', handle='rainy', positive=False)
    database.session.add(blog)
    database.session.commit()
    return blog


@pytest.fixture(scope='function')
def add_entries(positive_blog):
    entries = [
        Entry(title='Great day', content='so happy', reaction=Reaction.LIKE, blog_id=positive_blog.id),
        Entry(title='Picnic', content='We laughed a lot.', reaction=Reaction.HAHA, blog_id=positive_blog.id),
        Entry(title='Walk', content='A long walk in the park.', reaction=Reaction.LIKE, blog_id=positive_blog.id),
    ]
    for entry in entries:
        database.session.add(entry)
    database.session.commit()
    return entries
