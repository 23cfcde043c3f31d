import os


# Determine the folder of the top-level directory of this project
BASEDIR = os.path.abspath(os.path.dirname(__file__))


def _marker_list(name, default):
    """Read a comma-separated list of marker words from an environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return [word.strip() for word in value.split(',') if word.strip()]


class Config(object):
    FLASK_ENV = 'development'
    TESTING = False
    SECRET_KEY = os.getenv('SECRET_KEY', default='BAD_SECRET_KEY')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    if os.getenv('DATABASE_URL'):
        SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL').replace('postgres://', 'postgresql://', 1)
    else:
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{os.path.join(BASEDIR, 'instance', 'app.db')}"
    LOG_TO_STDOUT = os.getenv('LOG_TO_STDOUT', default='False').lower() in ('true', '1', 'yes')

    # Prefix of the alert headers sent back with every create/update/delete
    APP_NAME = os.getenv('APP_NAME', default='moodblogApp')

    # APIFairy documentation
    APIFAIRY_TITLE = 'Mood Blog API'
    APIFAIRY_VERSION = '0.1'
    APIFAIRY_UI = 'elements'

    # Pagination
    ENTRIES_PER_PAGE = 20
    MAX_ENTRIES_PER_PAGE = 100

    # Mood-consistency keyword policy
    MOOD_NEGATIVE_MARKERS = _marker_list('MOOD_NEGATIVE_MARKERS', ['sad', 'fear', 'lonely'])
    MOOD_POSITIVE_MARKERS = _marker_list('MOOD_POSITIVE_MARKERS', ['love', 'happy', 'trust'])
    MOOD_WHOLE_FIELD_MATCH = os.getenv('MOOD_WHOLE_FIELD_MATCH', default='False').lower() in ('true', '1', 'yes')


class ProductionConfig(Config):
    FLASK_ENV = 'production'


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    LOG_TO_STDOUT = True
    SQLALCHEMY_DATABASE_URI = os.getenv('TEST_DATABASE_URI', default='sqlite://')
