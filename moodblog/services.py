"""
Business operations on blogs and entries.

The routes of the API blueprints call these functions; they take the
deserialized request data, apply the mood-consistency rules and write to the
database. Errors are raised as werkzeug HTTP exceptions (see `moodblog.errors`).
"""
from flask import abort, current_app
from sqlalchemy.exc import IntegrityError

from moodblog import database
from moodblog.errors import (BadRequestAlertException, EntityNotFoundError,
                             IdExistsError, IdMissingError)
from moodblog.models import Blog, Entry
from moodblog.mood import DEFAULT_POLICY, validate

ENTRY = 'entry'
BLOG = 'blog'


# ----------------
# Helper Functions
# ----------------

def mood_policy():
    """Return the keyword policy configured for the current application."""
    return current_app.extensions.get('mood_policy', DEFAULT_POLICY)


def _per_page(per_page):
    if per_page is None:
        per_page = current_app.config['ENTRIES_PER_PAGE']
    return min(per_page, current_app.config['MAX_ENTRIES_PER_PAGE'])


def _commit(instance):
    try:
        database.session.add(instance)
        database.session.commit()
    except IntegrityError:
        database.session.rollback()
        current_app.logger.info(f'Integrity error when saving {instance!r}')
        abort(400, 'The request references data that does not exist.')


# ----------
# Blog Lookup
# ----------

def get_polarity(blog_id):
    """Return the polarity of the blog, or None if there is no such blog."""
    blog = find_blog(blog_id)
    if blog is None:
        return None
    return blog.polarity


def check_mood(data):
    """Validate the entry data against the polarity of its blog.

    An entry that references an unknown blog is not validated.
    """
    polarity = get_polarity(data['blog_id'])
    if polarity is None:
        current_app.logger.warning(f"Blog {data['blog_id']} not found, mood validation skipped")
        return

    try:
        validate(polarity, data['reaction'], data['title'], data['content'], mood_policy())
    except BadRequestAlertException as e:
        marker = getattr(e, 'marker', None)
        current_app.logger.info(f"Entry rejected for {polarity.value} blog {data['blog_id']}: "
                                f"{e.error_key}" + (f" (marker '{marker}')" if marker else ''))
        raise


# -------
# Entries
# -------

def create_entry(data):
    if data.get('id') is not None:
        raise IdExistsError(ENTRY)

    check_mood(data)
    entry = Entry(title=data['title'],
                  content=data['content'],
                  reaction=data['reaction'],
                  blog_id=data['blog_id'],
                  date=data.get('date'))
    _commit(entry)
    current_app.logger.info(f'Created entry {entry.id} in blog {entry.blog_id}')
    return entry


def update_entry(data):
    if data.get('id') is None:
        raise IdMissingError(ENTRY)

    check_mood(data)
    entry = find_entry(data['id'])
    if entry is None:
        raise EntityNotFoundError(ENTRY, data['id'])

    entry.update(title=data['title'],
                 content=data['content'],
                 reaction=data['reaction'],
                 blog_id=data['blog_id'],
                 date=data.get('date'))
    _commit(entry)
    current_app.logger.info(f'Updated entry {entry.id}')
    return entry


def find_all_entries(page=1, per_page=None):
    return Entry.query.order_by(Entry.id).paginate(page=page, per_page=_per_page(per_page), error_out=False)


def find_entry(index):
    return Entry.query.filter_by(id=index).first()


def delete_entry(index):
    entry = find_entry(index)
    if entry is None:
        raise EntityNotFoundError(ENTRY, index)

    database.session.delete(entry)
    database.session.commit()
    current_app.logger.info(f'Deleted entry {index}')


def find_inconsistent_entries():
    """Re-validate every stored entry and return (entry, error) pairs for the rejected ones."""
    inconsistent = []
    policy = mood_policy()
    for entry in Entry.query.order_by(Entry.id).all():
        blog = find_blog(entry.blog_id)
        if blog is None:
            continue
        try:
            validate(blog.polarity, entry.reaction, entry.title, entry.content, policy)
        except BadRequestAlertException as e:
            inconsistent.append((entry, e))
    return inconsistent


# -----
# Blogs
# -----

def create_blog(data):
    if data.get('id') is not None:
        raise IdExistsError(BLOG)

    blog = Blog(name=data['name'], handle=data['handle'], positive=data['positive'])
    _commit(blog)
    current_app.logger.info(f'Created blog {blog.id} ({blog.polarity.value})')
    return blog


def update_blog(data):
    if data.get('id') is None:
        raise IdMissingError(BLOG)

    blog = find_blog(data['id'])
    if blog is None:
        raise EntityNotFoundError(BLOG, data['id'])

    blog.update(name=data['name'], handle=data['handle'], positive=data['positive'])
    _commit(blog)
    current_app.logger.info(f'Updated blog {blog.id}')
    return blog


def find_all_blogs(page=1, per_page=None):
    return Blog.query.order_by(Blog.id).paginate(page=page, per_page=_per_page(per_page), error_out=False)


def find_blog(index):
    return Blog.query.filter_by(id=index).first()


def delete_blog(index):
    """Delete the blog and its entries."""
    blog = find_blog(index)
    if blog is None:
        raise EntityNotFoundError(BLOG, index)

    database.session.delete(blog)
    database.session.commit()
    current_app.logger.info(f'Deleted blog {index} and its entries')
