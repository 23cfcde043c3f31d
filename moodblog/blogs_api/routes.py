from apifairy import arguments, body, other_responses, response
from flask import current_app

from moodblog import services
from moodblog.errors import EntityNotFoundError
from moodblog.headers import (entity_creation_alert, entity_deletion_alert,
                              entity_update_alert, pagination_headers)
from moodblog.schemas import BlogSchema, PaginationSchema

from . import blogs_api_blueprint


# -------
# Schemas
# -------

blog_schema = BlogSchema()
blogs_schema = BlogSchema(many=True)
pagination_schema = PaginationSchema()


# ------
# Routes
# ------

@blogs_api_blueprint.route('/', methods=['POST'])
@body(blog_schema)
@response(blog_schema, 201)
@other_responses({400: 'Bad Request'})
def create_blog(kwargs):
    """Create a new blog"""
    current_app.logger.debug(f'REST request to save Blog : {kwargs}')
    blog = services.create_blog(kwargs)
    return blog, entity_creation_alert('blog', blog.id)


@blogs_api_blueprint.route('/', methods=['PUT'])
@body(blog_schema)
@response(blog_schema)
@other_responses({400: 'Bad Request', 404: 'Blog not found'})
def update_blog(kwargs):
    """Update an existing blog"""
    current_app.logger.debug(f'REST request to update Blog : {kwargs}')
    blog = services.update_blog(kwargs)
    return blog, entity_update_alert('blog', blog.id)


@blogs_api_blueprint.route('/', methods=['GET'])
@arguments(pagination_schema)
@response(blogs_schema)
def list_blogs(args):
    """Retrieve a page of blogs"""
    current_app.logger.debug('REST request to get a page of Blogs')
    pagination = services.find_all_blogs(args['page'], args['per_page'])
    return pagination.items, pagination_headers(pagination, 'blogs_api.list_blogs')


@blogs_api_blueprint.route('/<int:index>', methods=['GET'])
@response(blog_schema)
@other_responses({404: 'Blog not found'})
def get_blog(index):
    """Retrieve a blog"""
    current_app.logger.debug(f'REST request to get Blog : {index}')
    blog = services.find_blog(index)
    if blog is None:
        raise EntityNotFoundError('blog', index)
    return blog


@blogs_api_blueprint.route('/<int:index>', methods=['DELETE'])
@other_responses({404: 'Blog not found'})
def delete_blog(index):
    """Delete a blog and its entries"""
    current_app.logger.debug(f'REST request to delete Blog : {index}')
    services.delete_blog(index)
    return '', 204, entity_deletion_alert('blog', index)
