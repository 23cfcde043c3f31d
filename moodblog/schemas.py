from marshmallow import validate

from moodblog import ma
from moodblog.mood import Reaction


# -------
# Schemas
# -------

class EntrySchema(ma.Schema):
    """Schema defining the attributes of a blog entry."""
    id = ma.Integer(allow_none=True, load_default=None)
    title = ma.String(required=True)
    content = ma.String(required=True)
    date = ma.DateTime(allow_none=True, load_default=None)
    reaction = ma.Enum(Reaction, required=True)
    blog_id = ma.Integer(required=True)


class BlogSchema(ma.Schema):
    """Schema defining the attributes of a blog."""
    id = ma.Integer(allow_none=True, load_default=None)
    name = ma.String(required=True, validate=validate.Length(min=3))
    handle = ma.String(required=True, validate=validate.Length(min=2))
    positive = ma.Boolean(required=True)


class PaginationSchema(ma.Schema):
    """Schema defining the query arguments for listing a page of items."""
    page = ma.Integer(load_default=1, validate=validate.Range(min=1))
    per_page = ma.Integer(load_default=None, validate=validate.Range(min=1))
